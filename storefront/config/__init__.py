"""Storefront configuration module."""

from .loader import load_config
from .options import LoaderOptions, ParseFailurePolicy
from .settings import (
    CacheSettings,
    DatabaseSettings,
    ObjectStorageSettings,
    ServerSettings,
    Settings,
    TokenSettings,
)

__all__ = [
    "CacheSettings",
    "DatabaseSettings",
    "LoaderOptions",
    "ObjectStorageSettings",
    "ParseFailurePolicy",
    "ServerSettings",
    "Settings",
    "TokenSettings",
    "load_config",
]
