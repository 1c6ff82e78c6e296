"""Custom exceptions for the storefront configuration package."""


class StorefrontError(Exception):
    """Base exception for the storefront configuration package."""

    pass


class ConfigurationError(StorefrontError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration is invalid."""

    pass
