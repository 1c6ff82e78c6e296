"""Loader options using Pydantic Settings.

These tune the loader itself and are read from ``CONFIG_*`` process
variables only, never from the environment-file.
"""

from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront.utils.constants import DEFAULT_ENV_FILE


class ParseFailurePolicy(str, Enum):
    """What to do when an integer variable does not parse."""

    USE_ZERO = "use_zero"
    USE_DEFAULT = "use_default"
    FAIL = "fail"


class LoaderOptions(BaseSettings):
    """Options controlling how configuration is loaded."""

    env_file: str = Field(
        DEFAULT_ENV_FILE, description="Environment-file path, empty to disable"
    )
    on_parse_failure: ParseFailurePolicy = Field(
        ParseFailurePolicy.USE_ZERO,
        description="Policy for unparsable integer variables",
    )
    log_level: str = Field("INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_prefix="CONFIG_", case_sensitive=False, extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()  # type: ignore[no-any-return]
