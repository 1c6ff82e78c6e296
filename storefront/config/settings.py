"""Configuration records using Pydantic models.

Features:
- One immutable aggregate with five sections
- Secrets wrapped in SecretStr (redacted in str/repr and logs)
- Computed properties for the consumers that wire the sections up
"""

from datetime import timedelta
from typing import Any, Dict
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from storefront.exceptions import InvalidConfigError
from storefront.utils.constants import (
    PRODUCTION_ENV,
    R2_ENDPOINT_TEMPLATE,
    REDACTED,
)


class _Section(BaseModel):
    """Base for the immutable configuration records."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def summary(self, reveal: bool = False) -> Dict[str, Any]:
        """Plain mapping of every field, secrets redacted unless revealed."""
        result: Dict[str, Any] = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, SecretStr):
                value = value.get_secret_value() if reveal else str(value)
            result[name] = value
        return result


class ServerSettings(_Section):
    """HTTP server settings."""

    port: str = Field(..., description="Listen port")
    env: str = Field(..., description="Deployment environment name")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.env == PRODUCTION_ENV


class DatabaseSettings(_Section):
    """PostgreSQL connection settings."""

    host: str = Field(..., description="Database host")
    port: str = Field(..., description="Database port")
    user: str = Field(..., description="Database user")
    password: SecretStr = Field(..., description="Database password")
    name: str = Field(..., description="Database name")
    ssl_mode: str = Field(..., description="libpq sslmode")

    @property
    def password_str(self) -> str:
        """Get database password as string."""
        return self.password.get_secret_value()

    def dsn(self, reveal: bool = False) -> str:
        """Build a libpq connection URL.

        The password is masked unless ``reveal`` is set, so the default
        rendering is safe to log.
        """
        credentials = quote(self.user, safe="")
        if self.password_str:
            secret = quote(self.password_str, safe="") if reveal else REDACTED
            credentials += ":" + secret
        return (
            f"postgresql://{credentials}@{self.host}:{self.port}/{self.name}"
            f"?sslmode={self.ssl_mode}"
        )


class CacheSettings(_Section):
    """Redis settings."""

    url: str = Field(..., description="Redis URL, empty disables the cache")

    @property
    def enabled(self) -> bool:
        return self.url != ""


class TokenSettings(_Section):
    """JWT issuance settings."""

    secret: SecretStr = Field(..., description="Signing secret")
    expire_hours: int = Field(..., description="Token lifetime in hours")

    @property
    def secret_str(self) -> str:
        """Get signing secret as string."""
        return self.secret.get_secret_value()

    @property
    def expires_in(self) -> timedelta:
        """Token lifetime.

        Raises:
            InvalidConfigError: If the lifetime does not fit in a timedelta
        """
        try:
            return timedelta(hours=self.expire_hours)
        except OverflowError as e:
            raise InvalidConfigError(
                f"expire_hours out of range: {self.expire_hours}"
            ) from e


class ObjectStorageSettings(_Section):
    """Cloudflare R2 object storage settings."""

    account_id: str = Field(..., description="R2 account identifier")
    access_key_id: SecretStr = Field(..., description="R2 access key id")
    secret_access_key: SecretStr = Field(..., description="R2 secret access key")
    bucket_name: str = Field(..., description="Bucket for product images")
    public_url: str = Field(..., description="Public base URL of the bucket")

    @property
    def access_key_id_str(self) -> str:
        return self.access_key_id.get_secret_value()

    @property
    def secret_access_key_str(self) -> str:
        return self.secret_access_key.get_secret_value()

    @property
    def endpoint_url(self) -> str:
        """S3-compatible endpoint for the account, empty without an account."""
        if not self.account_id:
            return ""
        return R2_ENDPOINT_TEMPLATE.format(account_id=self.account_id)


class Settings(_Section):
    """Application settings resolved from the environment."""

    server: ServerSettings
    database: DatabaseSettings
    cache: CacheSettings
    token: TokenSettings
    object_storage: ObjectStorageSettings

    def summary(self, reveal: bool = False) -> Dict[str, Any]:
        """Nested plain mapping of every section."""
        return {
            name: getattr(self, name).summary(reveal=reveal)
            for name in type(self).model_fields
        }
