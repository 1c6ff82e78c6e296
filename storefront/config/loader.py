"""Configuration loading."""

import re

from typing import Any, Mapping, Optional, Union

import structlog

from pydantic import ValidationError

from storefront.exceptions import ConfigurationError, InvalidConfigError
from storefront.utils.constants import (
    DEFAULT_DB_HOST,
    DEFAULT_DB_NAME,
    DEFAULT_DB_PASSWORD,
    DEFAULT_DB_PORT,
    DEFAULT_DB_SSLMODE,
    DEFAULT_DB_USER,
    DEFAULT_ENV,
    DEFAULT_JWT_EXPIRE_HOURS,
    DEFAULT_JWT_SECRET,
    DEFAULT_PORT,
    DEFAULT_R2_ACCESS_KEY_ID,
    DEFAULT_R2_ACCOUNT_ID,
    DEFAULT_R2_BUCKET_NAME,
    DEFAULT_R2_PUBLIC_URL,
    DEFAULT_R2_SECRET_ACCESS_KEY,
    DEFAULT_REDIS_URL,
)

from .environment import PathLike, build_environment, resolve
from .options import LoaderOptions, ParseFailurePolicy
from .settings import (
    CacheSettings,
    DatabaseSettings,
    ObjectStorageSettings,
    ServerSettings,
    Settings,
    TokenSettings,
)


logger = structlog.get_logger()

_INTEGER = re.compile(r"[+-]?[0-9]+")

# Signed 64-bit range
INT_MIN = -(2**63)
INT_MAX = 2**63 - 1

# Sentinel: take the environment-file path from LoaderOptions
_FROM_OPTIONS: Any = object()


def parse_int(value: str) -> int:
    """Parse a base-10 integer strictly.

    Only an optional sign followed by ASCII digits is accepted; surrounding
    whitespace and digit separators are rejected.

    Raises:
        ValueError: If the value is not an integer or is outside the
            signed 64-bit range
    """
    if not _INTEGER.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f"integer out of range: {value!r}")
    return number


def resolve_int(
    environ: Mapping[str, str],
    key: str,
    default: str,
    policy: ParseFailurePolicy,
) -> int:
    """Resolve an integer variable, applying the parse-failure policy."""
    raw = resolve(environ, key, default)
    try:
        return parse_int(raw)
    except ValueError as e:
        if policy is ParseFailurePolicy.FAIL:
            raise InvalidConfigError(f"{key} must be an integer, got {raw!r}") from e
        if policy is ParseFailurePolicy.USE_DEFAULT:
            logger.warning(
                "Invalid integer, using default", variable=key, default=default
            )
            return parse_int(default)
        return 0


def load_options() -> LoaderOptions:
    """Read loader options from CONFIG_* variables.

    Raises:
        ConfigurationError: If an option is invalid
    """
    try:
        return LoaderOptions()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid loader options: {e}") from e


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[PathLike] = _FROM_OPTIONS,
    on_parse_failure: Optional[Union[ParseFailurePolicy, str]] = None,
) -> Settings:
    """Load configuration from the environment.

    Args:
        environ: Environment to read instead of the process environment.
            An injected mapping is never modified.
        env_file: Environment-file to merge in; None skips it. Defaults to
            ``CONFIG_ENV_FILE`` (``.env``).
        on_parse_failure: Policy for an unparsable ``JWT_EXPIRE_HOURS``.
            Defaults to ``CONFIG_ON_PARSE_FAILURE`` (``use_zero``).

    Returns:
        Immutable Settings instance

    Raises:
        InvalidConfigError: If an integer does not parse under the fail policy
        ConfigurationError: If the loader options are invalid
    """
    if env_file is _FROM_OPTIONS or on_parse_failure is None:
        options = load_options()
        if env_file is _FROM_OPTIONS:
            env_file = options.env_file or None
        if on_parse_failure is None:
            on_parse_failure = options.on_parse_failure

    try:
        policy = ParseFailurePolicy(on_parse_failure)
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown parse-failure policy: {on_parse_failure!r}"
        ) from e

    env = build_environment(env_file, environ)

    settings = Settings(
        server=ServerSettings(
            port=resolve(env, "PORT", DEFAULT_PORT),
            env=resolve(env, "ENV", DEFAULT_ENV),
        ),
        database=DatabaseSettings(
            host=resolve(env, "DB_HOST", DEFAULT_DB_HOST),
            port=resolve(env, "DB_PORT", DEFAULT_DB_PORT),
            user=resolve(env, "DB_USER", DEFAULT_DB_USER),
            password=resolve(env, "DB_PASSWORD", DEFAULT_DB_PASSWORD),
            name=resolve(env, "DB_NAME", DEFAULT_DB_NAME),
            ssl_mode=resolve(env, "DB_SSLMODE", DEFAULT_DB_SSLMODE),
        ),
        cache=CacheSettings(
            url=resolve(env, "REDIS_URL", DEFAULT_REDIS_URL),
        ),
        token=TokenSettings(
            secret=resolve(env, "JWT_SECRET", DEFAULT_JWT_SECRET),
            expire_hours=resolve_int(
                env, "JWT_EXPIRE_HOURS", DEFAULT_JWT_EXPIRE_HOURS, policy
            ),
        ),
        object_storage=ObjectStorageSettings(
            account_id=resolve(env, "R2_ACCOUNT_ID", DEFAULT_R2_ACCOUNT_ID),
            access_key_id=resolve(env, "R2_ACCESS_KEY_ID", DEFAULT_R2_ACCESS_KEY_ID),
            secret_access_key=resolve(
                env, "R2_SECRET_ACCESS_KEY", DEFAULT_R2_SECRET_ACCESS_KEY
            ),
            bucket_name=resolve(env, "R2_BUCKET_NAME", DEFAULT_R2_BUCKET_NAME),
            public_url=resolve(env, "R2_PUBLIC_URL", DEFAULT_R2_PUBLIC_URL),
        ),
    )

    logger.info("Configuration loaded", env=settings.server.env)
    logger.debug("Resolved configuration", config=settings.summary())

    return settings
