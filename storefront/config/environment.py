"""Environment source with optional .env support.

Variables already present in the target environment always win over values
from the environment-file, even when they are set to an empty string.
"""

import os

from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional, Union

import structlog

from dotenv import dotenv_values


logger = structlog.get_logger()

PathLike = Union[str, Path]


def read_env_file(
    env_file: PathLike, interpolate: bool = True
) -> Optional[Dict[str, str]]:
    """Parse an environment-file.

    With ``interpolate`` set, ${VAR} references expand against the process
    environment and earlier keys of the file.

    Returns:
        The key/value pairs that carry a value, or None if the file is
        missing or cannot be read.
    """
    path = Path(env_file)
    if not path.is_file():
        return None

    try:
        values = dotenv_values(path, interpolate=interpolate, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Environment file unreadable", path=str(path), error=str(e))
        return None

    # Bare keys without "=" parse to None
    return {key: value for key, value in values.items() if value is not None}


def build_environment(
    env_file: Optional[PathLike],
    environ: Optional[Mapping[str, str]] = None,
) -> MutableMapping[str, str]:
    """Merge an environment-file into an environment without overwriting.

    Args:
        env_file: Path of the environment-file, or None to skip it
        environ: Injected environment. When omitted the live process
            environment is updated in place and returned.

    Returns:
        The merged environment
    """
    target: MutableMapping[str, str]
    if environ is None:
        target = os.environ
    else:
        target = dict(environ)

    if env_file is None:
        return target

    # Interpolation reads os.environ, so an injected environment skips it
    file_values = read_env_file(env_file, interpolate=environ is None)
    if file_values is None:
        logger.info(
            "No .env file found, using environment variables", path=str(env_file)
        )
        return target

    for key, value in file_values.items():
        if key not in target:
            target[key] = value

    logger.debug(
        "Environment file loaded", path=str(env_file), variables=len(file_values)
    )
    return target


def resolve(environ: Mapping[str, str], key: str, default: str) -> str:
    """Return the variable's value if it is non-empty, otherwise the default."""
    value = environ.get(key, "")
    if value != "":
        return value
    return default
