"""Command line entry point: print the resolved storefront configuration."""

import argparse
import json
import logging
import sys

from pathlib import Path
from typing import List, Optional

import structlog

from storefront import __version__
from storefront.config.loader import load_config, load_options
from storefront.config.options import ParseFailurePolicy
from storefront.exceptions import ConfigurationError
from storefront.utils.constants import APP_DESCRIPTION, APP_NAME


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure structured logging on stderr."""
    log_level = logging.DEBUG if debug else getattr(logging, level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers
    root_logger.handlers = []

    # stdout carries the command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            (
                structlog.processors.JSONRenderer()
                if not debug
                else structlog.dev.ConsoleRenderer()
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {__version__}"
    )

    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    parser.add_argument("--env-file", type=Path, help="Path to the environment-file")

    parser.add_argument(
        "--on-parse-failure",
        choices=[policy.value for policy in ParseFailurePolicy],
        help="Policy for unparsable integer variables",
    )

    parser.add_argument(
        "--reveal", action="store_true", help="Print secret values in clear text"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Resolve the configuration and print it as JSON.

    Returns:
        Exit code: 0 on success, 1 on a configuration error
    """
    args = parse_args(argv)
    logger = structlog.get_logger()

    try:
        options = load_options()
    except ConfigurationError as e:
        setup_logging(debug=args.debug)
        logger.error("Configuration error", error=str(e))
        return 1

    setup_logging(level=options.log_level, debug=args.debug)

    env_file = args.env_file if args.env_file is not None else options.env_file
    try:
        config = load_config(
            env_file=env_file or None,
            on_parse_failure=args.on_parse_failure or options.on_parse_failure,
        )
    except ConfigurationError as e:
        logger.error("Configuration error", error=str(e))
        return 1

    print(json.dumps(config.summary(reveal=args.reveal), indent=2))
    return 0


def run() -> None:
    """Synchronous entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    run()
