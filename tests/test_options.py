import pytest

from pydantic import ValidationError

from storefront.config import LoaderOptions, ParseFailurePolicy


def test_defaults(process_env):
    options = LoaderOptions()

    assert options.env_file == ".env"
    assert options.on_parse_failure is ParseFailurePolicy.USE_ZERO
    assert options.log_level == "INFO"


def test_read_from_prefixed_variables(process_env):
    process_env["CONFIG_ENV_FILE"] = "/etc/storefront.env"
    process_env["CONFIG_ON_PARSE_FAILURE"] = "fail"
    process_env["config_log_level"] = "debug"

    options = LoaderOptions()

    assert options.env_file == "/etc/storefront.env"
    assert options.on_parse_failure is ParseFailurePolicy.FAIL
    assert options.log_level == "DEBUG"


def test_options_ignore_env_file(process_env, write_env_file):
    write_env_file("CONFIG_LOG_LEVEL=ERROR\n")

    assert LoaderOptions().log_level == "INFO"


def test_invalid_log_level(process_env):
    process_env["CONFIG_LOG_LEVEL"] = "LOUD"

    with pytest.raises(ValidationError):
        LoaderOptions()
