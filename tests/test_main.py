import json

import pytest

from structlog.testing import capture_logs

from storefront import main as cli


@pytest.fixture
def run_cli(process_env, monkeypatch, capsys):
    # setup_logging would cache loggers and hide them from capture_logs
    monkeypatch.setattr(cli, "setup_logging", lambda *args, **kwargs: None)

    def _run(*argv):
        with capture_logs() as logs:
            code = cli.main(list(argv))
        return code, capsys.readouterr().out, logs

    return _run


def test_prints_redacted_configuration(run_cli, process_env):
    process_env["DB_PASSWORD"] = "hunter2"

    code, out, _ = run_cli()

    assert code == 0
    printed = json.loads(out)
    assert printed["database"]["password"] == "**********"
    assert printed["server"] == {"port": "8080", "env": "development"}
    assert printed["token"]["expire_hours"] == 72
    assert "hunter2" not in out


def test_reveal_prints_secrets(run_cli, process_env):
    process_env["DB_PASSWORD"] = "hunter2"

    code, out, _ = run_cli("--reveal")

    assert code == 0
    assert json.loads(out)["database"]["password"] == "hunter2"


def test_env_file_argument(run_cli, write_env_file):
    path = write_env_file("R2_BUCKET_NAME=assets\n", name="custom.env")

    code, out, _ = run_cli("--env-file", str(path))

    assert code == 0
    assert json.loads(out)["object_storage"]["bucket_name"] == "assets"


def test_fail_policy_exits_with_error(run_cli, process_env):
    process_env["JWT_EXPIRE_HOURS"] = "forever"

    code, out, logs = run_cli("--on-parse-failure", "fail")

    assert code == 1
    assert out == ""
    assert logs[-1]["event"] == "Configuration error"


def test_invalid_options_exit_with_error(run_cli, process_env):
    process_env["CONFIG_LOG_LEVEL"] = "LOUD"

    code, out, logs = run_cli()

    assert code == 1
    assert out == ""
    assert logs[-1]["event"] == "Configuration error"


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.parse_args(["--version"])

    assert exc.value.code == 0
    assert "storefront-config" in capsys.readouterr().out
