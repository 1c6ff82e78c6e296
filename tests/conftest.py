import os

import pytest

CONFIG_VARIABLES = [
    "PORT",
    "ENV",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DB_SSLMODE",
    "REDIS_URL",
    "JWT_SECRET",
    "JWT_EXPIRE_HOURS",
    "R2_ACCOUNT_ID",
    "R2_ACCESS_KEY_ID",
    "R2_SECRET_ACCESS_KEY",
    "R2_BUCKET_NAME",
    "R2_PUBLIC_URL",
]


@pytest.fixture
def process_env(monkeypatch, tmp_path):
    """A throwaway process environment without any storefront variables.

    The working directory moves to an empty temp dir so no stray .env is read.
    """
    environ = {
        key: value
        for key, value in os.environ.items()
        if key not in CONFIG_VARIABLES and not key.upper().startswith("CONFIG_")
    }
    monkeypatch.setattr(os, "environ", environ)
    monkeypatch.chdir(tmp_path)
    return environ


@pytest.fixture
def write_env_file(tmp_path):
    def _write(content, name=".env"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
