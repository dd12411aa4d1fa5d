"""Tests de `AppSettings`."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import DEFAULT_API_BASE_URL, AppSettings


def test_defaults(monkeypatch):
    for name in ("NOVAENV_API_BASE_URL", "NOVAENV_CREDENTIALS_PATH", "NOVAENV_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.credentials_path == Path.home() / "novaenv-cli-config.json"
    assert settings.http_timeout_seconds is None
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("NOVAENV_API_BASE_URL", "https://env.example.com/api/v1/")
    monkeypatch.setenv("NOVAENV_CREDENTIALS_PATH", str(tmp_path / "creds.json"))
    monkeypatch.setenv("NOVAENV_HTTP_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("NOVAENV_LOG_LEVEL", "debug")

    settings = AppSettings(_env_file=None)

    assert settings.api_base_url == "https://env.example.com/api/v1"
    assert settings.credentials_path == tmp_path / "creds.json"
    assert settings.http_timeout_seconds == 2.5
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "overrides",
    [
        {"api_base_url": "localhost:5005"},
        {"http_timeout_seconds": 0},
        {"log_level": "LOUD"},
    ],
)
def test_rejects_invalid_values(overrides):
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, **overrides)


def test_env_file_path_is_absolute(tmp_path):
    settings = AppSettings(_env_file=None, env_filename=".env.local")

    assert settings.env_file_path(tmp_path) == (tmp_path / ".env.local").resolve()
