import pytest
from pydantic import ValidationError

from telegram_muxer.settings.config import BaseConfiguration


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in (
        "TELEGRAM__TOKEN",
        "TELEGRAM__USERNAME",
        "TELEGRAM__POLL_TIMEOUT",
        "DISPATCH__WORKERS",
        "DISPATCH__STRICT_PATTERNS",
        "DEBUG",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("TELEGRAM__TOKEN", "123:abc")

    config = BaseConfiguration(_env_file=None)

    assert config.telegram.token == "123:abc"
    assert config.telegram.username is None
    assert config.telegram.poll_timeout == 20
    assert config.dispatch.workers == 4
    assert config.dispatch.strict_patterns is False
    assert config.effective_log_level == "INFO"


def test_nested_environment_variables(monkeypatch):
    monkeypatch.setenv("TELEGRAM__TOKEN", "123:abc")
    monkeypatch.setenv("DISPATCH__WORKERS", "8")
    monkeypatch.setenv("DISPATCH__STRICT_PATTERNS", "true")
    monkeypatch.setenv("DEBUG", "1")

    config = BaseConfiguration(_env_file=None)

    assert config.dispatch.workers == 8
    assert config.dispatch.strict_patterns is True
    assert config.effective_log_level == "DEBUG"


def test_token_is_required():
    with pytest.raises(ValidationError):
        BaseConfiguration(_env_file=None)


def test_workers_must_be_positive(monkeypatch):
    monkeypatch.setenv("TELEGRAM__TOKEN", "123:abc")
    monkeypatch.setenv("DISPATCH__WORKERS", "0")
    with pytest.raises(ValidationError):
        BaseConfiguration(_env_file=None)


def test_env_file_is_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("TELEGRAM__TOKEN=from-file\nLOG_LEVEL=warning\n")

    config = BaseConfiguration(_env_file=env_file)

    assert config.telegram.token == "from-file"
    assert config.effective_log_level == "WARNING"
