# nosec B101

import pytest
from pydantic import ValidationError

from config.settings import Settings


def test_defaults(monkeypatch):
    for name in ("WALUTOMAT_BASE_URL", "CURRENCY_PAIRS", "REQUEST_TIMEOUT", "WALUTOMAT_API_KEY"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.WALUTOMAT_BASE_URL == "https://api.walutomat.pl"
    assert settings.currency_pairs == ["USDPLN", "GBPPLN", "CHFPLN", "EURPLN"]
    assert settings.REQUEST_TIMEOUT == 10
    assert settings.WALUTOMAT_API_KEY == ""


def test_currency_pairs_are_normalized():
    settings = Settings(_env_file=None, CURRENCY_PAIRS=" usdpln, EURPLN ,,")

    assert settings.currency_pairs == ["USDPLN", "EURPLN"]


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("WALUTOMAT_API_KEY", "env-key")
    monkeypatch.setenv("currency_pairs", "CHFPLN")
    monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")

    settings = Settings(_env_file=None)

    assert settings.WALUTOMAT_API_KEY == "env-key"
    assert settings.currency_pairs == ["CHFPLN"]
    assert settings.REQUEST_TIMEOUT == 2.5


def test_reads_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("WALUTOMAT_API_KEY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("WALUTOMAT_API_KEY=file-key\nLOG_JSON=true\n")

    settings = Settings(_env_file=env_file)

    assert settings.WALUTOMAT_API_KEY == "file-key"
    assert settings.LOG_JSON is True


@pytest.mark.parametrize("value", ["None", "none", "null", ""])
def test_request_timeout_can_be_disabled_from_environment(monkeypatch, value):
    monkeypatch.setenv("REQUEST_TIMEOUT", value)

    settings = Settings(_env_file=None)

    assert settings.REQUEST_TIMEOUT is None


def test_request_timeout_can_be_disabled_from_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("REQUEST_TIMEOUT=None\n")

    settings = Settings(_env_file=env_file)

    assert settings.REQUEST_TIMEOUT is None


def test_invalid_request_timeout_is_rejected(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "abc")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_log_level_is_normalized():
    settings = Settings(_env_file=None, LOG_LEVEL=" debug ")

    assert settings.LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None, LOG_LEVEL="verbose")

    assert "LOG_LEVEL must be one of" in str(exc_info.value)
