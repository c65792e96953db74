import pytest
from pydantic import ValidationError

from urlshortener.core.config import Settings, load_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No credentials in the environment and no .env file in reach."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CLIENT_ID", raising=False)
    monkeypatch.delenv("CLIENT_SECRET", raising=False)
    return monkeypatch


def test_settings_defaults(clean_env):
    clean_env.setenv("CLIENT_ID", "id")
    clean_env.setenv("CLIENT_SECRET", "secret")

    settings = Settings()
    assert settings.PORT == 3000
    assert settings.DEFAULT_VALIDITY_MINUTES == 30


@pytest.mark.parametrize("present", ["CLIENT_ID", "CLIENT_SECRET"])
def test_settings_require_both_credentials(clean_env, present):
    clean_env.setenv(present, "value")
    with pytest.raises(ValidationError):
        Settings()


def test_settings_read_env_file(clean_env, tmp_path):
    (tmp_path / ".env").write_text("CLIENT_ID=from-file\nCLIENT_SECRET=shh\nPORT=8080\n")

    settings = Settings()
    assert settings.CLIENT_ID == "from-file"
    assert settings.PORT == 8080


def test_load_settings_exits_without_credentials(clean_env):
    with pytest.raises(SystemExit) as exc_info:
        load_settings()
    assert exc_info.value.code == 1


@pytest.mark.parametrize("minutes", ["0", "-10"])
def test_settings_reject_non_positive_default_validity(clean_env, minutes):
    clean_env.setenv("CLIENT_ID", "id")
    clean_env.setenv("CLIENT_SECRET", "secret")
    clean_env.setenv("DEFAULT_VALIDITY_MINUTES", minutes)
    with pytest.raises(ValidationError):
        Settings()
