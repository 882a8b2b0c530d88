import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_config_dir


def test_defaults():
    settings = AppSettings(_env_file=None)
    assert settings.default_message == "Time is up!"
    assert settings.repeat_interval_seconds == 30.0
    assert settings.clear_screen is True
    assert settings.strict_parsing is False
    assert settings.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("REMIND_DEFAULT_MESSAGE", "Stand up")
    monkeypatch.setenv("REMIND_REPEAT_INTERVAL_SECONDS", "5")
    monkeypatch.setenv("REMIND_STRICT_PARSING", "true")
    settings = AppSettings(_env_file=None)
    assert settings.default_message == "Stand up"
    assert settings.repeat_interval_seconds == 5.0
    assert settings.strict_parsing is True


def test_dotenv_in_working_directory(clean_env):
    (clean_env / ".env").write_text("REMIND_CLEAR_SCREEN=false\n", encoding="utf-8")
    settings = AppSettings()
    assert settings.clear_screen is False


def test_rejects_non_positive_interval(monkeypatch):
    monkeypatch.setenv("REMIND_REPEAT_INTERVAL_SECONDS", "0")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_user_config_dir_honours_xdg(monkeypatch, tmp_path):
    monkeypatch.setattr("core.config.sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    assert get_user_config_dir() == tmp_path / "remind"
