import pytest
import yaml

from tie.config import Settings


def _write_config(tmp_path, entries):
    config_path = tmp_path / "tie.yml"
    config_path.write_text(yaml.safe_dump(entries), encoding="utf-8")
    return config_path


def test_defaults_without_config_path(monkeypatch):
    monkeypatch.delenv("TIE_CONFIG_PATH", raising=False)

    settings = Settings.get_settings()

    assert settings.log_level == "INFO"
    assert settings.supported_languages == ["python"]


def test_loads_settings_from_env_path(monkeypatch, tmp_path):
    config_path = _write_config(
        tmp_path, {"log_level": "DEBUG", "supported_languages": ["python", "java"]}
    )
    monkeypatch.setenv("TIE_CONFIG_PATH", str(config_path))

    settings = Settings.get_settings()

    assert settings.log_level == "DEBUG"
    assert settings.supported_languages == ["python", "java"]


def test_empty_file_uses_defaults(monkeypatch, tmp_path):
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")
    monkeypatch.setenv("TIE_CONFIG_PATH", str(config_path))

    assert Settings.get_settings() == Settings()


def test_missing_file_raises(monkeypatch, tmp_path):
    monkeypatch.setenv("TIE_CONFIG_PATH", str(tmp_path / "missing.yml"))

    with pytest.raises(FileNotFoundError):
        Settings.get_settings()


def test_malformed_yaml_raises(monkeypatch, tmp_path):
    config_path = tmp_path / "broken.yml"
    config_path.write_text("log_level: [unclosed", encoding="utf-8")
    monkeypatch.setenv("TIE_CONFIG_PATH", str(config_path))

    with pytest.raises(yaml.YAMLError):
        Settings.get_settings()
