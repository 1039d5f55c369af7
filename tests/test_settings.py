from __future__ import annotations

from pathlib import Path

import pytest

from objectstore.exceptions import ConfigurationError
from objectstore.settings import CONFIG_ENV, DemoSettings, Settings, get_settings


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch):
    monkeypatch.delenv(CONFIG_ENV, raising=False)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_when_default_file_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = Settings.load()
    assert settings.logging.level == "INFO"
    assert settings.logging.json_format is False
    assert settings.demo.bucket == "photos"
    assert settings.demo.payload == b"\x01\x02"


def test_load_from_explicit_path(tmp_path):
    config = _write(
        tmp_path / "store.yaml",
        "logging:\n  level: debug\n  json_format: true\n"
        "demo:\n  bucket: docs\n  key: readme.txt\n  payload_hex: 'de ad be ef'\n",
    )
    settings = Settings.load(config)
    assert settings.logging.level == "DEBUG"
    assert settings.logging.json_format is True
    assert settings.demo.bucket == "docs"
    assert settings.demo.payload == b"\xde\xad\xbe\xef"


def test_load_from_environment_variable(tmp_path, monkeypatch):
    config = _write(tmp_path / "env.yaml", "demo:\n  key: from-env\n")
    monkeypatch.setenv(CONFIG_ENV, str(config))
    assert Settings.load().demo.key == "from-env"


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        Settings.load(tmp_path / "absent.yaml")
    assert "absent.yaml" in exc_info.value.details["path"]


def test_missing_env_path_raises(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "absent.yaml"))
    with pytest.raises(ConfigurationError):
        Settings.load()


def test_empty_file_yields_defaults(tmp_path):
    assert Settings.load(_write(tmp_path / "empty.yaml", "")) == Settings()


@pytest.mark.parametrize(
    "text",
    [
        "logging:\n  level: LOUD\n",
        "demo:\n  payload_hex: xyz\n",
        "demo:\n  bucket: ''\n",
        "- just\n- a list\n",
        "logging: [unclosed\n",
    ],
    ids=["bad-level", "bad-hex", "empty-bucket", "not-a-mapping", "bad-yaml"],
)
def test_invalid_configuration_raises(tmp_path, text):
    with pytest.raises(ConfigurationError):
        Settings.load(_write(tmp_path / "bad.yaml", text))


def test_demo_payload_decodes_hex():
    assert DemoSettings(payload_hex="").payload == b""
    assert DemoSettings(payload_hex="FF00").payload_hex == "ff00"


def test_shipped_default_config_is_valid():
    default = Path(__file__).parent.parent / "config" / "default.yaml"
    settings = Settings.load(default)
    assert settings.demo.key == "cat.png"


def test_get_settings_is_cached(tmp_path):
    config = _write(tmp_path / "cached.yaml", "demo:\n  bucket: cached\n")
    get_settings.cache_clear()
    try:
        first = get_settings(str(config))
        assert first.demo.bucket == "cached"
        assert get_settings(str(config)) is first
    finally:
        get_settings.cache_clear()
