from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from objectstore.exceptions import ConfigurationError

# Load .env file from project root
_env_path = Path(__file__).parent.parent / ".env"
if _env_path.exists():
    load_dotenv(_env_path)

DEFAULT_CONFIG_PATH = Path("config/default.yaml")
CONFIG_ENV = "OBJECTSTORE_CONFIG"

_LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class LoggingSettings(BaseModel):
    level: str = "INFO"
    json_format: bool = False
    log_file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> str:
        if value is None:
            return "INFO"
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level '{value}'")
        return level


class DemoSettings(BaseModel):
    bucket: str = Field("photos", min_length=1)
    key: str = Field("cat.png", min_length=1)
    # Hex-encoded so arbitrary bytes survive YAML
    payload_hex: str = "0102"

    @field_validator("payload_hex", mode="before")
    @classmethod
    def _validate_hex(cls, value: Any) -> str:
        text = "" if value is None else str(value).replace(" ", "")
        try:
            bytes.fromhex(text)
        except ValueError as exc:
            raise ValueError("payload_hex must be a hex string") from exc
        return text.lower()

    @property
    def payload(self) -> bytes:
        return bytes.fromhex(self.payload_hex)


class Settings(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    demo: DemoSettings = Field(default_factory=DemoSettings)

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from YAML configuration file.

        Args:
            path: Optional path to configuration file. If not provided, uses
                the OBJECTSTORE_CONFIG environment variable or defaults to
                config/default.yaml.

        Returns:
            Settings instance with loaded configuration. Built-in defaults are
            used when no path was requested and the default file is absent.

        Raises:
            ConfigurationError: If a requested file does not exist or the
                configuration is invalid.
        """
        env_path = os.getenv(CONFIG_ENV)
        config_path = path or (Path(env_path) if env_path else DEFAULT_CONFIG_PATH)
        if not config_path.exists():
            if path is None and not env_path:
                return cls()
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                {"path": str(config_path)},
            )
        with config_path.open("r", encoding="utf-8") as fp:
            try:
                payload = yaml.safe_load(fp) or {}
            except yaml.YAMLError as exc:
                raise ConfigurationError(
                    f"Invalid configuration: {exc}", {"path": str(config_path)}
                ) from exc
        if not isinstance(payload, dict):
            raise ConfigurationError(
                "Invalid configuration: top level must be a mapping",
                {"path": str(config_path)},
            )
        try:
            return cls(**payload)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid configuration: {exc}", {"path": str(config_path)}
            ) from exc


@lru_cache(maxsize=1)
def get_settings(path: str | None = None) -> Settings:
    return Settings.load(Path(path) if path else None)


__all__ = [
    "Settings",
    "LoggingSettings",
    "DemoSettings",
    "get_settings",
]
