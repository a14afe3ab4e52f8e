"""
Session Configuration

Loads settings from environment variables and provides defaults.
Supports loading from a .env file at the project root using python-dotenv.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from smart_picker.models.config import DEFAULT_CONFIG, PickerConfig

# Single .env at project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class SessionSettings:
    """Session settings."""

    # Starting adventurousness; None = PickerConfig.default_adventure
    adventure: Optional[float] = None

    # No-repeat queue length; None = PickerConfig.recent_limit
    recent_limit: Optional[int] = None

    # Seed for the picker's random generator; None = fresh entropy
    seed: Optional[int] = None

    # Logging
    log_level: str = "INFO"

    # Optional JSON file with PickerConfig overrides (see PickerConfig.from_dict)
    config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "SessionSettings":
        """Load settings from environment variables."""
        base_dir = Path(__file__).parent.parent

        def _float_env(key: str) -> Optional[float]:
            v = os.getenv(key, "").strip()
            return float(v) if v else None

        def _int_env(key: str) -> Optional[int]:
            v = os.getenv(key, "").strip()
            return int(v) if v else None

        config_path = None
        raw_path = os.getenv("PICKER_CONFIG_PATH", "").strip()
        if raw_path:
            p = Path(raw_path)
            config_path = p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            adventure=_float_env("PICKER_ADVENTURE"),
            recent_limit=_int_env("PICKER_RECENT_LIMIT"),
            seed=_int_env("PICKER_SEED"),
            log_level=os.getenv("PICKER_LOG_LEVEL", "INFO").strip().upper() or "INFO",
            config_path=config_path,
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the settings.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.adventure is not None and not 0.0 <= self.adventure <= 1.0:
            errors.append(f"PICKER_ADVENTURE must be within [0, 1], got {self.adventure}")

        if self.recent_limit is not None and self.recent_limit < 0:
            errors.append(f"PICKER_RECENT_LIMIT must be >= 0, got {self.recent_limit}")

        if logging.getLevelName(self.log_level) == f"Level {self.log_level}":
            errors.append(f"Unknown PICKER_LOG_LEVEL: {self.log_level}")

        if self.config_path is not None and not self.config_path.is_file():
            errors.append(f"Picker config file not found: {self.config_path}")

        return len(errors) == 0, errors

    def picker_config(self) -> PickerConfig:
        """PickerConfig from config_path (if set) with env overrides applied."""
        data = {}
        if self.config_path is not None:
            with open(self.config_path) as f:
                data = json.load(f)
        if self.recent_limit is not None:
            data["recent_limit"] = self.recent_limit
        if self.adventure is not None:
            data["default_adventure"] = self.adventure
        if not data:
            return DEFAULT_CONFIG
        return PickerConfig.from_dict(data)


def configure_logging(level: Optional[str] = None) -> None:
    """Basic stream logging for the picker packages."""
    logging.basicConfig(level=(level or get_settings().log_level), format=LOG_FORMAT)


# Global settings instance
_settings: Optional[SessionSettings] = None


def get_settings() -> SessionSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = SessionSettings.from_env()
    return _settings


def reload_settings() -> SessionSettings:
    """Reload settings from environment."""
    global _settings
    _settings = None
    return get_settings()
