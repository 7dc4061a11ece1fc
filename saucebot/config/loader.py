"""Configuration loading utilities."""

import json
from pathlib import Path

from pydantic import ValidationError

from saucebot.config.schema import Config


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded. Fatal at startup."""


# Flat keys used by the first release of the bot -> (section, camelCase key)
_LEGACY_KEYS: dict[str, tuple[str, str]] = {
    "UserAgent": ("http", "userAgent"),
    "GoogleSearchURL": ("google", "searchUrl"),
    "SearchTermPrefix": ("google", "searchTermPrefix"),
    "SearchTermSuffix": ("google", "searchTermSuffix"),
    "GoogleResultLinkPrefix": ("google", "resultLinkPrefix"),
    "GoogleResultLinkSuffix": ("google", "resultLinkSuffix"),
    "SaucenaoSearchURL": ("saucenao", "searchUrl"),
    "SaucenaoToken": ("saucenao", "apiKey"),
}


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".saucebot" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """
    Load configuration from file.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded configuration object.

    Raises:
        ConfigError: If the file is missing, is not valid JSON or fails validation.
    """
    path = config_path or get_config_path()

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Failed to decode configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid configuration file {path}: root JSON value must be an object")

    try:
        return Config.model_validate(_migrate_config(data))
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration file {path}: {e}") from e


def save_config(config: Config, config_path: Path | None = None) -> None:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Optional path to save to. Uses default if not provided.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(by_alias=True)

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def _migrate_config(data: dict) -> dict:
    """Migrate old config formats to current."""
    # Move flat legacy keys into their sections, never overriding new values
    for legacy_key, (section, key) in _LEGACY_KEYS.items():
        if legacy_key not in data:
            continue
        value = data.pop(legacy_key)
        section_cfg = data.setdefault(section, {})
        if not isinstance(section_cfg, dict):
            continue
        if not section_cfg.get(key):
            section_cfg[key] = value

    # Chat platform settings are not used any more
    data.pop("TelegramToken", None)

    return data
