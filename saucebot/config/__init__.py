"""Configuration module for saucebot."""

from saucebot.config.loader import ConfigError, get_config_path, load_config, save_config
from saucebot.config.schema import Config

__all__ = ["Config", "ConfigError", "load_config", "save_config", "get_config_path"]
