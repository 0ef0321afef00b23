"""
Configuration loading following kkb_fastapi pattern.

Settings live in TOML files under app/config/, one per environment.
"""
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import toml

from app.utils.constants import ConfigFile

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"

__all__ = ["Config", "ConfigFile", "get_config", "get_config_file_for_env"]


class Config:
    """Parsed configuration file."""

    def __init__(self, config_file: str, data: dict[str, Any]):
        self.config_file = config_file
        self.data = data

    def section(self, name: str) -> dict[str, Any]:
        """Return a top-level section, or an empty dict when absent."""
        return self.data.get(name, {})

    def __repr__(self):
        return f"<Config: {self.config_file}>"


@lru_cache
def get_config(config_file: str) -> Config:
    """
    Load and cache a configuration file.

    Args:
        config_file: File name under app/config (e.g., "production.toml")

    Returns:
        Parsed Config

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = CONFIG_DIR / config_file
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    logging.info(f"Loading config from {path}")
    return Config(config_file, toml.load(path))


def get_config_file_for_env() -> str:
    """Pick the config file from the ENVIRONMENT variable (default development)."""
    env = os.getenv("ENVIRONMENT", "development")
    return f"{env}.toml"
