"""Configuration loading and management."""

import os
from pathlib import Path
from typing import Optional

import yaml

from .config_models import MoodlogConfig

DEFAULT_CONFIG = MoodlogConfig().to_dict()


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    env_path = os.environ.get("MOODLOG_CONFIG")
    if env_path and Path(env_path).expanduser().exists():
        return Path(env_path).expanduser()

    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".moodlog" / "config.yaml",
        Path.home() / "moodlog" / "config.yaml",
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration from file or defaults.

    Returns dict. Use load_config_model() for typed access.
    """
    return load_config_model(config_path).to_dict()


def load_config_model(config_path: Optional[Path] = None) -> MoodlogConfig:
    """Load configuration as Pydantic model with validation."""
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    try:
        return MoodlogConfig.from_dict(base_config)
    except Exception as e:
        raise ValueError(f"Config validation failed: {e}")


def get_paths(config: dict) -> dict:
    """Get expanded paths from config."""
    paths = config.get("paths", DEFAULT_CONFIG["paths"])
    return {
        "data_dir": Path(paths["data_dir"]).expanduser(),
        "users_file": Path(paths["users_file"]).expanduser(),
        "log_file": Path(paths.get("log_file", "~/moodlog/moodlog.log")).expanduser(),
    }
