"""Configuration loading and management."""

from datetime import tzinfo
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from journal.dates import get_timezone

from .config_models import PeacefullyConfig

DEFAULT_CONFIG_PATH = Path.home() / "peacefully" / "config.yaml"


def find_config() -> Optional[Path]:
    """Find config file in standard locations."""
    locations = [
        Path.cwd() / "config.yaml",
        Path.home() / ".peacefully" / "config.yaml",
        DEFAULT_CONFIG_PATH,
    ]
    for loc in locations:
        if loc.exists():
            return loc
    return None


def load_config(config_path: Optional[Path] = None) -> PeacefullyConfig:
    """Load configuration as Pydantic model with validation.

    Raises:
        ValueError: If the file is not valid YAML or fails validation
    """
    base_config = {}

    path = config_path or find_config()
    if path and path.exists():
        try:
            with open(path) as f:
                base_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")

    if not isinstance(base_config, dict):
        raise ValueError(f"Config file must contain a mapping, got {type(base_config).__name__}")

    try:
        return PeacefullyConfig.from_dict(base_config)
    except ValidationError as e:
        raise ValueError(f"Config validation failed: {e}")


def save_config(config: PeacefullyConfig, config_path: Optional[Path] = None) -> Path:
    """Write config as YAML. Defaults to the discovered file or ~/peacefully."""
    path = config_path or find_config() or DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)
    return path


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def update_config(updates: dict, config_path: Optional[Path] = None) -> PeacefullyConfig:
    """Merge ``updates`` into the stored config, validate, and save."""
    current = load_config(config_path)
    merged = _deep_merge(current.to_dict(), updates)
    try:
        config = PeacefullyConfig.from_dict(merged)
    except ValidationError as e:
        raise ValueError(f"Config validation failed: {e}")
    save_config(config, config_path)
    return config


def get_tz(config: PeacefullyConfig) -> Optional[tzinfo]:
    """Configured zone for day keys, None for host local time."""
    return get_timezone(config.display.timezone)
