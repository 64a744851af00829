"""Configuration loading with layered overrides."""

from pathlib import Path
from typing import Any

import yaml

from proclimits.core.output import FORMATS

PROJECT_CONFIG = Path(".proclimits.yaml")

DEFAULTS: dict[str, Any] = {
    "format": "plain",
    "log": False,
    "log_dir": None,
}

# A value failing its check is treated as unset.
VALIDATORS = {
    "format": lambda value: value in FORMATS,
    "log": lambda value: isinstance(value, bool),
    "log_dir": lambda value: isinstance(value, str) and value != "",
}


def user_config_path() -> Path:
    return Path.home() / ".config" / "proclimits" / "config.yaml"


def load_config_file(path: Path) -> dict[str, Any]:
    """Load a YAML config file if it exists, keeping only valid settings."""
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError):
        return {}
    if not isinstance(data, dict):
        return {}
    return {
        key: value
        for key, value in data.items()
        if key in VALIDATORS and VALIDATORS[key](value)
    }


def load_config(paths: list[Path] | None = None) -> dict[str, Any]:
    """Resolve every known setting with project -> user -> default precedence."""
    if paths is None:
        paths = [PROJECT_CONFIG, user_config_path()]

    config = dict(DEFAULTS)
    for path in reversed(paths):
        config.update(load_config_file(path))
    return config
