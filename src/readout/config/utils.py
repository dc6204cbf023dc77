"""YAML helpers for layered formatter config."""

from pathlib import Path
from typing import Optional

import yaml


def deep_merge(base: dict, override: dict) -> dict:
    """Return base updated with override. Nested sections merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = deep_merge(current, value)
        merged[key] = value
    return merged


def load_yaml(path: Path) -> Optional[dict]:
    """Parse a config file. Missing, empty or non-mapping files give None."""
    if not path.is_file():
        return None
    data = yaml.safe_load(path.read_text())
    return data if isinstance(data, dict) else None
