"""Formatter defaults, layered from YAML files.

Priority chain: bundled defaults < ~/.config/readout/config.yaml < .readout/config.yaml
Sections merge key by key; lists and scalars replace.
"""

import importlib.resources
from pathlib import Path
from typing import Any, Optional

import yaml

from readout.config.utils import deep_merge, load_yaml
from readout.utils.debug import debug_log

_config: Optional[dict] = None
_loaded_sources: list[str] = []

GLOBAL_CONFIG = Path.home() / ".config" / "readout" / "config.yaml"
PROJECT_CONFIG = Path(".readout") / "config.yaml"


def _load_defaults() -> dict:
    """Read defaults/config.yaml shipped inside the package."""
    try:
        resource = importlib.resources.files("readout") / "defaults" / "config.yaml"
        return yaml.safe_load(resource.read_text())
    except (FileNotFoundError, TypeError):
        # Source checkout without package metadata
        dev_path = Path(__file__).parent.parent / "defaults" / "config.yaml"
        if dev_path.is_file():
            return yaml.safe_load(dev_path.read_text())
        raise FileNotFoundError("Could not find defaults/config.yaml")


def load_config() -> dict:
    """Build the config from defaults, then global and project overrides."""
    global _loaded_sources
    result = _load_defaults()
    sources = ["defaults"]

    for path in (GLOBAL_CONFIG, PROJECT_CONFIG):
        overrides = load_yaml(path)
        if overrides:
            result = deep_merge(result, overrides)
            sources.append(str(path))

    _loaded_sources = sources
    debug_log(
        bool(result.get("debug")),
        "config loaded",
        {
            "sources": sources,
            "percentage": result.get("percentage"),
            "rate": result.get("rate"),
        },
    )
    return result


def get_config() -> dict:
    """Cached config, loaded on first access."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> dict:
    global _config
    _config = load_config()
    return _config


def get_config_loaded_sources() -> list[str]:
    """Config sources read by the last load, for debugging."""
    return _loaded_sources


def get_setting(section: str, key: str, default: Any = None) -> Any:
    """Look up section.key, falling back to default."""
    values = get_config().get(section)
    if not isinstance(values, dict):
        return default
    return values.get(key, default)
