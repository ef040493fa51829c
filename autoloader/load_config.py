"""Logic for loading and merging autoloader configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from autoloader.deep_merge import deep_merge
from autoloader.strict_name import DEFAULT_EXTENSION, DEFAULT_NAMESPACE_SEPARATOR

DEFAULT_CONFIG: dict[str, Any] = {
    "extension": DEFAULT_EXTENSION,
    "namespace_separator": DEFAULT_NAMESPACE_SEPARATOR,
    # Asked in order, e.g. {"kind": "recursive", "roots": ["src"]}
    "strategies": [],
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration in {path} must be a mapping"
                raise ValueError(msg)
            config = deep_merge(config, user_config)
    return config
