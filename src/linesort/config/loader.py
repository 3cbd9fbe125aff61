from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from ..sorter.options import ConfigurationError

DEFAULTS: Dict[str, Any] = {
    "sort": {
        "column": 0,
        "numeric": False,
        "human": False,
        "month": False,
        "reverse": False,
        "unique": False,
        "ignore_trailing_blanks": False,
        "check": False,
    },
    "logging": {"level": "WARNING"},
    "progress": False,
}


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"config file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file must be a YAML mapping: {path}")
    for section in ("sort", "logging"):
        if not isinstance(data.get(section, {}), dict):
            raise ConfigurationError(f"'{section}' must be a mapping: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Built-in defaults, overlaid with the YAML file at ``path`` if given."""
    cfg = copy.deepcopy(DEFAULTS)
    if path:
        cfg = _deep_merge(cfg, _load_yaml(Path(path).expanduser()))
    return cfg


def merge_cli_overrides(cfg: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    # None means "flag not given on the command line"
    pruned = {k: v for k, v in overrides.items() if v is not None}
    return _deep_merge(cfg, {"sort": pruned})


__all__ = ["DEFAULTS", "load_config", "merge_cli_overrides"]
