from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from types_sudoku import SIZE

CONFIG_ENV = "SUDOKU_CONFIG"

# Removal counts are a coarse difficulty heuristic, not a calibrated rating.
DEFAULT_CONFIG: Dict[str, Any] = {
    "difficulties": {"easy": 40, "medium": 50, "hard": 55},
    "default_difficulty": "medium",
}


class ConfigError(ValueError):
    pass


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping, got {type(data).__name__}")
    return DotDict(data)


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        if isinstance(v, dict) and isinstance(cfg.get(k), dict):
            cfg[k] = {**cfg[k], **v}
        else:
            cfg[k] = v
    return cfg


def _check(cfg: Dict[str, Any]) -> None:
    table = cfg.get("difficulties")
    if not isinstance(table, dict) or not table:
        raise ConfigError("'difficulties' must be a non-empty mapping of tag -> removal count")
    unknown = set(table) - set(DEFAULT_CONFIG["difficulties"])
    if unknown:
        raise ConfigError(f"unknown difficulty tags: {sorted(unknown)}")
    for tag, count in table.items():
        if isinstance(count, bool) or not isinstance(count, int) or not 0 <= count <= SIZE * SIZE:
            raise ConfigError(f"removal count for {tag!r} must be an integer in [0, 81], got {count!r}")
    if cfg.get("default_difficulty") not in table:
        raise ConfigError(f"default_difficulty {cfg.get('default_difficulty')!r} is not in the table")


def load_config(path: Optional[str | Path] = None, **overrides) -> DotDict:
    """Defaults, then the YAML file at ``path`` (or $SUDOKU_CONFIG), then keyword overrides."""
    cfg: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
    path = path or os.environ.get(CONFIG_ENV)
    if path:
        merge_overrides(cfg, **load_yaml(path))
    merge_overrides(cfg, **overrides)
    _check(cfg)
    return DotDict(cfg)
