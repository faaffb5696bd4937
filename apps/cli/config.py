# config.py
# Puzzle files are YAML documents:
#   name: optional label
#   grid: 9 rows of 9 ints (0 = blank)
#   mode: solve | step
#   verbose: false
#   json: false
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULTS = {"name": None, "grid": None, "mode": "solve", "verbose": False, "json": False}


class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__


def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    cfg = DotDict(DEFAULTS)
    cfg.update(data)
    return cfg


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg
