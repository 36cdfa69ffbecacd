from __future__ import annotations
import copy
import os
from typing import Any, Dict, Iterable

import yaml


def load_config(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        raise FileNotFoundError(f"config not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: top-level YAML value must be a mapping")
    return cfg


def merge_overrides(cfg: Dict[str, Any], overrides: Iterable[str]) -> Dict[str, Any]:
    """
    Apply 'a.b.c=value' overrides on a copy of cfg. Values are parsed as
    YAML, so 'seed=3' gives an int and 'task.params.trace=true' a bool.
    """
    out = copy.deepcopy(cfg)
    for item in overrides:
        key, sep, raw = item.partition("=")
        if not sep or not key:
            raise ValueError(f"override must look like key=value, got {item!r}")
        node = out
        parts = key.split(".")
        for p in parts[:-1]:
            nxt = node.get(p)
            if nxt is None:
                nxt = node[p] = {}
            elif not isinstance(nxt, dict):
                raise ValueError(f"cannot set {key!r}: '{p}' is not a mapping")
            node = nxt
        node[parts[-1]] = yaml.safe_load(raw)
    return out
