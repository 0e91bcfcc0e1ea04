# config/loader.py
from __future__ import annotations

import copy
import tomllib
from pathlib import Path
from typing import Any, Dict

REPO = Path(__file__).resolve().parents[1]

DEFAULTS: Dict[str, Any] = {
    "logging": {"level": "INFO"},
    "ingest": {"delimiter": ","},
    "categorizer": {"rules": "config/categories.yaml"},
    "report": {"currency": "USD"},
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_config(config_path: Path | None = None) -> Dict[str, Any]:
    """
    Load config.toml merged over DEFAULTS.

    With no path, the repo-root config.toml is used when present and the
    built-in defaults otherwise. An explicit path must exist.
    """
    if config_path is None:
        config_path = REPO / "config.toml"
        if not config_path.exists():
            return copy.deepcopy(DEFAULTS)

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        return _merge(DEFAULTS, tomllib.load(f))


def resolve_path(value: str | Path | None) -> Path | None:
    """Resolve a config-relative path against the repo root."""
    if not value:
        return None
    p = Path(value)
    return p if p.is_absolute() else REPO / p
