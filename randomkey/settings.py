#!/usr/bin/env python3
"""Settings loader for randomkey."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any
import os

import yaml

PACKAGE_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"

_active_config_path = APP_CONFIG_PATH


@lru_cache(maxsize=8)
def _read_yaml(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Missing app config: {path}")
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"App config must be a mapping: {path}")
    return data


def load_app_config(path: str | Path | None = None) -> dict:
    """Load the active settings file, or ``path`` when given."""
    if path is None:
        return _read_yaml(_active_config_path)
    return _read_yaml(resolve_path(path, base=Path.cwd()))


def use_config(path: str | Path | None) -> Path:
    """Point ``get_setting`` at another settings file (``None`` restores the bundled one)."""
    global _active_config_path
    if path is None:
        _active_config_path = APP_CONFIG_PATH
    else:
        candidate = resolve_path(path, base=Path.cwd())
        _read_yaml(candidate)
        _active_config_path = candidate
    return _active_config_path


def get_setting(path: str, default: Any = None) -> Any:
    """Get nested setting by dotted path."""
    data = load_app_config()
    current: Any = data
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def resolve_path(value: str | Path, base: Path | None = None) -> Path:
    """Resolve a path string relative to the package root (unless absolute)."""
    if value is None:
        raise ValueError("path value is required")
    expanded = os.path.expanduser(str(value))
    path = Path(expanded)
    if not path.is_absolute():
        base = base or PACKAGE_ROOT
        path = (base / path).resolve()
    return path


__all__ = [
    "load_app_config",
    "use_config",
    "get_setting",
    "resolve_path",
    "PACKAGE_ROOT",
    "APP_CONFIG_PATH",
]
