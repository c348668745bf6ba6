"""Data path resolution.

Resolves canonical paths to leetup data files. Uses environment
variables when available, falls back to conventional defaults.

Environment variables:
    LEETUP_DATA_DIR — data directory (default: ~/.leetup)
    LEETUP_CONFIG — config file (default: <data dir>/config.json)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_DATA_DIR = Path.home() / ".leetup"


def data_dir() -> Path:
    """Return the leetup data directory."""
    return Path(os.environ.get("LEETUP_DATA_DIR", str(_DEFAULT_DATA_DIR))).expanduser()


def config_path() -> Path:
    """Return the path to the user configuration file."""
    env = os.environ.get("LEETUP_CONFIG")
    if env:
        return Path(env).expanduser()
    return data_dir() / "config.json"


def cache_path() -> Path:
    """Return the path to the local metadata cache."""
    return data_dir() / "cache.json"
