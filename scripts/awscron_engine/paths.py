"""Filesystem locations for awscron configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


def _env_path(name: str) -> Optional[Path]:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    return Path(value).expanduser()


def root_dir() -> Path:
    """Return the base directory for awscron config."""
    override = _env_path("AWSCRON_HOME")
    if override:
        return override
    return Path.home() / ".config" / "awscron"


def config_file() -> Path:
    return root_dir() / ".env"
