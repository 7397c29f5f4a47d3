from __future__ import annotations

from pathlib import Path
from typing import Optional

from .env import DEFAULTS


def launcher_dir() -> Path:
    # vibecodekit/lib/paths.py -> vibecodekit
    return Path(__file__).resolve().parents[1]


def installer_script_path(
    base_dir: Optional[Path] = None,
    *,
    script_name: str = DEFAULTS.script_name,
) -> Path:
    """Expected installer location: one level above the launcher directory."""

    d = Path(base_dir) if base_dir is not None else launcher_dir()
    return d.parent / script_name
