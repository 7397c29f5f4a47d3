from __future__ import annotations

import logging
import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .lib.env import DEFAULTS


@dataclass(frozen=True)
class LauncherConfig:
    raw: Dict[str, Any]

    @property
    def script_name(self) -> str:
        return str(((self.raw.get("installer") or {}).get("script_name")) or DEFAULTS.script_name)

    @property
    def remote_url(self) -> str:
        return str(((self.raw.get("installer") or {}).get("remote_url")) or DEFAULTS.remote_url)

    @property
    def shell(self) -> str:
        return str(((self.raw.get("installer") or {}).get("shell")) or DEFAULTS.shell)

    @property
    def fetch_command(self) -> str:
        cmd = str(((self.raw.get("installer") or {}).get("fetch_command")) or DEFAULTS.fetch_command)
        try:
            argv = shlex.split(cmd)
        except ValueError as e:
            raise ValueError(f"Unparsable fetch_command {cmd!r}: {e}") from e
        if not argv:
            raise ValueError(f"fetch_command names no program: {cmd!r}")
        return cmd

    @property
    def log_path(self) -> Optional[str]:
        p = (self.raw.get("logging") or {}).get("path")
        return str(p) if p else None

    @property
    def log_level(self) -> int:
        value = (self.raw.get("logging") or {}).get("level") or "WARNING"
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        name = str(value).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
        return level

    @property
    def dry_run(self) -> bool:
        value = self.raw.get("dry_run", False)
        # YAML bool only; quoted "false" is a string.
        if not isinstance(value, bool):
            raise ValueError(f"dry_run must be true or false, got {value!r}")
        return value


def load_launcher_config(path: str) -> LauncherConfig:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(path)

    if p.suffix.lower() not in {".yaml", ".yml"}:
        raise ValueError("launcher config must be YAML")

    try:
        import yaml  # type: ignore
    except Exception as e:
        raise RuntimeError("PyYAML is required to read the launcher config") from e

    raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError("launcher config must contain a mapping/object")

    return LauncherConfig(raw=raw)


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> LauncherConfig:
    """Load the config named by $VIBECODEKIT_CONFIG, or return pure defaults."""

    env = os.environ if environ is None else environ
    path = env.get(DEFAULTS.config_env_var)
    if not path:
        return LauncherConfig(raw={})
    return load_launcher_config(path)
