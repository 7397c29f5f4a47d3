from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from .launcher_config import config_from_env
from .lib.command import exit_status, run_inherited
from .lib.env import DEFAULTS
from .lib.paths import installer_script_path
from .lib.remote import fetch_and_run_unverified
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)


def run_local_installer(
    script: Path,
    args: Sequence[str],
    *,
    cwd: str,
    shell: str = DEFAULTS.shell,
    dry_run: bool = False,
) -> int:
    """Run the bundled installer script in *cwd* and return its exit status."""

    try:
        r = run_inherited([shell, str(script), *args], cwd=cwd, dry_run=dry_run)
    except OSError as e:
        logger.error("Could not start installer %s: %s", script, e)
        return 1
    return exit_status(r.returncode)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    launcher_dir: Optional[Path] = None,
    cwd: Optional[str] = None,
) -> int:
    # Every argument belongs to the installer; nothing is parsed here.
    args = list(sys.argv[1:] if argv is None else argv)
    workdir = os.getcwd() if cwd is None else cwd

    cfg = config_from_env()
    configure_logging(log_path=cfg.log_path, level=cfg.log_level)

    script = installer_script_path(launcher_dir, script_name=cfg.script_name)

    if script.exists():
        logger.info("Using local installer %s", script)
        return run_local_installer(script, args, cwd=workdir, shell=cfg.shell, dry_run=cfg.dry_run)

    logger.info("Local installer %s not found; fetching %s", script, cfg.remote_url)
    return fetch_and_run_unverified(
        args,
        cwd=workdir,
        url=cfg.remote_url,
        shell=cfg.shell,
        fetch_command=cfg.fetch_command,
        dry_run=cfg.dry_run,
    )
