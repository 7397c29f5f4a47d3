"""Remote-fetch fallback.

Downloads the installer script and pipes it straight into a shell. Nothing
about the fetched content is checked; any signature or pinned-version check
belongs in :func:`fetch_and_run_unverified` so the dispatch in ``main`` stays
unchanged.
"""

from __future__ import annotations

import logging
import shlex
import shutil
from typing import List, Sequence

from .command import exit_status, run_inherited
from .env import DEFAULTS

logger = logging.getLogger(__name__)


def build_remote_command(
    args: Sequence[str],
    *,
    url: str = DEFAULTS.remote_url,
    shell: str = DEFAULTS.shell,
    fetch_command: str = DEFAULTS.fetch_command,
) -> str:
    # Arguments are joined verbatim with single spaces, no quoting.
    parts = [fetch_command, url, "|", shell, "-s", "--", *args]
    return " ".join(parts)


def missing_tools(*, shell: str, fetch_command: str) -> List[str]:
    """Programs of the pipeline that are not on PATH.

    A fetch command that does not split into a program name counts as missing.
    """

    try:
        fetch_argv = shlex.split(fetch_command)
    except ValueError:
        fetch_argv = []
    fetch_tool = fetch_argv[0] if fetch_argv else None

    missing = []
    if fetch_tool is None or shutil.which(fetch_tool) is None:
        missing.append(fetch_tool or repr(fetch_command))
    if shutil.which(shell) is None:
        missing.append(shell)
    return missing


def fetch_and_run_unverified(
    args: Sequence[str],
    *,
    cwd: str,
    url: str = DEFAULTS.remote_url,
    shell: str = DEFAULTS.shell,
    fetch_command: str = DEFAULTS.fetch_command,
    dry_run: bool = False,
) -> int:
    """Fetch the installer from *url* and run it, returning the exit status."""

    cmd = build_remote_command(args, url=url, shell=shell, fetch_command=fetch_command)

    if not dry_run:
        missing = missing_tools(shell=shell, fetch_command=fetch_command)
        if missing:
            logger.error("Cannot run remote installer, not on PATH: %s", ", ".join(missing))
            return 1

    try:
        r = run_inherited(cmd, cwd=cwd, shell=True, dry_run=dry_run)
    except OSError as e:
        logger.error("Could not start remote installer pipeline: %s", e)
        return 1
    return exit_status(r.returncode)
