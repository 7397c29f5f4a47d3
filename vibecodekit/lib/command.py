from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import Sequence, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    shell: bool = False


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def exit_status(returncode: int) -> int:
    """Map a Popen return code to a process exit status.

    Negative codes mean the child died from a signal and reported no status.
    """

    if returncode < 0:
        return 1
    return returncode


def run_inherited(
    argv: Union[Sequence[str], str],
    *,
    cwd: str,
    shell: bool = False,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command attached to our own stdin/stdout/stderr and wait for it.

    - Always logs the command.
    - Never captures output; the child owns the terminal.
    - dry_run logs but does not execute.

    Raises OSError if the child cannot be started.
    """

    if isinstance(argv, str):
        argv_list = [argv]
        logger.info("CMD (shell=%s) %s", shell, argv)
    else:
        argv_list = list(argv)
        logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, shell=shell)

    p = subprocess.run(argv if isinstance(argv, str) else argv_list, cwd=cwd, shell=shell)

    logger.debug("EXIT %s", p.returncode)
    return CmdResult(argv=argv_list, returncode=p.returncode, shell=shell)
