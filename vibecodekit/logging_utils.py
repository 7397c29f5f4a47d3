from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from .lib.env import DEFAULTS

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

_MARK = "_vibecodekit_configured"
_MARK_PATH = "_vibecodekit_log_path"


def _open_log_file(log_path: str) -> Tuple[logging.Handler, str]:
    """FileHandler for *log_path*, or for a file in the cwd if that fails."""

    target = Path(log_path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(target), log_path
    except OSError:
        fallback = Path.cwd() / DEFAULTS.log_fallback_name
        return logging.FileHandler(fallback), str(fallback)


def configure_logging(
    log_path: Optional[str] = None,
    level: int = logging.WARNING,
    also_console: bool = True,
) -> Optional[str]:
    """Attach launcher handlers to the root logger.

    The installer owns stdout, so the console handler goes to stderr and the
    default level is WARNING. Idempotent: later calls only adjust the level.

    Returns the log file in use, or None when logging to the console only.
    """

    root = logging.getLogger()
    root.setLevel(level)
    if getattr(root, _MARK, False):
        return getattr(root, _MARK_PATH, None)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)
    chosen_path: Optional[str] = None

    if log_path:
        handler, chosen_path = _open_log_file(log_path)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)

    setattr(root, _MARK, True)
    setattr(root, _MARK_PATH, chosen_path)

    logging.getLogger(__name__).debug("Log file requested=%s actual=%s", log_path, chosen_path)
    return chosen_path
