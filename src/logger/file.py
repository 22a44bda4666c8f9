from __future__ import annotations

import logging
from pathlib import Path

from .formatting import LineFormatter


def build_file_handler(
    logfile: Path, level: int, *, mode: str = "a"
) -> logging.FileHandler:
    """
    ``mode="w"`` for the per-session latest.log, ``"a"`` for archives.
    """
    logfile.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(logfile, mode=mode, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(LineFormatter())
    return handler
