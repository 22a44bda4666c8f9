from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from env import DEFAULT_LOGS_DIR, get_logging_env
from .console import build_console_handler
from .file import build_file_handler
from .formatting import session_log_name
from .levels import severity
from .retention import LATEST_LOG, prepare_log_dir
from . import state as _state

LOGGER_NAME = "sessionlog"
DEBUG_SUBDIR = "debug"


@dataclass
class SessionLogger:
    """
    Handle returned by build_logger.

    Every call fans out to each destination whose minimum level admits it.
    """

    logger: logging.Logger
    session_file: str
    log_files: list[Path] = field(default_factory=list)
    deleted: int = 0

    def error(self, message: str) -> None:
        self.logger.error(message, stacklevel=2)

    def warn(self, message: str) -> None:
        self.logger.warning(message, stacklevel=2)

    def info(self, message: str) -> None:
        self.logger.info(message, stacklevel=2)

    def debug(self, message: str) -> None:
        self.logger.debug(message, stacklevel=2)

    def log(self, level: str, message: str) -> None:
        self.logger.log(severity(level).levelno, message, stacklevel=2)


def _close_handlers(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()


def build_logger(
    production: bool,
    *,
    logs_dir: Path = DEFAULT_LOGS_DIR,
    max_saved_logs: int = 0,
    quiet: bool = False,
    now: Optional[datetime] = None,
) -> SessionLogger:
    """
    Prune old logs, then wire console + file destinations for this session.

    - logs_dir/latest.log and logs_dir/<session>.log at INFO.
    - Outside production, the same pair under logs_dir/debug at DEBUG and a
      DEBUG console instead of INFO.

    Calling it again replaces the previous destinations.
    """
    logs_dir = Path(logs_dir)
    debug_dir = logs_dir / DEBUG_SUBDIR

    log = logging.getLogger(LOGGER_NAME)
    _close_handlers(log)

    deleted = prepare_log_dir(logs_dir, max_saved_logs)
    if not production:
        deleted += prepare_log_dir(debug_dir, max_saved_logs)

    session_file = session_log_name(now or datetime.now(timezone.utc))

    log.setLevel(logging.DEBUG)
    log.propagate = False

    files: list[tuple[Path, int, str]] = [
        (logs_dir / LATEST_LOG, logging.INFO, "w"),
        (logs_dir / session_file, logging.INFO, "a"),
    ]
    if not production:
        files += [
            (debug_dir / LATEST_LOG, logging.DEBUG, "w"),
            (debug_dir / session_file, logging.DEBUG, "a"),
        ]

    for path, level, mode in files:
        log.addHandler(build_file_handler(path, level, mode=mode))

    if not quiet:
        console_level = logging.INFO if production else logging.DEBUG
        log.addHandler(build_console_handler(console_level))

    session = SessionLogger(
        logger=log,
        session_file=session_file,
        log_files=[p for p, _, _ in files],
        deleted=deleted,
    )
    session.debug(f"Deleted {deleted} logs as part of cleanup")
    return session


def init_logging() -> SessionLogger:
    """
    Initialize the process logger from the environment.

    Safe to call multiple times; cleanup runs only on the first call.
    """
    if _state.INITIALIZED and _state.SESSION is not None:
        return _state.SESSION

    env = get_logging_env()
    session = build_logger(
        env.production,
        logs_dir=env.logs_dir,
        max_saved_logs=env.max_saved_logs,
        quiet=env.quiet,
    )

    _state.INITIALIZED = True
    _state.SESSION = session
    return session


def get_logger() -> SessionLogger:
    return init_logging()


def shutdown_logging() -> None:
    _close_handlers(logging.getLogger(LOGGER_NAME))
    _state.INITIALIZED = False
    _state.SESSION = None


__all__ = [
    "SessionLogger",
    "build_logger",
    "get_logger",
    "init_logging",
    "shutdown_logging",
    "prepare_log_dir",
]
