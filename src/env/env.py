from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# ------------------------------------------------------------
# Paths
# ------------------------------------------------------------

DEFAULT_LOGS_DIR = Path("log")

# ------------------------------------------------------------
# Errors / helpers
# ------------------------------------------------------------


class ConfigError(RuntimeError):
    pass


def _as_bool(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "on"}


def _as_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


# ------------------------------------------------------------
# Logging environment (SAFE ANYWHERE)
# ------------------------------------------------------------


@dataclass(frozen=True)
class LoggingEnvironment:
    production: bool
    max_saved_logs: int
    logs_dir: Path
    quiet: bool

    def as_dict(self) -> dict:
        return {
            "production": self.production,
            "max_saved_logs": self.max_saved_logs,
            "logs_dir": str(self.logs_dir),
            "quiet": self.quiet,
        }


def resolve_logs_dir() -> Path:
    raw = os.environ.get("SESSIONLOG_LOGS_DIR")
    return Path(raw).expanduser() if raw else DEFAULT_LOGS_DIR


def get_logging_env() -> LoggingEnvironment:
    """
    Snapshot of the logging configuration.

    Read fresh from os.environ on every call; bootstrap is responsible for
    loading .env beforehand.
    """
    mode = os.environ.get("SESSIONLOG_ENV", "development").strip().lower()

    return LoggingEnvironment(
        production=mode == "production",
        max_saved_logs=_as_int("SESSIONLOG_MAX_SAVED_LOGS", 10),
        logs_dir=resolve_logs_dir(),
        quiet=_as_bool(os.environ.get("SESSIONLOG_QUIET", "0")),
    )
