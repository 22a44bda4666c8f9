from __future__ import annotations

"""bootstrap.py

Process bootstrap for sessionlog.

Rules:
1) Only bootstrap mutates os.environ.
2) Call bootstrap_base_env() once at the true entrypoint, before init_logging().

Everything else treats environment variables as the source of truth.
"""

import os
from pathlib import Path

from dotenv import load_dotenv


_BOOTSTRAPPED = False


def bootstrap_base_env(env_file: str | Path = ".env") -> None:
    """
    Load .env into os.environ. Missing file is fine.
    Shell / Docker / CI values always win over the file.
    """
    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return

    load_dotenv(Path(env_file), override=False)
    _BOOTSTRAPPED = True


def bootstrap_run_context(
    *,
    production: bool | None = None,
    quiet: bool | None = None,
    logs_dir: str | None = None,
) -> None:
    """Stamp CLI overrides into the environment before logging starts."""

    if production is not None:
        os.environ["SESSIONLOG_ENV"] = "production" if production else "development"
    if quiet is not None:
        os.environ["SESSIONLOG_QUIET"] = "1" if quiet else "0"
    if logs_dir:
        os.environ["SESSIONLOG_LOGS_DIR"] = logs_dir
