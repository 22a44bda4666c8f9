from __future__ import annotations

import argparse
from pathlib import Path
from typing import Iterable

from env import resolve_logs_dir


# ----------------------------
# Help dispatch (subparser-local)
# ----------------------------


def dispatch_subparser_help(
    parser: argparse.ArgumentParser, path: list[str] | None
) -> int:
    """
    Implements consistent `X help [subcmd ...]` behavior for a subtree parser.
    """
    if not path:
        parser.print_help()
        return 0

    try:
        parser.parse_args(path + ["--help"])
    except SystemExit:
        pass
    return 0


# ----------------------------
# Logs filesystem helpers
# ----------------------------


def resolve_log_dir(*, explicit: str | None, debug: bool = False) -> Path:
    base = Path(explicit).expanduser() if explicit else resolve_logs_dir()
    return base / "debug" if debug else base


def iter_log_files(log_dir: Path) -> Iterable[Path]:
    if not log_dir.exists():
        return []
    return (p for p in log_dir.iterdir() if p.is_file() and p.suffix == ".log")


def find_log_file(log_dir: Path, name: str) -> Path | None:
    if not log_dir.exists():
        return None

    candidates = [
        log_dir / name,
        log_dir / f"{name}.log",
    ]
    for p in candidates:
        if p.exists() and p.is_file():
            return p

    return None


def tail_lines(path: Path, lines: int) -> list[str]:
    data = path.read_text(encoding="utf-8", errors="replace").splitlines()
    return data[-lines:] if lines > 0 else data
