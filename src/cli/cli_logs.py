from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from cli.common import (
    dispatch_subparser_help,
    find_log_file,
    iter_log_files,
    resolve_log_dir,
    tail_lines,
)
from env import get_logging_env
from logger.retention import LATEST_LOG, parse_log_timestamp, prepare_log_dir

RENDER = Console(highlight=False, soft_wrap=True)


def build_logs_parser(subparsers: argparse._SubParsersAction) -> None:
    logs = subparsers.add_parser("logs", help="Log utilities")
    lsub = logs.add_subparsers(dest="logs_cmd", required=True)

    help_p = lsub.add_parser("help", help="Show help for logs")
    help_p.add_argument("path", nargs="*", help="Subcommand path (e.g. list, show)")
    help_p.set_defaults(action="help", _help_parser=logs)

    list_p = lsub.add_parser("list", help="List log files, oldest first")
    list_p.add_argument("--dir", help="Explicit log directory")
    list_p.add_argument("--debug", action="store_true", help="Use the debug/ subdirectory")
    list_p.set_defaults(action="list")

    show_p = lsub.add_parser("show", help="Show a log file (tail)")
    show_p.add_argument("name", help="Log filename or stem")
    show_p.add_argument("--dir", help="Explicit log directory")
    show_p.add_argument("--debug", action="store_true", help="Use the debug/ subdirectory")
    show_p.add_argument("--tail", type=int, default=120, help="Lines from end")
    show_p.set_defaults(action="show")

    prune_p = lsub.add_parser("prune", help="Delete old logs now")
    prune_p.add_argument("--dir", help="Explicit log directory")
    prune_p.add_argument("--debug", action="store_true", help="Use the debug/ subdirectory")
    prune_p.add_argument(
        "--keep", type=int, help="Retention threshold (default: SESSIONLOG_MAX_SAVED_LOGS)"
    )
    prune_p.set_defaults(action="prune")


def handle_logs(args: argparse.Namespace) -> int:
    if args.action == "help":
        return dispatch_subparser_help(
            args._help_parser, list(getattr(args, "path", []) or [])
        )

    log_dir = resolve_log_dir(
        explicit=getattr(args, "dir", None), debug=bool(getattr(args, "debug", False))
    )

    if args.action == "list":
        return _list_logs(log_dir)

    if args.action == "show":
        path = find_log_file(log_dir, args.name)
        if not path:
            RENDER.print(f"Log not found: {escape(args.name)}")
            return 1
        for line in tail_lines(path, int(args.tail)):
            RENDER.print(escape(line))
        return 0

    if args.action == "prune":
        keep = args.keep if args.keep is not None else get_logging_env().max_saved_logs
        deleted = prepare_log_dir(log_dir, keep)
        RENDER.print(f"Deleted {deleted} logs from {escape(str(log_dir))}")
        return 0

    raise SystemExit(f"Unknown logs action: {args.action}")


def _list_logs(log_dir: Path) -> int:
    if not log_dir.exists():
        RENDER.print("No logs directory found")
        return 0

    archived = []
    other = []
    for p in iter_log_files(log_dir):
        ts = parse_log_timestamp(p.name)
        if p.name == LATEST_LOG or ts is None:
            other.append(p.name)
        else:
            archived.append((ts, p.name))

    for _, name in sorted(archived):
        RENDER.print(name)
    for name in sorted(other):
        tag = "latest" if name == LATEST_LOG else "ignored"
        RENDER.print(f"{name} [dim]({tag})[/dim]")
    return 0
