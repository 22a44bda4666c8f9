#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from bootstrap import bootstrap_base_env, bootstrap_run_context


def _dispatch_help(parser: argparse.ArgumentParser, argv: list[str]) -> int:
    # Support:
    #   sessionlog help
    #   sessionlog help logs
    if argv and argv[0] == "help":
        argv = argv[1:]

    if not argv:
        parser.print_help()
        return 0

    try:
        build_parser().parse_args(argv + ["--help"])
    except SystemExit:
        pass
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="sessionlog")

    sub = p.add_subparsers(dest="command", required=True)

    help_cmd = sub.add_parser("help", help="Show help")
    help_cmd.add_argument("path", nargs="*", help="Command path to show help for")
    help_cmd.set_defaults(_help=True)

    start = sub.add_parser("start", help="Open a logging session and log a message")
    start.add_argument("message", nargs="*", help="Message to log at INFO")
    start.add_argument("--production", action="store_true", default=None)
    start.add_argument("--quiet", action="store_true", default=None)
    start.add_argument("--dir", help="Log directory")

    # Keep imports inside builder to avoid early side effects.
    from cli.cli_env import build_env_parser
    from cli.cli_logs import build_logs_parser

    build_env_parser(sub)
    build_logs_parser(sub)

    return p


def handle_start(args: argparse.Namespace) -> int:
    from logger import init_logging, shutdown_logging

    bootstrap_run_context(
        production=args.production,
        quiet=args.quiet,
        logs_dir=args.dir,
    )

    log = init_logging()
    try:
        log.info(" ".join(args.message) or "sessionlog started")
        log.debug(f"Session file: {log.session_file}")
    finally:
        shutdown_logging()
    return 0


def main(argv: list[str] | None = None) -> int:
    bootstrap_base_env()

    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "_help", False):
        return _dispatch_help(parser, argv)

    if args.command == "start":
        return handle_start(args)

    if args.command == "env":
        from cli.cli_env import handle_env

        return handle_env(args)

    if args.command == "logs":
        from cli.cli_logs import handle_logs

        return handle_logs(args)

    raise RuntimeError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
