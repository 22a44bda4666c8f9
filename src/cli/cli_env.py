from __future__ import annotations

import argparse

from rich.console import Console

from env import get_logging_env

RENDER = Console(soft_wrap=True)


def build_env_parser(subparsers: argparse._SubParsersAction) -> None:
    env = subparsers.add_parser("env", help="Show resolved logging environment")
    env.set_defaults(action="dump")


def handle_env(args: argparse.Namespace) -> int:
    data = get_logging_env().as_dict()

    RENDER.print("\n[bold]Logging Environment[/bold]")
    RENDER.print("─" * 50)
    for key, value in data.items():
        RENDER.print(f"  {key:<20} = {value}")

    RENDER.print()
    return 0
