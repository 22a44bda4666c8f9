from __future__ import annotations

import logging
import sys

from rich.console import Console
from rich.highlighter import NullHighlighter
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text

from .formatting import LineFormatter
from .levels import style_for


class ConsoleLineFormatter(LineFormatter):
    """
    Same line as the files, with the level token wrapped in Rich markup.

    The message itself is escaped so user text containing ``[...]`` is never
    read as markup.
    """

    def render_level(self, levelno: int, label: str) -> str:
        style = style_for(levelno)
        return f"[{style}]{label}[/{style}]" if style else label

    def render_message(self, record: logging.LogRecord) -> str:
        return escape(record.getMessage())

    def formatException(self, ei) -> str:
        return escape(super().formatException(ei))


class LineRichHandler(RichHandler):
    """
    Prints each record as a single soft-wrapped line.

    The stock RichHandler lays records out in a table that wraps and pads
    the message to the console width.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = Text.from_markup(self.format(record))
            self.console.print(line, soft_wrap=True)
        except Exception:
            self.handleError(record)


def build_console_handler(level: int) -> logging.Handler:
    # Console bound at build time so redirected stdout (tests, subprocesses)
    # is honoured.
    console = Console(
        file=sys.stdout,
        force_terminal=True,
        soft_wrap=True,
    )

    # IMPORTANT:
    # - RichHandler must NOT render its own time/level columns; the
    #   formatter already carries both.
    # - Only the level token is coloured, so no highlighter.
    handler = LineRichHandler(
        level=level,
        console=console,
        show_time=False,
        show_level=False,
        show_path=False,
        markup=True,
        highlighter=NullHighlighter(),
        rich_tracebacks=False,
    )
    handler.setFormatter(ConsoleLineFormatter())
    return handler
