from __future__ import annotations

import logging
from datetime import datetime, timezone

from .levels import LABEL_WIDTH, label_for

MESSAGE_GAP = "    "


def iso_timestamp(when: datetime) -> str:
    """UTC ISO-8601 with milliseconds, e.g. 2023-01-01T00:00:00.000Z"""
    when = when.astimezone(timezone.utc)
    return when.strftime("%Y-%m-%dT%H:%M:%S.") + f"{when.microsecond // 1000:03d}Z"


def session_log_name(when: datetime) -> str:
    # Colons are not safe in file names on every platform.
    return iso_timestamp(when).replace(":", "-") + ".log"


class LineFormatter(logging.Formatter):
    """
    ``<timestamp> - <LEVEL>:<pad>    <message>``

    Level labels are padded after the colon so every message starts in the
    same column.
    """

    def format(self, record: logging.LogRecord) -> str:
        label = label_for(record.levelno)
        pad = " " * max(0, LABEL_WIDTH - len(label))
        stamp = iso_timestamp(datetime.fromtimestamp(record.created, timezone.utc))

        line = (
            f"{stamp} - {self.render_level(record.levelno, label)}:"
            f"{pad}{MESSAGE_GAP}{self.render_message(record)}"
        )

        # Not cached on the record: console and file render tracebacks differently.
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def render_level(self, levelno: int, label: str) -> str:
        return label

    def render_message(self, record: logging.LogRecord) -> str:
        return record.getMessage()
