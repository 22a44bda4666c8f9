from __future__ import annotations

import logging
from dataclasses import dataclass


@dataclass(frozen=True)
class Severity:
    name: str
    priority: int
    levelno: int
    label: str
    style: str


# Lower priority value = more severe.
SEVERITIES: tuple[Severity, ...] = (
    Severity("error", 0, logging.ERROR, "ERROR", "bold red"),
    Severity("warn", 1, logging.WARNING, "WARN", "bold yellow"),
    Severity("info", 2, logging.INFO, "INFO", "cyan"),
    Severity("debug", 3, logging.DEBUG, "DEBUG", "green"),
)

BY_NAME = {s.name: s for s in SEVERITIES}
_BY_LEVELNO = {s.levelno: s for s in SEVERITIES}

LABEL_WIDTH = max(len(s.label) for s in SEVERITIES)


def severity(name: str) -> Severity:
    try:
        return BY_NAME[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown severity level: {name!r}") from None


def label_for(levelno: int) -> str:
    s = _BY_LEVELNO.get(levelno)
    return s.label if s else logging.getLevelName(levelno).upper()


def style_for(levelno: int) -> str:
    s = _BY_LEVELNO.get(levelno)
    return s.style if s else ""
