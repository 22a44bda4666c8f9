from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from pathlib import Path

LOG_SUFFIX = ".log"
LATEST_LOG = "latest.log"

_log = logging.getLogger(__name__)

# Extended ISO date, optionally followed by a hyphenated time with 3 or 6
# fractional digits and a trailing Z.
_STAMP = re.compile(
    r"\d{4}-\d{2}-\d{2}"
    r"(?:T\d{2}-\d{2}(?:-\d{2}(?:\.\d{3}(?:\d{3})?)?)?[Zz]?)?"
)


def parse_log_timestamp(name: str) -> datetime | None:
    """
    Recover the session timestamp from an archival log file name.

    ``2023-01-01T10-20-30.000Z.log`` -> ``2023-01-01T10:20:30.000Z``.
    Only hyphens after the ``T`` are time separators; the date part keeps its
    own. Returns None for names that are not timestamps.
    """
    if not name.endswith(LOG_SUFFIX):
        return None

    stem = name[: -len(LOG_SUFFIX)]
    if not _STAMP.fullmatch(stem):
        return None

    date_part, sep, time_part = stem.partition("T")
    text = date_part + sep + time_part.replace("-", ":")

    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def prepare_log_dir(log_dir: Path, max_retained: int) -> int:
    """
    Get a log directory ready for a new session.

    - Creates the directory if it does not exist yet.
    - Removes the previous session's latest.log.
    - Deletes the oldest archival logs until fewer than ``max_retained``
      remain (``max_retained <= 0`` disables pruning).

    Files whose names do not parse as timestamps are left alone and are not
    counted against ``max_retained``.

    Returns the number of archival logs deleted.
    """
    log_dir = Path(log_dir)

    try:
        names = [n.name for n in log_dir.iterdir() if n.name.endswith(LOG_SUFFIX)]
    except FileNotFoundError:
        log_dir.mkdir(parents=True, exist_ok=True)
        _log.debug("Created log directory %s", log_dir)
        return 0

    if LATEST_LOG in names:
        names.remove(LATEST_LOG)
        (log_dir / LATEST_LOG).unlink()

    if max_retained <= 0:
        return 0

    candidates: list[tuple[float, str]] = []
    for name in names:
        ts = parse_log_timestamp(name)
        if ts is None:
            continue
        candidates.append((ts.timestamp(), name))

    # Newest first, so the oldest is always popped off the end.
    candidates.sort(reverse=True)

    deleted = 0
    while candidates and len(candidates) >= max_retained:
        _, oldest = candidates.pop()
        (log_dir / oldest).unlink()
        deleted += 1

    if deleted:
        _log.debug("Pruned %d old logs from %s", deleted, log_dir)
    return deleted
