from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from . import SessionLogger

INITIALIZED: bool = False
SESSION: Optional["SessionLogger"] = None
