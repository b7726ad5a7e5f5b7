from __future__ import annotations

from enum import Enum


class ParserState(str, Enum):
    """States shared by the line-oriented entry parsers."""

    IDLE = "idle"
    OPEN_ENTRY = "open_entry"
