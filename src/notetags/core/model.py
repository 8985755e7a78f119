from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

NoteId = str

# The only characters treated as line/token separators.
WHITESPACE = frozenset(" \n\r\t")

# Found on a trailing candidate line before its tag, these mean code or links.
INVALID_LINE_MARKERS = frozenset("`[]()")


class Placement(str, Enum):
    """Where a note keeps its tag line."""

    AFTER_TITLE = "after-title"
    TRAILING_LINE = "trailing-line"


@dataclass(frozen=True)
class LineBounds:
    start: int  # first character of the tag line
    end: int  # its terminating newline, or len(text) at EOF

    def slice(self, text: str) -> str:
        return text[self.start : self.end]

    def shift(self, offset: int) -> "LineBounds":
        return LineBounds(self.start + offset, self.end + offset)


class TagMarkerError(ValueError):
    """Raised when a tag marker is not exactly one character."""


def check_marker(marker: str) -> str:
    if not isinstance(marker, str) or len(marker) != 1:
        raise TagMarkerError(f"Tag marker must be a single character, got {marker!r}")
    if marker in WHITESPACE:
        raise TagMarkerError("Tag marker cannot be whitespace")
    return marker
