"""Tag-line detection: find the offsets of a note's tag line."""

import logging

from .model import (
    INVALID_LINE_MARKERS,
    WHITESPACE,
    LineBounds,
    Placement,
    check_marker,
)

logger = logging.getLogger(__name__)


def _line_end(text: str, pos: int) -> int:
    """Offset of the newline ending the line that contains ``pos``."""
    end = text.find("\n", pos + 1)
    if end < 0:
        # no newline at EOF
        return len(text)
    return end


def _content_start(text: str) -> int | None:
    """
    Offset right after the note's title.

    Two title styles are recognised:
    - ATX: the note starts with ``# `` and the title is the first line
    - setext: the second line starts with ``=`` and underlines the first

    Returns None when no title is found, or when nothing follows it.
    """
    first_eol = text.find("\n")
    if first_eol < 0:
        return None

    if text.startswith("# "):
        return first_eol + 1

    if text[first_eol + 1 : first_eol + 2] != "=":
        return None

    underline_eol = text.find("\n", first_eol + 1)
    if underline_eol < 0:
        return None
    return underline_eol + 1


def _first_marker_skipping_blank_lines(text: str, pos: int, marker: str) -> int | None:
    """
    Scan from ``pos`` (a line start) over blank lines.

    Returns the offset of the first line that starts with the marker, or None
    as soon as any other non-whitespace character shows up.
    """
    for i in range(pos, len(text)):
        if text[i - 1] == "\n" and text[i] == marker:
            return i
        if text[i] in WHITESPACE:
            continue
        return None
    return None


def _trailing_line_start(text: str, pos: int) -> int | None:
    """
    Walk back from the tag at ``pos`` to the start of its line.

    Returns None if a code or link character sits before the tag on that line.
    A line without a preceding newline is the first line and starts at 0.
    """
    for i in range(pos - 1, -1, -1):
        if text[i] in INVALID_LINE_MARKERS:
            return None
        if text[i] == "\n":
            return i + 1
    return 0


def has_only_tags(text: str, start: int, end: int, marker: str) -> bool:
    """Check that every word in ``text[start:end]`` starts with the marker."""
    for k in range(start + 1, end):
        if (
            text[k - 1] in WHITESPACE
            and text[k] not in WHITESPACE
            and text[k] != marker
        ):
            return False
    return True


def locate_after_title(text: str, marker: str) -> LineBounds | None:
    """Find a tag line placed right after the title, blank lines allowed."""
    content = _content_start(text)
    if content is None:
        logger.debug("No title found, no tag line to look for")
        return None

    start = _first_marker_skipping_blank_lines(text, content, marker)
    if start is None:
        return None

    end = _line_end(text, start)
    if not has_only_tags(text, start, end, marker):
        logger.debug("Line at %d starts with %r but is not a tag line", start, marker)
        return None

    return LineBounds(start, end)


def locate_trailing_line(text: str, marker: str) -> LineBounds | None:
    """Find a tag line placed on the last non-blank line of the note."""
    last_tag = text.rfind(marker)
    if last_tag < 0:
        return None

    end = _line_end(text, last_tag)

    # only blank lines may follow a trailing tag line
    for i in range(end, len(text)):
        if text[i] not in WHITESPACE:
            return None

    start = _trailing_line_start(text, last_tag)
    if start is None:
        logger.debug("Last line holding %r contains markup", marker)
        return None

    if not has_only_tags(text, start, end, marker):
        logger.debug("Last line holding %r is not a tag line", marker)
        return None

    return LineBounds(start, end)


def locate(text: str, mode: Placement | str, marker: str) -> LineBounds | None:
    """
    Locate the tag line of a note.

    Args:
        text: Full note text
        mode: Tag-line placement convention
        marker: Single character prefixing every tag

    Returns:
        Bounds of the tag line (newline excluded), or None if the note has none
    """
    check_marker(marker)
    if Placement(mode) is Placement.AFTER_TITLE:
        return locate_after_title(text, marker)
    return locate_trailing_line(text, marker)


class TagLineLocator:
    """Locator bound to one placement convention and marker."""

    def __init__(self, mode: Placement | str, marker: str = "#"):
        self.mode = Placement(mode)
        self.marker = check_marker(marker)

    def locate(self, text: str) -> LineBounds | None:
        return locate(text, self.mode, self.marker)
