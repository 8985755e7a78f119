"""Tag-line edits: rename or remove a single tag, leaving the rest untouched."""

import logging

from .codec import decode, encode
from .locator import locate
from .model import LineBounds, Placement

logger = logging.getLogger(__name__)


def replace_in_bounds(text: str, bounds: LineBounds, content: str) -> str:
    """Return ``text`` with ``text[bounds.start:bounds.end]`` replaced by ``content``."""
    return text[: bounds.start] + content + text[bounds.end :]


def find_tag_line(text: str, marker: str, mode: Placement | str) -> str | None:
    """Return the tag line itself, without its newline."""
    bounds = locate(text, mode, marker)
    if bounds is None:
        return None
    return bounds.slice(text)


def extract_tags(text: str, marker: str, mode: Placement | str) -> list[str]:
    """Return the note's tags, or an empty list when it has no tag line."""
    line = find_tag_line(text, marker, mode)
    if line is None:
        return []
    return decode(line, marker)


def rename_tag(
    text: str,
    old_tag: str,
    new_tag: str,
    marker: str,
    mode: Placement | str,
) -> str | None:
    """
    Rename one tag on the note's tag line.

    The tag keeps its position. If ``new_tag`` is already on the line it will
    appear twice; duplicates are only collapsed when a line is read.

    Returns:
        The new note text, or None if there is no tag line or no ``old_tag``
    """
    bounds = locate(text, mode, marker)
    if bounds is None:
        return None

    tags = decode(bounds.slice(text), marker)
    if old_tag not in tags:
        logger.debug("Tag %r not on the tag line, nothing to rename", old_tag)
        return None

    tags[tags.index(old_tag)] = new_tag
    return replace_in_bounds(text, bounds, encode(tags, marker))


def remove_tag(
    text: str,
    tag_name: str,
    marker: str,
    mode: Placement | str,
) -> str | None:
    """
    Remove one tag from the note's tag line.

    Removing the last tag leaves an empty line where the tag line was.

    Returns:
        The new note text, or None if there is no tag line or no ``tag_name``
    """
    bounds = locate(text, mode, marker)
    if bounds is None:
        return None

    tags = decode(bounds.slice(text), marker)
    if tag_name not in tags:
        logger.debug("Tag %r not on the tag line, nothing to remove", tag_name)
        return None

    tags.remove(tag_name)
    return replace_in_bounds(text, bounds, encode(tags, marker))
