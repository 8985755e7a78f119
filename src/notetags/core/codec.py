"""Conversion between a tag line and its list of tags."""

import re

from .model import check_marker

_SEPARATORS = re.compile(r"[ \n\r\t]+")


def decode(line: str, marker: str) -> list[str]:
    """
    Turn a tag line into tag names.

    Words that do not start with the marker are ignored, repeated tags are
    kept once in order of first appearance, and the marker is stripped.

    Examples:
        >>> decode("#work  #urgent #work", "#")
        ['work', 'urgent']
    """
    check_marker(marker)
    words = _SEPARATORS.split(line.strip(" \n\r\t"))
    tokens = dict.fromkeys(w for w in words if w.startswith(marker))
    return [token[len(marker):] for token in tokens]


def encode(tags: list[str], marker: str) -> str:
    """
    Render tag names as a tag line, separated by single spaces.

    Examples:
        >>> encode(["work", "urgent"], "#")
        '#work #urgent'
    """
    check_marker(marker)
    return " ".join(f"{marker}{tag}" for tag in tags)
