"""Utilities for reporting where a note's tag line sits, by offset and line."""

import json
import sys
from typing import Any

from .core.vault import NoteTags


def char_offset_to_line(text: str, offset: int) -> int:
    """
    Convert character offset to line number (1-based).

    Args:
        text: The full text
        offset: Character offset (0-based)

    Returns:
        Line number (1-based)
    """
    return text.count("\n", 0, min(offset, len(text))) + 1


def locate_tag_line(
    note: NoteTags,
    raw: str,
    format_type: str = "json",
) -> dict[str, Any] | str:
    """
    Get precise location information for a note's tag line.

    Args:
        note: Tag information for the note
        raw: Full file contents the bounds refer to
        format_type: Output format ("json" or "tsv")

    Returns:
        Location as dict (for JSON) or TSV string; empty dict if no tag line
    """
    if note.bounds is None:
        return {}

    start, end = note.bounds.start, note.bounds.end
    # the tag line sits on a single line
    line = char_offset_to_line(raw, start)

    if format_type == "tsv":
        return f"{note.id}\t{start}\t{end}\t{line}"

    return {
        "id": note.id,
        "range": {"start": start, "end": end},
        "line": line,
        "text": raw[start:end],
        "tags": note.tags,
    }


def cmd_locate(args: Any, rt: Any) -> int:
    """
    Locate command handler.

    Args:
        args: Parsed command-line arguments
        rt: Runtime instance

    Returns:
        Exit code
    """
    nid = args.id
    note = rt.vault.get(nid)
    if note is None:
        print(f"Note {nid} not found", file=sys.stderr)
        return 1

    raw = rt.vault.storage.read_raw(nid)
    format_type = getattr(args, "format", "json")
    location = locate_tag_line(note, raw, format_type)

    if not location:
        print(f"No tag line in note {nid}", file=sys.stderr)
        return 1

    note_path = rt.vault.storage._path(nid)
    if format_type == "json":
        location["path"] = str(note_path.absolute())
        print(json.dumps(location, indent=2))
    else:
        # TSV format: id, path, start, end, line
        nid_col, rest = location.split("\t", 1)
        print(f"{nid_col}\t{note_path.absolute()}\t{rest}")

    return 0
