"""CLI for notetags - manage the tag line of Markdown notes."""

import argparse
import difflib
import json
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .core.model import Placement
from .core.vault import TagChange
from .locate import cmd_locate
from .runtime import build_runtime


def _missing_ids(args: argparse.Namespace, rt: Any) -> list[str]:
    return [nid for nid in args.ids if not rt.vault.exists(nid)]


def _print_diff(change: TagChange, rt: Any) -> None:
    path = str(rt.vault.storage._path(change.id))
    diff = difflib.unified_diff(
        change.original.splitlines(keepends=True),
        change.updated.splitlines(keepends=True),
        fromfile=path,
        tofile=path,
    )
    print("".join(diff), end="")


def _apply_changes(
    args: argparse.Namespace, rt: Any, changes: list[TagChange], tag: str
) -> int:
    if not changes:
        print(f"Tag {rt.extractor.marker}{tag} not found on any tag line", file=sys.stderr)
        return 1

    for change in changes:
        if args.dry_run:
            _print_diff(change, rt)
        else:
            rt.vault.apply(change)
            if not args.quiet:
                print(change.id)

    if not args.quiet:
        verb = "Would update" if args.dry_run else "Updated"
        print(f"{verb} {len(changes)} note(s)", file=sys.stderr)
    return 0


def _check_targets(args: argparse.Namespace, rt: Any) -> int:
    missing = _missing_ids(args, rt)
    if missing:
        for nid in missing:
            print(f"Note {nid} not found", file=sys.stderr)
        return 1

    # Editing the whole vault needs an explicit go-ahead
    if not args.ids and not args.dry_run and not args.confirm:
        print("Error: --confirm required to edit every note (or use --dry-run)", file=sys.stderr)
        return 1
    return 0


def cmd_tags(args: argparse.Namespace, rt: Any) -> int:
    """Print the tags of a note."""
    note = rt.vault.get(args.id)
    if note is None:
        print(f"Note {args.id} not found", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps({"id": note.id, "tags": note.tags}, indent=2))
    else:
        for tag in note.tags:
            print(tag)
    return 0


def cmd_ls(args: argparse.Namespace, rt: Any) -> int:
    """List notes with their tags."""
    notes = []
    for nid in rt.vault.list_ids():
        note = rt.vault.get(nid)
        if note is None:
            continue
        if args.tag and args.tag not in note.tags:
            continue
        notes.append(note)

    if args.format == "json":
        result = [
            {"id": note.id, "title": note.title or "", "tags": note.tags}
            for note in notes
        ]
        print(json.dumps(result, indent=2))
    else:
        # Tab-separated output
        for note in notes:
            line = rt.extractor.to_tag_line(note.tags)
            print(f"{note.id}\t{note.title or ''}\t{line}")
    return 0


def cmd_rename(args: argparse.Namespace, rt: Any) -> int:
    """Rename a tag on the tag line of notes."""
    code = _check_targets(args, rt)
    if code:
        return code

    ids = args.ids or None
    changes = list(rt.vault.rename_all(args.old, args.new, ids=ids))
    return _apply_changes(args, rt, changes, args.old)


def cmd_rm(args: argparse.Namespace, rt: Any) -> int:
    """Remove a tag from the tag line of notes."""
    code = _check_targets(args, rt)
    if code:
        return code

    ids = args.ids or None
    changes = list(rt.vault.remove_all(args.tag, ids=ids))
    return _apply_changes(args, rt, changes, args.tag)


def _add_edit_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "ids", nargs="*", metavar="ID",
        help="Notes to edit (default: every note in the vault)"
    )
    parser.add_argument(
        "--dry-run", action="store_true",
        help="Print unified diff without writing"
    )
    parser.add_argument(
        "--confirm", action="store_true",
        help="Required to edit every note (unless dry-run)"
    )


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="notetags", description="Manage the tag line of Markdown notes"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=(
            f"notetags {__version__} "
            f"(python {platform.python_version()}, platform {platform.platform()})"
        ),
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/notetags.toml, vault/notetags.toml)",
    )
    parser.add_argument(
        "--vault",
        type=Path,
        default=None,
        help="Path to notes directory (overrides config)",
    )
    parser.add_argument(
        "--marker",
        default=None,
        help="Tag marker character (overrides config, default: #)",
    )
    parser.add_argument(
        "--placement",
        choices=[p.value for p in Placement],
        default=None,
        help="Where notes keep their tag line (overrides config, default: after-title)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log why lines are rejected"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # tags command
    parser_tags = subparsers.add_parser("tags", help="Print the tags of a note")
    parser_tags.add_argument("id", help="Note ID")
    parser_tags.add_argument(
        "--format", choices=["text", "json"], default="text",
        help="Output format (default: text)"
    )

    # ls command
    parser_ls = subparsers.add_parser("ls", help="List notes with their tags")
    parser_ls.add_argument("--tag", help="Only notes carrying this tag")
    parser_ls.add_argument(
        "--format", choices=["text", "json"], default="text",
        help="Output format (default: text)"
    )

    # locate command
    parser_locate = subparsers.add_parser("locate", help="Get precise location of the tag line")
    parser_locate.add_argument("id", help="Note ID")
    parser_locate.add_argument(
        "--format", choices=["json", "tsv"], default="json",
        help="Output format (default: json)"
    )

    # rename command
    parser_rename = subparsers.add_parser("rename", help="Rename a tag")
    parser_rename.add_argument("old", help="Tag to rename (without marker)")
    parser_rename.add_argument("new", help="New tag name (without marker)")
    _add_edit_flags(parser_rename)

    # rm command
    parser_rm = subparsers.add_parser(
        "rm",
        help="Remove a tag",
        description=(
            "Remove a tag. With trailing-line placement the first word of the "
            "last line is not checked, so 'See #tag' counts as a tag line and "
            "removing its last tag empties the whole line. Use --dry-run to check."
        ),
    )
    parser_rm.add_argument("tag", help="Tag to remove (without marker)")
    _add_edit_flags(parser_rm)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        rt = build_runtime(
            vault_path=args.vault,
            config_path=args.config,
            marker=args.marker,
            placement=args.placement,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Dispatch to command handlers
    handlers = {
        "tags": cmd_tags,
        "ls": cmd_ls,
        "locate": cmd_locate,
        "rename": cmd_rename,
        "rm": cmd_rm,
    }

    handler = handlers.get(args.cmd)
    if handler:
        try:
            exit_code = handler(args, rt)
            sys.exit(exit_code)
        except Exception as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
