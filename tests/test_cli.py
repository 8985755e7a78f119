"""Tests for the notetags CLI."""

import json
import subprocess
import sys
import tempfile
from pathlib import Path


def run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "notetags", *args],
        capture_output=True,
        text=True,
    )


def _write_notes(vault: Path) -> None:
    (vault / "n1.md").write_text("""---
id: n1
---

# First
#work #urgent

Body.
""")
    (vault / "n2.md").write_text("# Second\n\n#home #work\nBody\n")
    (vault / "n3.md").write_text("# Third\nNo tags here.\n")


def test_tags_text_and_json():
    """Test printing the tags of a note."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        _write_notes(vault)

        result = run_cli("--vault", str(vault), "tags", "n1")
        assert result.returncode == 0
        assert result.stdout.splitlines() == ["work", "urgent"]

        result = run_cli("--vault", str(vault), "tags", "n2", "--format", "json")
        assert result.returncode == 0
        assert json.loads(result.stdout) == {"id": "n2", "tags": ["home", "work"]}


def test_tags_missing_note():
    """Test asking for a note that does not exist."""
    with tempfile.TemporaryDirectory() as tmpdir:
        result = run_cli("--vault", tmpdir, "tags", "nope")
        assert result.returncode == 1
        assert "not found" in result.stderr


def test_ls_json_with_tag_filter():
    """Test listing notes carrying a tag."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        _write_notes(vault)

        result = run_cli("--vault", str(vault), "ls", "--tag", "work", "--format", "json")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert [n["id"] for n in data] == ["n1", "n2"]
        assert data[0]["title"] == "First"

        result = run_cli("--vault", str(vault), "ls")
        assert result.returncode == 0
        assert "n3\tThird\t" in result.stdout.splitlines()


def test_locate_json_and_tsv():
    """Test locating the tag line in file offsets and lines."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        _write_notes(vault)
        raw = (vault / "n2.md").read_text()

        result = run_cli("--vault", str(vault), "locate", "n2")
        assert result.returncode == 0
        data = json.loads(result.stdout)
        start, end = data["range"]["start"], data["range"]["end"]
        assert raw[start:end] == "#home #work"
        assert data["line"] == 3
        assert data["path"].endswith("n2.md")

        result = run_cli("--vault", str(vault), "locate", "n2", "--format", "tsv")
        assert result.returncode == 0
        cols = result.stdout.strip().split("\t")
        assert cols[0] == "n2"
        assert cols[2:] == [str(start), str(end), "3"]


def test_locate_without_tag_line():
    """Test locating in a note without tag line."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        _write_notes(vault)

        result = run_cli("--vault", str(vault), "locate", "n3")
        assert result.returncode == 1
        assert "No tag line" in result.stderr


def test_rename_single_note():
    """Test renaming a tag in one note."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        _write_notes(vault)

        result = run_cli("--vault", str(vault), "rename", "work", "job", "n2")
        assert result.returncode == 0
        assert (vault / "n2.md").read_text() == "# Second\n\n#home #job\nBody\n"
        # other notes untouched
        assert "#work #urgent" in (vault / "n1.md").read_text()


def test_rename_all_requires_confirm():
    """Test that editing every note needs --confirm."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        _write_notes(vault)

        result = run_cli("--vault", str(vault), "rename", "work", "job")
        assert result.returncode == 1
        assert "--confirm" in result.stderr

        result = run_cli("--vault", str(vault), "rename", "work", "job", "--confirm")
        assert result.returncode == 0
        assert "#job #urgent" in (vault / "n1.md").read_text()
        assert "#home #job" in (vault / "n2.md").read_text()


def test_rm_dry_run_prints_diff():
    """Test that a dry run shows a diff and writes nothing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        _write_notes(vault)
        before = (vault / "n1.md").read_text()

        result = run_cli("--vault", str(vault), "rm", "urgent", "--dry-run")
        assert result.returncode == 0
        assert "-#work #urgent" in result.stdout
        assert "+#work" in result.stdout
        assert (vault / "n1.md").read_text() == before


def test_rm_absent_tag():
    """Test removing a tag no note carries."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        _write_notes(vault)

        result = run_cli("--vault", str(vault), "rm", "nothing", "n1")
        assert result.returncode == 1
        assert "not found" in result.stderr


def test_trailing_placement_and_marker_flags():
    """Test overriding placement and marker on the command line."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        (vault / "t.md").write_text("Body line one.\nBody line two.\n@done @reviewed\n")

        result = run_cli(
            "--vault", str(vault), "--placement", "trailing-line", "--marker", "@",
            "rm", "done", "t",
        )
        assert result.returncode == 0
        assert (vault / "t.md").read_text() == "Body line one.\nBody line two.\n@reviewed\n"


def test_bad_config_reports_error():
    """Test that an invalid config exits with an error."""
    with tempfile.TemporaryDirectory() as tmpdir:
        config_path = Path(tmpdir) / "notetags.toml"
        config_path.write_text('[tags]\nplacement = "middle"\n')

        result = run_cli("--config", str(config_path), "--vault", tmpdir, "ls")
        assert result.returncode == 1
        assert "placement" in result.stderr


def test_quiet_hides_ids_and_summary():
    """Test that -q prints nothing on a successful edit."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        _write_notes(vault)

        result = run_cli("--vault", str(vault), "rename", "work", "job", "n2")
        assert result.stdout.splitlines() == ["n2"]
        assert "Updated 1 note(s)" in result.stderr

        result = run_cli("--vault", str(vault), "-q", "rename", "job", "task", "n2")
        assert result.returncode == 0
        assert result.stdout == ""
        assert "Updated" not in result.stderr
        assert "#home #task" in (vault / "n2.md").read_text()


def test_verbose_logs_rejected_lines():
    """Test that -v shows why a line was not taken as a tag line."""
    with tempfile.TemporaryDirectory() as tmpdir:
        vault = Path(tmpdir)
        (vault / "p.md").write_text("# Prose\n#tag and more text\n")

        result = run_cli("--vault", str(vault), "tags", "p")
        assert result.returncode == 0
        assert "DEBUG" not in result.stderr

        result = run_cli("--vault", str(vault), "-v", "tags", "p")
        assert result.returncode == 0
        assert result.stdout == ""
        assert "DEBUG notetags.core.locator" in result.stderr
        assert "not a tag line" in result.stderr
