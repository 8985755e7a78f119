from pathlib import Path
from typing import Iterable
from ..core.ports import StorageStrategy


class FsStorage(StorageStrategy):
    def __init__(self, root: Path, suffix: str = ".md", recursive: bool = False):
        self.root = root
        self.suffix = suffix
        self.recursive = recursive

    def _path(self, id: str) -> Path:
        return self.root / f"{id}{self.suffix}"

    def read_raw(self, id: str) -> str | None:
        p = self._path(id)
        if not p.exists():
            return None
        # newline="" keeps CRLF endings intact
        with open(p, encoding="utf-8", newline="") as f:
            return f.read()

    def write_raw(self, id: str, contents: str) -> None:
        p = self._path(id)
        p.parent.mkdir(parents=True, exist_ok=True)
        # Atomic write using temp file
        tmp_path = p.with_name(p.name + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8", newline="") as f:
                f.write(contents)
            tmp_path.replace(p)
        except Exception:
            if tmp_path.exists():
                tmp_path.unlink()
            raise

    def list_all_ids(self) -> Iterable[str]:
        if not self.root.exists():
            return []
        pattern = f"*{self.suffix}"
        paths = self.root.rglob(pattern) if self.recursive else self.root.glob(pattern)
        return sorted(
            p.relative_to(self.root).as_posix()[: -len(self.suffix)]
            for p in paths
            if p.is_file()
        )
