from typing import Protocol, Iterable, Any
from .model import NoteId


class StorageStrategy(Protocol):
    """
    Flat store: one directory, files named <id><suffix>
    """

    def read_raw(self, id: NoteId) -> str | None:
        pass

    def write_raw(self, id: NoteId, contents: str) -> None:
        pass

    def list_all_ids(self) -> Iterable[NoteId]:
        pass


class FrontmatterCodec(Protocol):
    """
    Split optional frontmatter off a note without re-encoding it.
    """

    def split(self, text: str) -> tuple[dict[str, Any], str, str]:
        pass
