import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from .extractor import TagExtractor
from .model import LineBounds, NoteId
from .ports import FrontmatterCodec, StorageStrategy

logger = logging.getLogger(__name__)


@dataclass
class NoteTags:
    """Tag information for a stored note."""
    id: NoteId
    tags: list[str]
    bounds: LineBounds | None = None  # offsets into the whole file
    title: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class TagChange:
    """A pending edit to a note; nothing is written until applied."""
    id: NoteId
    original: str
    updated: str


def heading_title(body: str) -> str | None:
    """Title text of an ATX (``# ``) or setext (``===``) first line."""
    first, _, rest = body.partition("\n")
    if first.startswith("# "):
        return first[2:].strip()
    if rest.startswith("="):
        return first.strip()
    return None


class Vault:
    def __init__(
        self,
        storage: StorageStrategy,
        codec: FrontmatterCodec,
        extractor: TagExtractor,
        frontmatter: bool = True,
    ):
        self.storage = storage
        self.codec = codec
        self.extractor = extractor
        self.frontmatter = frontmatter

    def _split(self, raw: str) -> tuple[dict[str, Any], str, str]:
        if not self.frontmatter:
            return {}, "", raw
        return self.codec.split(raw)

    def exists(self, id: NoteId) -> bool:
        return self.storage.read_raw(id) is not None

    def list_ids(self) -> Iterable[NoteId]:
        return self.storage.list_all_ids()

    def get(self, id: NoteId) -> NoteTags | None:
        raw = self.storage.read_raw(id)
        if raw is None:
            return None
        meta, head, body = self._split(raw)
        bounds = self.extractor.locate(body)
        tags = []
        if bounds is not None:
            tags = self.extractor.tags(body)
            bounds = bounds.shift(len(head))
        title = meta.get("title")
        if not isinstance(title, str):
            title = heading_title(body)
        return NoteTags(id=id, tags=tags, bounds=bounds, title=title, meta=meta)

    def tags(self, id: NoteId) -> list[str] | None:
        """Tags of a note; None if the note does not exist."""
        note = self.get(id)
        return None if note is None else note.tags

    def locate(self, id: NoteId) -> LineBounds | None:
        """Tag-line bounds as offsets into the whole file, frontmatter included."""
        note = self.get(id)
        return None if note is None else note.bounds

    def _edit(self, id: NoteId, op) -> TagChange | None:
        raw = self.storage.read_raw(id)
        if raw is None:
            return None
        _, head, body = self._split(raw)
        new_body = op(body)
        if new_body is None:
            return None
        return TagChange(id=id, original=raw, updated=head + new_body)

    def rename(self, id: NoteId, old_tag: str, new_tag: str) -> TagChange | None:
        return self._edit(id, lambda body: self.extractor.rename(body, old_tag, new_tag))

    def remove(self, id: NoteId, tag_name: str) -> TagChange | None:
        return self._edit(id, lambda body: self.extractor.remove(body, tag_name))

    def rename_all(
        self, old_tag: str, new_tag: str, ids: Iterable[NoteId] | None = None
    ) -> Iterator[TagChange]:
        for nid in self.list_ids() if ids is None else ids:
            change = self.rename(nid, old_tag, new_tag)
            if change is not None:
                yield change

    def remove_all(
        self, tag_name: str, ids: Iterable[NoteId] | None = None
    ) -> Iterator[TagChange]:
        for nid in self.list_ids() if ids is None else ids:
            change = self.remove(nid, tag_name)
            if change is not None:
                yield change

    def apply(self, change: TagChange) -> None:
        logger.debug("Writing tag change to %s", change.id)
        self.storage.write_raw(change.id, change.updated)
