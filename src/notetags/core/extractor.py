from .codec import decode, encode
from .locator import TagLineLocator
from .model import LineBounds, Placement
from .mutator import remove_tag, rename_tag


class TagExtractor:
    """
    Tag-line operations for one placement convention and marker.

    The marker is checked once here; every method is a pure function of the
    text it is given.
    """

    def __init__(self, placement: Placement | str, marker: str = "#"):
        self.locator = TagLineLocator(placement, marker)

    @property
    def placement(self) -> Placement:
        return self.locator.mode

    @property
    def marker(self) -> str:
        return self.locator.marker

    def locate(self, text: str) -> LineBounds | None:
        return self.locator.locate(text)

    def tag_line(self, text: str) -> str | None:
        bounds = self.locate(text)
        if bounds is None:
            return None
        return bounds.slice(text)

    def tags(self, text: str) -> list[str]:
        line = self.tag_line(text)
        if line is None:
            return []
        return decode(line, self.marker)

    def to_tag_line(self, tags: list[str]) -> str:
        return encode(tags, self.marker)

    def rename(self, text: str, old_tag: str, new_tag: str) -> str | None:
        return rename_tag(text, old_tag, new_tag, self.marker, self.placement)

    def remove(self, text: str, tag_name: str) -> str | None:
        return remove_tag(text, tag_name, self.marker, self.placement)
