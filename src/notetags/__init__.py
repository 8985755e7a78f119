"""notetags - locate, rename and remove tags on the tag line of a note."""

__version__ = "0.1.0"

from .core.codec import decode, encode
from .core.extractor import TagExtractor
from .core.locator import TagLineLocator, locate
from .core.model import LineBounds, Placement, TagMarkerError
from .core.mutator import extract_tags, find_tag_line, remove_tag, rename_tag

__all__ = [
    "__version__",
    "decode",
    "encode",
    "extract_tags",
    "find_tag_line",
    "locate",
    "remove_tag",
    "rename_tag",
    "LineBounds",
    "Placement",
    "TagExtractor",
    "TagLineLocator",
    "TagMarkerError",
]
