import re, io
import logging
import yaml
from typing import Any
from ..core.ports import FrontmatterCodec

logger = logging.getLogger(__name__)

_FM = re.compile(r"^\s*---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


class YamlFrontmatter(FrontmatterCodec):
    def split(self, text: str) -> tuple[dict[str, Any], str, str]:
        """
        Split ``text`` into (meta, head, body) with ``head + body == text``.

        The head is the raw frontmatter block, kept byte for byte so that
        edits to the body never touch it.
        """
        m = _FM.match(text)
        if not m:
            return {}, "", text
        try:
            meta = yaml.safe_load(io.StringIO(m.group(1))) or {}
        except yaml.YAMLError as e:
            logger.warning("Ignoring invalid frontmatter: %s", e)
            meta = {}
        if not isinstance(meta, dict):
            meta = {}
        return meta, text[: m.end()], text[m.end() :]
