"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.fs_storage import FsStorage
from .adapters.yaml_codec import YamlFrontmatter
from .config import NotetagsConfig, load_config
from .core.extractor import TagExtractor
from .core.model import Placement
from .core.vault import Vault


@dataclass
class Runtime:
    """Container for all wired components."""
    vault: Vault
    extractor: TagExtractor
    config: NotetagsConfig


def build_runtime(
    vault_path: Path | None = None,
    config_path: Path | None = None,
    marker: str | None = None,
    placement: Placement | str | None = None,
) -> Runtime:
    """Build and wire all components for a vault."""
    config = load_config(config_path=config_path, vault_path=vault_path)

    # Use config values if CLI args not provided
    if vault_path is None:
        vault_path = config.vault.root
    if marker is None:
        marker = config.tags.marker
    if placement is None:
        placement = config.tags.placement

    storage = FsStorage(
        vault_path,
        suffix=config.vault.suffix,
        recursive=config.vault.recursive,
    )
    extractor = TagExtractor(placement, marker)
    vault = Vault(
        storage,
        YamlFrontmatter(),
        extractor,
        frontmatter=config.tags.frontmatter,
    )

    return Runtime(
        vault=vault,
        extractor=extractor,
        config=config,
    )
