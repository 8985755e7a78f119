"""Configuration loader for notetags.toml."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .core.model import Placement, TagMarkerError, check_marker

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore


class ConfigError(ValueError):
    """Raised when notetags.toml holds an unusable value."""


@dataclass
class VaultConfig:
    """Note directory configuration."""
    root: Path
    suffix: str = ".md"
    recursive: bool = False


@dataclass
class TagsConfig:
    """Tag-line configuration."""
    marker: str = "#"
    placement: Placement = Placement.AFTER_TITLE
    frontmatter: bool = True


@dataclass
class NotetagsConfig:
    """Complete notetags configuration."""
    vault: VaultConfig
    tags: TagsConfig


def load_config(config_path: Path | None = None, vault_path: Path | None = None) -> NotetagsConfig:
    """
    Load configuration from notetags.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/notetags.toml
    3. vault_path/notetags.toml

    Args:
        config_path: Explicit path to config file
        vault_path: Vault root path for fallback search

    Returns:
        NotetagsConfig with resolved settings

    Raises:
        ConfigError: if a value cannot be used
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(config_path)
    search_paths.append(Path.cwd() / "notetags.toml")
    if vault_path:
        search_paths.append(vault_path / "notetags.toml")

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    # Parse vault config
    vault_data = toml_data.get("vault", {})
    suffix = vault_data.get("suffix", ".md")
    if not isinstance(suffix, str) or not suffix:
        raise ConfigError(f"vault.suffix must be a non-empty string, got {suffix!r}")

    vault_config = VaultConfig(
        root=Path(vault_data.get("root", vault_path or Path("./notes"))),
        suffix=suffix,
        recursive=bool(vault_data.get("recursive", False)),
    )

    # Parse tags config
    tags_data = toml_data.get("tags", {})
    try:
        marker = check_marker(tags_data.get("marker", "#"))
    except TagMarkerError as e:
        raise ConfigError(f"tags.marker: {e}") from e

    placement_value = tags_data.get("placement", Placement.AFTER_TITLE.value)
    try:
        placement = Placement(placement_value)
    except ValueError:
        choices = ", ".join(p.value for p in Placement)
        raise ConfigError(
            f"tags.placement must be one of {choices}, got {placement_value!r}"
        ) from None

    tags_config = TagsConfig(
        marker=marker,
        placement=placement,
        frontmatter=bool(tags_data.get("frontmatter", True)),
    )

    return NotetagsConfig(
        vault=vault_config,
        tags=tags_config,
    )
