"""Configuration loaded from .draftsman.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".draftsman.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
    Path.home() / ".config" / "draftsman",
]


class PathsConfig(BaseModel):
    """[paths] section."""

    root: str = "."
    drafts_dir: str = "_drafts"
    posts_dir: str = "_posts"


class FrontMatterConfig(BaseModel):
    """[front_matter] section."""

    layout: str = "post"
    author: str = "DVG"
    comments: bool = True


class DraftsmanConfig(BaseModel):
    """Top-level configuration for the post lifecycle."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    front_matter: FrontMatterConfig = Field(default_factory=FrontMatterConfig)

    @property
    def drafts_path(self) -> Path:
        return Path(self.paths.root) / self.paths.drafts_dir

    @property
    def posts_path(self) -> Path:
        return Path(self.paths.root) / self.paths.posts_dir


def load_config(path: str | Path | None = None) -> DraftsmanConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .draftsman.toml in CWD, then in ~/.config/draftsman
    3. ~/.config/draftsman/config.toml

    Then overlay environment variables.

    Args:
        path: Explicit path to a TOML file.

    Returns:
        Merged DraftsmanConfig.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        global_config = Path.home() / ".config" / "draftsman" / "config.toml"
        if not data and global_config.exists():
            data = _load_toml(global_config)
            logger.info("Loaded config from %s", global_config)

    config = DraftsmanConfig.model_validate(data) if data else DraftsmanConfig()

    return _apply_env_vars(config)


def merge_cli_overrides(config: DraftsmanConfig, **cli_kwargs: object) -> DraftsmanConfig:
    """Overlay explicitly-set CLI flags onto the config.

    Only overrides values where the CLI flag was explicitly provided
    (i.e., not None).

    Args:
        config: Base config.
        **cli_kwargs: CLI flag values keyed by flag name with dashes
            replaced by underscores (e.g., ``drafts_dir``, ``author``).

    Returns:
        Updated config with CLI overrides applied.
    """
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "root": ("paths", "root"),
        "drafts_dir": ("paths", "drafts_dir"),
        "posts_dir": ("paths", "posts_dir"),
        "layout": ("front_matter", "layout"),
        "author": ("front_matter", "author"),
        "comments": ("front_matter", "comments"),
    }

    for key, value in cli_kwargs.items():
        if value is None:
            continue
        if key in mapping:
            section, field = mapping[key]
            data[section][field] = str(value) if isinstance(value, Path) else value

    return DraftsmanConfig.model_validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: DraftsmanConfig) -> DraftsmanConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "DRAFTSMAN_ROOT": ("paths", "root"),
        "DRAFTSMAN_DRAFTS_DIR": ("paths", "drafts_dir"),
        "DRAFTSMAN_POSTS_DIR": ("paths", "posts_dir"),
        "DRAFTSMAN_LAYOUT": ("front_matter", "layout"),
        "DRAFTSMAN_AUTHOR": ("front_matter", "author"),
    }

    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    comments_raw = os.environ.get("DRAFTSMAN_COMMENTS")
    if comments_raw is not None:
        data["front_matter"]["comments"] = comments_raw.lower() in ("true", "1", "yes")

    return DraftsmanConfig.model_validate(data)
