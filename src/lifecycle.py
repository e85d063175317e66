"""Post lifecycle: create drafts, publish them, and unpublish posts.

A post's state is its location. Drafts live in the drafts directory with
an undated filename; published posts live in the posts directory with a
``YYYY-MM-DD-`` prefix. Every operation validates its input and checks
the source before touching the filesystem, and each mutation is a single
``os.replace`` call.
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Callable
from datetime import date
from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel

from draftsman.config import DraftsmanConfig
from draftsman.errors import InvalidArgumentError, PostNotFoundError
from draftsman.frontmatter import read_front_matter, render_front_matter
from draftsman.naming import (
    draft_filename,
    is_published_filename,
    parse_publish_date,
    published_filename,
    strip_date_prefix,
)

logger = logging.getLogger(__name__)


class PostState(StrEnum):
    """Where a post currently lives."""

    DRAFT = "draft"
    PUBLISHED = "published"


class LifecycleAction(StrEnum):
    CREATED = "created"
    PUBLISHED = "published"
    UNPUBLISHED = "unpublished"


class LifecycleResult(BaseModel):
    """Outcome of a successful lifecycle operation."""

    action: LifecycleAction
    filename: str
    source: Path | None = None
    destination: Path
    state: PostState


class PostEntry(BaseModel):
    """A post found in the drafts or posts directory."""

    filename: str
    path: Path
    state: PostState
    title: str = ""
    publish_date: date | None = None


class PostLifecycle:
    """Moves posts between the drafts and posts directories."""

    def __init__(
        self,
        config: DraftsmanConfig | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._config = config or DraftsmanConfig()
        self._today = today

    @property
    def drafts_dir(self) -> Path:
        return self._config.drafts_path

    @property
    def posts_dir(self) -> Path:
        return self._config.posts_path

    def create(self, title: str | None) -> LifecycleResult:
        """Write a new draft for ``title``.

        An existing draft with the same slug is overwritten. A leading
        ``YYYY-MM-DD-`` in the slug is dropped so the draft name never looks
        published.

        Raises:
            InvalidArgumentError: The title is missing or has no usable
                characters.
        """
        if title is None or not title.strip():
            raise InvalidArgumentError("no title provided")

        filename = draft_filename(title)
        if is_published_filename(filename):
            # A dated draft name would be read as already published.
            logger.info("Dropping date prefix from draft name %s", filename)
            filename = strip_date_prefix(filename)
        if filename == ".md":
            raise InvalidArgumentError(f"title {title!r} does not produce a usable filename")

        fm = self._config.front_matter
        content = render_front_matter(
            title, layout=fm.layout, author=fm.author, comments=fm.comments
        )
        target = self.drafts_dir / filename
        if target.exists():
            logger.info("Overwriting existing draft %s", target)
        _atomic_write(target, content)
        logger.info("Created draft %s", target)

        return LifecycleResult(
            action=LifecycleAction.CREATED,
            filename=filename,
            destination=target,
            state=PostState.DRAFT,
        )

    def publish(self, filename: str | None) -> LifecycleResult:
        """Move a draft into the posts directory under today's date.

        Raises:
            InvalidArgumentError: The filename is missing or not a plain name.
            PostNotFoundError: No such draft exists.
        """
        name = _check_filename(filename)
        source = self.drafts_dir / name
        if not source.is_file():
            raise PostNotFoundError(name, self._config.paths.drafts_dir)

        new_name = published_filename(name, self._today())
        destination = self.posts_dir / new_name
        _move(source, destination)
        logger.info("Published %s as %s", source, destination)

        return LifecycleResult(
            action=LifecycleAction.PUBLISHED,
            filename=new_name,
            source=source,
            destination=destination,
            state=PostState.PUBLISHED,
        )

    def unpublish(self, filename: str | None) -> LifecycleResult:
        """Move a published post back to the drafts directory.

        The date prefix is stripped when present; an undated name is moved
        as is.

        Raises:
            InvalidArgumentError: The filename is missing or not a plain name.
            PostNotFoundError: No such published post exists.
        """
        name = _check_filename(filename)
        source = self.posts_dir / name
        if not source.is_file():
            raise PostNotFoundError(name, self._config.paths.posts_dir)

        new_name = strip_date_prefix(name)
        destination = self.drafts_dir / new_name
        _move(source, destination)
        logger.info("Unpublished %s to %s", source, destination)

        return LifecycleResult(
            action=LifecycleAction.UNPUBLISHED,
            filename=new_name,
            source=source,
            destination=destination,
            state=PostState.DRAFT,
        )

    def list_posts(self, state: PostState | None = None) -> list[PostEntry]:
        """List posts, drafts first, sorted by filename within each area."""
        areas = [(PostState.DRAFT, self.drafts_dir), (PostState.PUBLISHED, self.posts_dir)]
        entries: list[PostEntry] = []
        for area_state, directory in areas:
            if state is not None and state != area_state:
                continue
            if not directory.is_dir():
                logger.debug("Skipping missing directory %s", directory)
                continue
            for path in sorted(directory.glob("*.md")):
                if not path.is_file():
                    continue
                entries.append(_read_entry(path, area_state))
        return entries


def _check_filename(filename: str | None) -> str:
    if not filename:
        raise InvalidArgumentError("no filename provided")
    if filename in (".", "..") or Path(filename).name != filename:
        raise InvalidArgumentError(f"{filename!r} is not a plain file name")
    return filename


def _read_entry(path: Path, state: PostState) -> PostEntry:
    try:
        meta = read_front_matter(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        meta = {}
    title = meta.get("title")
    return PostEntry(
        filename=path.name,
        path=path,
        state=state,
        title="" if title is None else str(title),
        publish_date=parse_publish_date(path.name) if state == PostState.PUBLISHED else None,
    )


def _move(source: Path, destination: Path) -> None:
    """Rename ``source`` to ``destination``, replacing any existing file."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    os.replace(source, destination)


def _atomic_write(path: Path, content: str) -> None:
    """Write content to path via a temporary sibling and ``os.replace``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        with open(tmp_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise
