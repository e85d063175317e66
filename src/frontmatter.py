"""Front matter for new drafts and existing posts."""

from __future__ import annotations

import logging

import yaml

logger = logging.getLogger(__name__)

DELIMITER = "---"


def render_front_matter(
    title: str,
    *,
    layout: str = "post",
    author: str = "DVG",
    comments: bool = True,
) -> str:
    """Build the front matter block written into a new draft.

    Field order is fixed and the title is written verbatim. The block is
    followed by one blank line and no body. Titles are not YAML-escaped, so
    a title containing a newline or ``---`` breaks the block.
    """
    lines: list[str] = [DELIMITER]
    lines.append(f"layout: {layout}")
    lines.append(f"title: {title}")
    lines.append(f"author: {author}")
    lines.append(f"comments: {'true' if comments else 'false'}")
    lines.append(DELIMITER)
    lines.append("")
    return "\n".join(lines) + "\n"


def read_front_matter(text: str) -> dict[str, object]:
    """Extract the YAML front matter of a post.

    Returns an empty dict when the text has no front matter block or the
    block is not a YAML mapping.
    """
    if not text.startswith(DELIMITER):
        return {}

    parts = text.split(DELIMITER, 2)
    if len(parts) < 3:
        return {}

    try:
        data = yaml.safe_load(parts[1])
    except yaml.YAMLError as exc:
        logger.warning("Malformed front matter: %s", exc)
        return {}

    if not isinstance(data, dict):
        return {}
    return data
