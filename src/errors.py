"""Errors raised by post lifecycle operations."""

from __future__ import annotations


class DraftsmanError(Exception):
    """Base class for every error a lifecycle operation reports."""


class InvalidArgumentError(DraftsmanError, ValueError):
    """A required title or filename is missing, empty, or unusable."""


class PostNotFoundError(DraftsmanError):
    """The referenced post does not exist in the area it was expected in."""

    def __init__(self, filename: str, area: str) -> None:
        self.filename = filename
        self.area = area
        super().__init__(f"no post named {filename} in {area}")
