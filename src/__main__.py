"""Allow ``python -m draftsman``."""

from draftsman.cli import app

app()
