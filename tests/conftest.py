"""Keep tests away from the developer's own config and environment."""

import os
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("DRAFTSMAN_"):
            monkeypatch.delenv(name)
    monkeypatch.delenv("title", raising=False)
    monkeypatch.delenv("post", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.setattr("draftsman.config.CONFIG_SEARCH_PATHS", [Path(".")])
