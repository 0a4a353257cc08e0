"""
Shared pytest fixtures for the pixelaw-mcp test suite.

Tests that touch the filesystem operate on a temporary content store that is
patched in as settings.BASE_DIR, so the packaged guides are never modified.

Fixture layout created by `content`:
    <tmp_path>/
    └── guides/
        ├── guide_x.md      "# X"
        ├── crlf.md         Windows line endings, kept verbatim
        └── unicode.md      non-ASCII text
"""

from __future__ import annotations

import pytest

from pixelaw_mcp import settings
from pixelaw_mcp.catalog import GuideTool


@pytest.fixture(autouse=True)
def _restore_base_dir(monkeypatch):
    """Undo any settings.set_base_dir() a test (or the CLI) performs."""
    monkeypatch.setattr(settings, "BASE_DIR", settings.BASE_DIR)


@pytest.fixture()
def content(tmp_path, monkeypatch):
    guides = tmp_path / "guides"
    guides.mkdir()
    (guides / "guide_x.md").write_text("# X", encoding="utf-8")
    (guides / "crlf.md").write_bytes(b"# Title\r\n\r\nBody\r\n")
    (guides / "unicode.md").write_text("# Pixel été \U0001f3a8\n", encoding="utf-8")

    monkeypatch.setattr(settings, "BASE_DIR", tmp_path.resolve())
    return tmp_path


@pytest.fixture()
def guide_x() -> GuideTool:
    return GuideTool(
        name="guide_x",
        title="Guide X",
        description="Use this when you need X.",
        path="docs/x.md",
    )


@pytest.fixture()
def make_fetch():
    """Factory for fake fetch collaborators backed by a dict.

    Values that are exceptions are raised instead of returned. Every call is
    recorded in ``fetch.calls``.
    """

    def _make(responses: dict):
        calls: list[str] = []

        async def fetch(path: str) -> str:
            calls.append(path)
            value = responses[path]
            if isinstance(value, BaseException):
                raise value
            return value

        fetch.calls = calls
        return fetch

    return _make
