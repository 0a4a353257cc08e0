"""
Filesystem store for guide documents.

All paths are resolved relative to the store root (settings.BASE_DIR unless
one is passed in). Path traversal protection is enforced at a single
chokepoint: _resolve(). Unlike a tool function, fetch() raises on failure;
turning that into a response is the dispatcher's job.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from . import settings


class GuideStoreError(Exception):
    """A guide could not be read. The message carries the underlying cause."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not read '{path}': {reason}")
        self.path = path
        self.reason = reason


class GuideStore:
    def __init__(self, base_dir: str | Path | None = None) -> None:
        self._base_dir = Path(base_dir).resolve() if base_dir is not None else None

    @property
    def base_dir(self) -> Path:
        # Read lazily so settings.set_base_dir() applies to a default store.
        return self._base_dir or settings.BASE_DIR

    # -----------------------------------------------------------------------
    # Path safety
    # -----------------------------------------------------------------------

    def _resolve(self, path: str) -> Path:
        """
        Resolve *path* to an absolute Path inside the store root.
        Raises GuideStoreError if it escapes the root or is otherwise invalid.
        """
        root = self.base_dir
        try:
            resolved = (root / path).resolve()      # follows symlinks
            resolved.relative_to(root)              # raises ValueError if outside
        except (ValueError, OSError) as exc:
            raise GuideStoreError(path, "path is outside the content store or invalid") from exc
        return resolved

    # -----------------------------------------------------------------------
    # Reads
    # -----------------------------------------------------------------------

    def read(self, path: str) -> str:
        """Return the guide text exactly as stored (UTF-8, newlines untouched)."""
        resolved = self._resolve(path)
        try:
            return resolved.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise GuideStoreError(path, str(exc)) from exc

    async def fetch(self, path: str) -> str:
        """Async read; the file I/O runs in a worker thread."""
        return await asyncio.to_thread(self.read, path)
