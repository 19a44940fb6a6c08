"""Port: abstract filesystem the loader reads templates from."""

from __future__ import annotations

from typing import Protocol

from fs_template_loader.l1_entities.source import EntryType


class Filesystem(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Narrow read-only view of a storage backend.

    Every method except ``has`` raises ``FileNotFoundError`` for an absent path.
    """

    def has(self, path: str) -> bool:
        """Return True if *path* exists (file or directory)."""
        ...

    def read_text(self, path: str) -> str | bytes:
        """Return the full content stored at *path*."""
        ...

    def type_of(self, path: str) -> EntryType | str:
        """Return ``'file'`` or ``'directory'``."""
        ...

    def modification_time(self, path: str) -> int:
        """Return the last modification time as unix epoch seconds."""
        ...
