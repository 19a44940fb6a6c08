"""Port: template loader."""

from __future__ import annotations

from typing import Protocol

from fs_template_loader.l1_entities.source import TemplateSource


class TemplateLoader(Protocol):  # pragma: no cover -- abstract Protocol; never instantiated directly
    """Lookup surface the host templating engine drives."""

    def get_source(self, name: str) -> TemplateSource:
        """Return the source of template *name*."""
        ...

    def get_cache_key(self, name: str) -> str:
        """Return the key under which compiled *name* is cached."""
        ...

    def get_modification_time(self, name: str) -> int:
        """Return the current modification time of *name*."""
        ...

    def is_fresh(self, name: str, time: int) -> bool:
        """Return True if a compilation made at *time* is still valid."""
        ...

    def exists(self, name: str) -> bool:
        """Return True if *name* can be loaded."""
        ...
