"""Template name to filesystem path resolution."""

from __future__ import annotations

SEPARATOR = '/'


def resolve_path(prefix: str, name: str) -> str:
    """Join *prefix* and *name* with exactly one separator between them.

    An empty prefix leaves the name untouched. Only the prefix side is
    normalized; the name is used as given.
    """
    if not prefix:
        return name
    return prefix.rstrip(SEPARATOR) + SEPARATOR + name
