"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import pytest

from fs_template_loader.l1_entities.source import EntryType

# --- Protocol-conforming Fakes ---


class FakeFilesystem:
    """In-memory Filesystem fake that records every call it receives."""

    def __init__(self) -> None:
        self.files: dict[str, str | bytes] = {}
        self.mtimes: dict[str, int] = {}
        self.directories: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self._vanish_on: dict[str, set[str]] = {}
        self._errors: dict[str, Exception] = {}

    def add_file(self, path: str, content: str | bytes, mtime: int = 0) -> None:
        self.files[path] = content
        self.mtimes[path] = mtime

    def add_directory(self, path: str) -> None:
        self.directories.add(path)
        self.mtimes[path] = 0

    def vanish_on(self, method: str, path: str) -> None:
        """Make *method* report *path* as missing even though ``has`` still sees it."""
        self._vanish_on.setdefault(method, set()).add(path)

    def fail_with(self, method: str, error: Exception) -> None:
        self._errors[method] = error

    def _record(self, method: str, path: str) -> None:
        self.calls.append((method, path))
        if method in self._errors:
            raise self._errors[method]
        if path in self._vanish_on.get(method, set()):
            raise FileNotFoundError(path)

    def has(self, path: str) -> bool:
        self._record('has', path)
        return path in self.files or path in self.directories

    def read_text(self, path: str) -> str | bytes:
        self._record('read_text', path)
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    def type_of(self, path: str) -> EntryType:
        self._record('type_of', path)
        if path in self.directories:
            return EntryType.DIRECTORY
        if path in self.files:
            return EntryType.FILE
        raise FileNotFoundError(path)

    def modification_time(self, path: str) -> int:
        self._record('modification_time', path)
        if path not in self.mtimes:
            raise FileNotFoundError(path)
        return self.mtimes[path]

    def paths_called(self, method: str) -> list[str]:
        return [p for m, p in self.calls if m == method]


# --- Standard Fixtures ---


@pytest.fixture
def fake_fs() -> FakeFilesystem:
    return FakeFilesystem()


@pytest.fixture
def templates_fs() -> FakeFilesystem:
    fs = FakeFilesystem()
    fs.add_file('templates/test/Object.twig', '{{ template }}', mtime=1233)
    fs.add_directory('templates/test')
    return fs
