"""Gateway: filesystem-backed template loader; implements TemplateLoader port."""

from __future__ import annotations

import logging

from fs_template_loader.l1_entities.config import LoaderConfig
from fs_template_loader.l1_entities.errors import (
    TemplateIsDirectoryError,
    TemplateLoaderError,
    TemplateMissingError,
)
from fs_template_loader.l1_entities.source import EntryType, TemplateSource
from fs_template_loader.l2_use_cases.ports.filesystem import Filesystem
from fs_template_loader.l2_use_cases.utils.path_resolver import resolve_path

log = logging.getLogger('fstl.loader')

NOT_FOUND_MESSAGE = 'Template could not be found on the given filesystem'
DIRECTORY_MESSAGE = 'Cannot use directory as template'
READ_FAILED_MESSAGE = 'File not found.'


class FilesystemTemplateLoader:
    """Serves template sources from a Filesystem under an optional path prefix.

    Every public operation first checks that the resolved path exists and is
    not a directory. The loader holds no per-lookup state; it is safe to
    share between threads when the filesystem is.
    """

    def __init__(self, filesystem: Filesystem, prefix: str = '', *, encoding: str = 'utf-8') -> None:
        self._filesystem = filesystem
        self._prefix = prefix or ''
        self._encoding = encoding

    @classmethod
    def from_config(cls, filesystem: Filesystem, config: LoaderConfig) -> FilesystemTemplateLoader:
        return cls(filesystem, config.prefix, encoding=config.encoding)

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def filesystem(self) -> Filesystem:
        return self._filesystem

    def resolve_path(self, name: str) -> str:
        return resolve_path(self._prefix, name)

    def ensure_loadable(self, name: str) -> None:
        """Raise unless *name* resolves to an existing non-directory entry."""
        path = self.resolve_path(name)
        if not self._filesystem.has(path):
            log.debug('template %r not found at %r', name, path)
            raise TemplateMissingError(name, NOT_FOUND_MESSAGE)

        try:
            entry_type = self._filesystem.type_of(path)
        except FileNotFoundError as exc:
            # removed between has() and type_of()
            log.debug('template %r vanished before type check at %r', name, path)
            raise TemplateMissingError(name, NOT_FOUND_MESSAGE) from exc

        if EntryType(entry_type) is EntryType.DIRECTORY:
            log.debug('template %r resolves to directory %r', name, path)
            raise TemplateIsDirectoryError(name, DIRECTORY_MESSAGE)

    def get_source(self, name: str) -> TemplateSource:
        self.ensure_loadable(name)
        path = self.resolve_path(name)
        try:
            content = self._filesystem.read_text(path)
        except FileNotFoundError as exc:
            log.debug('template %r vanished before read at %r', name, path)
            raise TemplateMissingError(name, READ_FAILED_MESSAGE) from exc

        if isinstance(content, bytes):
            content = content.decode(self._encoding)
        log.debug('loaded template %r from %r (%d chars)', name, path, len(content))
        return TemplateSource(code=content, name=name)

    def get_cache_key(self, name: str) -> str:
        # Key excludes the prefix; differently-prefixed loaders sharing a cache collide.
        self.ensure_loadable(name)
        return name

    def get_modification_time(self, name: str) -> int:
        """Return the template's modification time as reported by the filesystem."""
        self.ensure_loadable(name)
        path = self.resolve_path(name)
        try:
            return int(self._filesystem.modification_time(path))
        except FileNotFoundError as exc:
            log.debug('template %r vanished before mtime query at %r', name, path)
            raise TemplateMissingError(name, NOT_FOUND_MESSAGE) from exc

    def is_fresh(self, name: str, time: int) -> bool:
        return int(time) >= self.get_modification_time(name)

    def exists(self, name: str) -> bool:
        try:
            self.ensure_loadable(name)
        except TemplateLoaderError:
            return False
        return True

    def __repr__(self) -> str:
        return f'{type(self).__name__}(prefix={self._prefix!r})'
