"""Jinja2 loader plugin backed by a TemplateLoader."""

from __future__ import annotations

import logging
from collections.abc import Callable

from jinja2 import BaseLoader, Environment, TemplateNotFound

from fs_template_loader.l1_entities.errors import TemplateLoaderError
from fs_template_loader.l2_use_cases.ports.template_loader import TemplateLoader

log = logging.getLogger('fstl.jinja')


class JinjaFilesystemLoader(BaseLoader):
    """Adapts a TemplateLoader to Jinja2's ``BaseLoader`` contract.

    Jinja2 receives the unresolved template name as the filename. The
    ``uptodate`` callable compares the template's current modification time
    with the one recorded when it was read, so only the filesystem's clock
    is involved. Loader errors surface as ``TemplateNotFound``.
    """

    def __init__(self, loader: TemplateLoader) -> None:
        self.loader = loader

    def get_source(self, environment: Environment, template: str) -> tuple[str, str, Callable[[], bool]]:
        try:
            source = self.loader.get_source(template)
            mtime = self.loader.get_modification_time(template)
        except TemplateLoaderError as exc:
            raise TemplateNotFound(template, exc.message) from exc

        def uptodate() -> bool:
            try:
                return self.loader.is_fresh(template, mtime)
            except TemplateLoaderError:
                log.debug('template %r no longer loadable; marking stale', template)
                return False

        return source.code, source.name, uptodate
