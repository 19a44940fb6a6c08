"""Dependency container: composition root wiring filesystem, loader and Jinja2."""

from __future__ import annotations

from jinja2 import Environment

from fs_template_loader.l1_entities.config import LoaderConfig
from fs_template_loader.l2_use_cases.ports.filesystem import Filesystem
from fs_template_loader.l3_interface_adapters.gateways.filesystem_template_loader import FilesystemTemplateLoader
from fs_template_loader.l4_frameworks_and_drivers.jinja_loader import JinjaFilesystemLoader


class LoaderContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(self, filesystem: Filesystem, config: LoaderConfig | None = None) -> None:
        self.config = config or LoaderConfig()
        self.filesystem = filesystem
        self.loader = FilesystemTemplateLoader.from_config(filesystem, self.config)
        self.jinja_loader = JinjaFilesystemLoader(self.loader)
        self.environment = Environment(
            loader=self.jinja_loader,
            autoescape=False,
            keep_trailing_newline=True,
        )

    def render(self, name: str, **context) -> str:
        return self.environment.get_template(name).render(**context)
