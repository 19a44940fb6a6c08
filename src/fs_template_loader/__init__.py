"""Load Jinja2 template source from an abstract filesystem under an optional prefix."""

from fs_template_loader.l1_entities.errors import (
    TemplateIsDirectoryError,
    TemplateLoaderError,
    TemplateMissingError,
)
from fs_template_loader.l1_entities.source import EntryType, TemplateSource
from fs_template_loader.l3_interface_adapters.gateways.filesystem_template_loader import FilesystemTemplateLoader

__all__ = [
    'EntryType',
    'FilesystemTemplateLoader',
    'TemplateIsDirectoryError',
    'TemplateLoaderError',
    'TemplateMissingError',
    'TemplateSource',
]
