"""Domain error types."""

from __future__ import annotations


class TemplateLoaderError(Exception):
    """Raised when a template name cannot be served by the loader."""

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.message = message


class TemplateMissingError(TemplateLoaderError):
    """Raised when the resolved path does not exist, or vanished mid-call."""


class TemplateIsDirectoryError(TemplateLoaderError):
    """Raised when the resolved path exists but is a directory."""
