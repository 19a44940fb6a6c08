"""Template source value types: pure data, no I/O."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class EntryType(str, Enum):
    FILE = 'file'
    DIRECTORY = 'directory'


class TemplateSource(BaseModel):
    """Template code paired with the name the caller asked for (never the resolved path)."""

    model_config = ConfigDict(frozen=True)

    code: str
    name: str
