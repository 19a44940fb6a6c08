"""Configuration Pydantic models."""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, field_validator


class LoaderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    prefix: str = ''
    encoding: str = 'utf-8'  # used only when the filesystem hands back bytes

    @field_validator('encoding')
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f'Unknown encoding: {value!r}') from exc
        return value
