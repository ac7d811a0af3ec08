"""Per-store options."""

from __future__ import annotations

import codecs
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dotconfig.formats import Format

__all__ = ["StoreOptions"]


class StoreOptions(BaseModel):
    """Options bound to a :class:`~dotconfig.config.Configuration`.

    Attributes:
        format: Explicit format, overriding detection from the file extension.
            Accepts a :class:`Format` or an extension-style name such as
            ``"yml"``; unknown names fall back to JSON.
        indent: Indentation width for written files. ``None`` keeps each
            codec's default (compact JSON, 2-space YAML).
        encoding: Text encoding used for reads and writes.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    format: Format | None = None
    indent: int | None = Field(default=None, ge=1)
    encoding: str = "utf-8"

    @field_validator("format", mode="before")
    @classmethod
    def _coerce_format(cls, v: Any) -> Any:
        if isinstance(v, str) and not isinstance(v, Format):
            return Format.from_extension(v)
        return v

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v
