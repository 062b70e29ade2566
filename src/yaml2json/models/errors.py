"""Error payloads written to the output stream."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class YamlError(BaseModel):
    """Error record emitted in place of a document with ``--error json``."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(alias="yaml-error")

    def __str__(self) -> str:
        return self.message


__all__ = ["YamlError"]
