"""Pydantic models describing the serialized manifest.

Each table row names types by qualified name (``package.module:Qualname`` or
``package.module.Qualname``) and variants by identifier (``Group.MEMBER``).
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _require_text(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped
    return value


class ManifestBaseModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, alias_generator=to_camel)


class TypeMappingRow(ManifestBaseModel):
    source: str
    target: str
    variants: list[str] = Field(default_factory=list)
    implicit_variants: list[str] = Field(default_factory=list)

    _require_names = field_validator("source", "target", mode="before")(_require_text)


class PrefabMappingRow(ManifestBaseModel):
    source: str
    target: str
    variants: list[str] = Field(default_factory=list)

    _require_names = field_validator("source", "target", mode="before")(_require_text)


class ManifestPayload(ManifestBaseModel):
    models_to_view_models: list[TypeMappingRow] = Field(default_factory=list)
    view_models_to_views: list[TypeMappingRow] = Field(default_factory=list)
    views_to_prefabs: list[PrefabMappingRow] = Field(default_factory=list)


ManifestPayloadInput = ManifestPayload | Mapping[str, object]
