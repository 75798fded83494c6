"""Manifest rows: type-to-type and view-to-prefab mappings."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field

from showzup.domain.variants import VariantSet


def _type_name(value: type | None) -> str:
    if value is None:
        return "None"
    return f"{value.__module__}.{value.__qualname__}"


@dataclass(frozen=True, slots=True, kw_only=True)
class TypeToTypeMapping:
    """Maps a model type to a view model type, or a view model type to a view type.

    ``implicit_variants`` are inferred from where ``target`` lives and rank below
    the explicitly declared ``variants``.
    """

    source: type | None
    target: type | None
    variants: VariantSet = field(default=VariantSet.EMPTY)
    implicit_variants: VariantSet = field(default=VariantSet.EMPTY)

    @property
    def is_valid(self) -> bool:
        return (
            isinstance(self.source, type)
            and isinstance(self.target, type)
            and not inspect.isabstract(self.target)
        )

    def __str__(self) -> str:
        text = f"{_type_name(self.source)} -> {_type_name(self.target)}"
        if self.variants:
            text += f" (Variants: {self.variants})"
        if self.implicit_variants:
            text += f" (Implicit: {self.implicit_variants})"
        return text


@dataclass(frozen=True, slots=True, kw_only=True)
class ViewToPrefabMapping:
    """Maps a view type to the URI of the prefab it is instantiated from."""

    source: type | None
    target: str | None
    variants: VariantSet = field(default=VariantSet.EMPTY)

    @property
    def implicit_variants(self) -> VariantSet:
        return VariantSet.EMPTY

    @property
    def is_valid(self) -> bool:
        return isinstance(self.source, type) and isinstance(self.target, str) and bool(self.target.strip())

    def __str__(self) -> str:
        text = f"{_type_name(self.source)} -> {self.target}"
        if self.variants:
            text += f" (Variants: {self.variants})"
        return text


type Mapping = TypeToTypeMapping | ViewToPrefabMapping
