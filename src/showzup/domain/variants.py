"""Variants, variant groups and variant sets.

A variant group is a closed family of mutually exclusive flavors, declared as an
``Enum`` deriving from :class:`Variant`::

    class Form(Variant):
        PAGE = auto()
        POPUP = auto()

Members of different groups never compare equal, so a variant is identified by
its group and its member name.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, TypeGuard

from showzup.domain.errors import ConflictingVariantsError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Variant(Enum):
    """Base class of every variant group."""

    @property
    def group(self) -> VariantGroup:
        return type(self)

    @property
    def identifier(self) -> str:
        return f"{type(self).__name__}.{self.name}"

    @property
    def ordinal(self) -> int:
        return list(type(self)).index(self)

    def __str__(self) -> str:
        return self.identifier


type VariantGroup = type[Variant]


def is_variant_group(value: object) -> TypeGuard[VariantGroup]:
    """Return whether ``value`` is a variant group declaring at least one variant."""

    return (
        isinstance(value, type)
        and issubclass(value, Variant)
        and value is not Variant
        and len(value) > 0
    )


@dataclass(frozen=True, slots=True, eq=False)
class VariantSet:
    """Immutable, unordered collection of variants.

    The raw constructor accepts two variants of one group (``union`` relies on
    it); use :meth:`of` to build a set that must hold at most one variant per
    group.
    """

    _variants: tuple[Variant, ...] = ()

    EMPTY: ClassVar[VariantSet]

    def __post_init__(self) -> None:
        variants = tuple(self._variants)
        for variant in variants:
            if not isinstance(variant, Variant):
                raise TypeError(f"Expected a Variant, got {variant!r}")
        object.__setattr__(self, "_variants", tuple(dict.fromkeys(variants)))

    @classmethod
    def of(cls, *variants: Variant) -> VariantSet:
        result = cls(variants)
        if not result.is_well_formed:
            raise ConflictingVariantsError(
                f"Cannot declare more than one variant per group: {result}"
            )
        return result

    @classmethod
    def from_iterable(cls, variants: Iterable[Variant]) -> VariantSet:
        return cls.of(*variants)

    def union(self, other: VariantSet) -> VariantSet:
        """Element-wise union; the result may hold two variants of one group."""

        return VariantSet((*self._variants, *other._variants))

    def overridden_by(self, other: VariantSet) -> VariantSet:
        """Union in which ``other`` wins for every group it mentions."""

        overridden = set(other.groups())
        kept = tuple(variant for variant in self._variants if variant.group not in overridden)
        return VariantSet((*kept, *other._variants))

    def without_group(self, group: VariantGroup) -> VariantSet:
        return VariantSet(tuple(variant for variant in self._variants if variant.group is not group))

    def groups(self) -> tuple[VariantGroup, ...]:
        return tuple(dict.fromkeys(variant.group for variant in self._variants))

    def distinct_by_group_count(self) -> int:
        return len(self.groups())

    @property
    def is_well_formed(self) -> bool:
        return self.distinct_by_group_count() == len(self._variants)

    def get(self, group: VariantGroup) -> Variant | None:
        for variant in self._variants:
            if variant.group is group:
                return variant
        return None

    def __contains__(self, item: object) -> bool:
        return item in self._variants

    def __iter__(self) -> Iterator[Variant]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariantSet):
            return NotImplemented
        return frozenset(self._variants) == frozenset(other._variants)

    def __hash__(self) -> int:
        return hash(frozenset(self._variants))

    def __str__(self) -> str:
        return "{" + ", ".join(variant.identifier for variant in self._variants) + "}"

    def __repr__(self) -> str:
        return f"VariantSet({self})"


VariantSet.EMPTY = VariantSet()
