"""Process-wide registry of variant groups and globally requested variants."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from showzup.domain.errors import InvalidVariantGroupError, UnknownVariantError
from showzup.domain.variants import VariantSet, is_variant_group

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from showzup.domain.variants import Variant, VariantGroup

log = logging.getLogger(__name__)


class ObservableValue[T]:
    """Single-writer value cell notifying subscribers when it changes.

    Readers only ever see a whole value: ``set`` swaps one reference.
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        # Snapshot so callbacks may unsubscribe while being notified.
        for callback in list(self._subscribers):
            callback(value)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register ``callback`` and return a function removing it again."""

        self._subscribers.append(callback)

        def unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                log.debug("Subscriber %r already removed", callback)

        return unsubscribe


class VariantProvider:
    """Known variant groups plus the variants requested for every resolution."""

    def __init__(self, *groups: VariantGroup) -> None:
        self.all_variant_groups: list[VariantGroup] = list(groups)
        self.global_variants: ObservableValue[VariantSet] = ObservableValue(VariantSet.EMPTY)

    @classmethod
    def from_types(cls, *types: type) -> VariantProvider:
        """Build a provider from arbitrary types, rejecting anything that is not a variant group."""

        groups: list[VariantGroup] = []
        for candidate in types:
            if not is_variant_group(candidate):
                raise InvalidVariantGroupError(
                    f"{candidate!r} is not a variant group: it must derive from Variant and declare members."
                )
            groups.append(candidate)
        return cls(*groups)

    def find_group(self, name: str) -> VariantGroup:
        for group in self.all_variant_groups:
            if group.__name__ == name:
                return group
        raise UnknownVariantError(f"Unknown variant group: {name}")

    def find_variant(self, identifier: str) -> Variant:
        """Return the variant named ``"Group.MEMBER"``."""

        group_name, _, member_name = identifier.strip().rpartition(".")
        if not group_name or not member_name:
            raise UnknownVariantError(f"Variant identifier must look like Group.MEMBER: {identifier!r}")

        group = self.find_group(group_name)
        try:
            return group[member_name]
        except KeyError:
            raise UnknownVariantError(f"Unknown variant {member_name} in group {group_name}") from None

    def parse_variants(self, identifiers: Iterable[str]) -> VariantSet:
        return VariantSet.of(*(self.find_variant(identifier) for identifier in identifiers))

    def set_global_variant(self, variant: Variant) -> None:
        """Request ``variant`` globally, replacing any global variant of its group."""

        self.global_variants.set(self.global_variants.value.overridden_by(VariantSet.of(variant)))
        log.debug("Global variants are now %s", self.global_variants.value)

    def clear_global_variant(self, group: VariantGroup) -> None:
        self.global_variants.set(self.global_variants.value.without_group(group))
        log.debug("Global variants are now %s", self.global_variants.value)
