"""Immutable manifest of model, view model, view and prefab mappings."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from showzup.domain.errors import InvalidManifestError, InvalidMappingError
from showzup.domain.mappings import TypeToTypeMapping, ViewToPrefabMapping
from showzup.domain.variants import VariantSet

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from showzup.domain.variants import Variant, VariantGroup

log = logging.getLogger(__name__)

REBUILD_HINT = "try rebuilding manifest."


@dataclass(frozen=True, slots=True)
class Manifest:
    """Three ordered lookup tables consumed by the resolver.

    Table order matters: among equally scored candidates the first one wins.
    """

    models_to_view_models: tuple[TypeToTypeMapping, ...] | None = ()
    view_models_to_views: tuple[TypeToTypeMapping, ...] | None = ()
    views_to_prefabs: tuple[ViewToPrefabMapping, ...] | None = ()

    def __post_init__(self) -> None:
        for name in ("models_to_view_models", "view_models_to_views", "views_to_prefabs"):
            table = getattr(self, name)
            if table is not None and not isinstance(table, tuple):
                object.__setattr__(self, name, tuple(table))
        self.validate()

    def validate(self) -> None:
        """Fail fast on missing tables, missing entries or invalid mappings."""

        tables = (self.models_to_view_models, self.view_models_to_views, self.views_to_prefabs)
        if any(table is None for table in tables):
            raise InvalidManifestError("Some manifest table is None")

        if any(entry is None for table in tables for entry in table or ()):
            raise InvalidManifestError("Some manifest table contains None entries")

        _raise_on_invalid(self.models_to_view_models, "Invalid Model to ViewModel mapping")
        _raise_on_invalid(self.view_models_to_views, "Invalid ViewModel to View mapping")
        _raise_on_invalid(self.views_to_prefabs, "Invalid View to Prefab mapping")

    def __str__(self) -> str:
        return (
            f"Manifest(models_to_view_models={len(self.models_to_view_models or ())}, "
            f"view_models_to_views={len(self.view_models_to_views or ())}, "
            f"views_to_prefabs={len(self.views_to_prefabs or ())})"
        )


def _raise_on_invalid(
    table: Sequence[TypeToTypeMapping] | Sequence[ViewToPrefabMapping] | None,
    message: str,
) -> None:
    for mapping in table or ():
        if not mapping.is_valid:
            raise InvalidMappingError(mapping, f"{message}, {REBUILD_HINT}")


def infer_implicit_variants(
    target: type,
    groups: Iterable[VariantGroup],
    *,
    declared: VariantSet = VariantSet.EMPTY,
) -> VariantSet:
    """Infer variants from the module path of ``target``.

    A module segment named like a variant member (case-insensitive) implies that
    variant, e.g. ``app.views.popup.dog`` implies ``Form.POPUP``. Groups already
    present in ``declared`` are skipped.
    """

    segments = {segment.lower() for segment in target.__module__.split(".")}
    inferred: list[Variant] = []
    for group in groups:
        if declared.get(group) is not None:
            continue
        match = next((variant for variant in group if variant.name.lower() in segments), None)
        if match is not None:
            inferred.append(match)
    return VariantSet.of(*inferred)


@dataclass(slots=True)
class ManifestBuilder:
    """Assemble a :class:`Manifest` mapping by mapping, in declaration order.

    When ``variant_groups`` are given, implicit variants are inferred for every
    type-to-type mapping from the target's module path.
    """

    variant_groups: tuple[VariantGroup, ...] = ()
    _models_to_view_models: list[TypeToTypeMapping] = field(
        default_factory=list["TypeToTypeMapping"], repr=False
    )
    _view_models_to_views: list[TypeToTypeMapping] = field(
        default_factory=list["TypeToTypeMapping"], repr=False
    )
    _views_to_prefabs: list[ViewToPrefabMapping] = field(
        default_factory=list["ViewToPrefabMapping"], repr=False
    )

    def map_model(
        self,
        model: type,
        view_model: type,
        *,
        variants: Iterable[Variant] = (),
    ) -> ManifestBuilder:
        self._models_to_view_models.append(self._type_mapping(model, view_model, variants))
        return self

    def map_view_model(
        self,
        view_model: type,
        view: type,
        *,
        variants: Iterable[Variant] = (),
    ) -> ManifestBuilder:
        self._view_models_to_views.append(self._type_mapping(view_model, view, variants))
        return self

    def map_prefab(
        self,
        view: type,
        uri: str,
        *,
        variants: Iterable[Variant] = (),
    ) -> ManifestBuilder:
        self._views_to_prefabs.append(
            ViewToPrefabMapping(source=view, target=uri, variants=VariantSet.of(*variants))
        )
        return self

    def build(self) -> Manifest:
        manifest = Manifest(
            tuple(self._models_to_view_models),
            tuple(self._view_models_to_views),
            tuple(self._views_to_prefabs),
        )
        log.debug("Built %s", manifest)
        return manifest

    def _type_mapping(
        self,
        source: type,
        target: type,
        variants: Iterable[Variant],
    ) -> TypeToTypeMapping:
        declared = VariantSet.of(*variants)
        implicit = (
            infer_implicit_variants(target, self.variant_groups, declared=declared)
            if self.variant_groups
            else VariantSet.EMPTY
        )
        return TypeToTypeMapping(
            source=source,
            target=target,
            variants=declared,
            implicit_variants=implicit,
        )
