"""Translate serialized manifest payloads to and from domain manifests."""

from __future__ import annotations

import pkgutil
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from showzup.domain.errors import ConflictingVariantsError, InvalidManifestError, UnknownVariantError
from showzup.domain.manifest import Manifest
from showzup.domain.mappings import TypeToTypeMapping, ViewToPrefabMapping

from .schema import ManifestPayload, ManifestPayloadInput, PrefabMappingRow, TypeMappingRow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from showzup.domain.variant_provider import VariantProvider
    from showzup.domain.variants import VariantSet


log = getLogger(__name__)


def _ensure_manifest_payload(payload: ManifestPayloadInput) -> ManifestPayload:
    if isinstance(payload, ManifestPayload):
        return payload
    try:
        return ManifestPayload.model_validate(payload)
    except ValidationError as exc:
        raise InvalidManifestError(f"Malformed manifest: {exc}") from exc


def resolve_type(name: str) -> type:
    """Import the type named ``name``; raise ``InvalidManifestError`` if impossible."""

    try:
        resolved = pkgutil.resolve_name(name)
    except (ImportError, AttributeError, ValueError) as exc:
        raise InvalidManifestError(f"Cannot resolve type {name!r}, try rebuilding manifest.") from exc
    if not isinstance(resolved, type):
        raise InvalidManifestError(f"{name!r} does not name a type")
    return resolved


def qualified_name(value: type) -> str:
    return f"{value.__module__}:{value.__qualname__}"


def _parse_variants(identifiers: Iterable[str], variant_provider: VariantProvider) -> VariantSet:
    try:
        return variant_provider.parse_variants(identifiers)
    except (UnknownVariantError, ConflictingVariantsError) as exc:
        raise InvalidManifestError(f"Invalid manifest variants: {exc}") from exc


def _type_mapping(row: TypeMappingRow, variant_provider: VariantProvider) -> TypeToTypeMapping:
    return TypeToTypeMapping(
        source=resolve_type(row.source),
        target=resolve_type(row.target),
        variants=_parse_variants(row.variants, variant_provider),
        implicit_variants=_parse_variants(row.implicit_variants, variant_provider),
    )


def _prefab_mapping(row: PrefabMappingRow, variant_provider: VariantProvider) -> ViewToPrefabMapping:
    return ViewToPrefabMapping(
        source=resolve_type(row.source),
        target=row.target,
        variants=_parse_variants(row.variants, variant_provider),
    )


def manifest_from_payload(
    payload: ManifestPayloadInput,
    variant_provider: VariantProvider,
) -> Manifest:
    """Build a validated :class:`Manifest` from its serialized form."""

    parsed = _ensure_manifest_payload(payload)
    manifest = Manifest(
        tuple(_type_mapping(row, variant_provider) for row in parsed.models_to_view_models),
        tuple(_type_mapping(row, variant_provider) for row in parsed.view_models_to_views),
        tuple(_prefab_mapping(row, variant_provider) for row in parsed.views_to_prefabs),
    )
    log.debug("Translated manifest payload into %s", manifest)
    return manifest


def _type_row(mapping: TypeToTypeMapping) -> TypeMappingRow:
    if mapping.source is None or mapping.target is None:
        raise InvalidManifestError(f"Cannot serialize incomplete mapping {mapping}")
    return TypeMappingRow(
        source=qualified_name(mapping.source),
        target=qualified_name(mapping.target),
        variants=[variant.identifier for variant in mapping.variants],
        implicit_variants=[variant.identifier for variant in mapping.implicit_variants],
    )


def _prefab_row(mapping: ViewToPrefabMapping) -> PrefabMappingRow:
    if mapping.source is None or mapping.target is None:
        raise InvalidManifestError(f"Cannot serialize incomplete mapping {mapping}")
    return PrefabMappingRow(
        source=qualified_name(mapping.source),
        target=mapping.target,
        variants=[variant.identifier for variant in mapping.variants],
    )


def payload_from_manifest(manifest: Manifest) -> ManifestPayload:
    return ManifestPayload(
        models_to_view_models=[_type_row(mapping) for mapping in manifest.models_to_view_models or ()],
        view_models_to_views=[_type_row(mapping) for mapping in manifest.view_models_to_views or ()],
        views_to_prefabs=[_prefab_row(mapping) for mapping in manifest.views_to_prefabs or ()],
    )
