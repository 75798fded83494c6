"""Public interface for the manifest file adapter."""

from __future__ import annotations

from .loader import dump_manifest, load_manifest
from .schema import ManifestPayload, ManifestPayloadInput, PrefabMappingRow, TypeMappingRow
from .translator import manifest_from_payload, payload_from_manifest, qualified_name, resolve_type

__all__ = [
    "ManifestPayload",
    "ManifestPayloadInput",
    "PrefabMappingRow",
    "TypeMappingRow",
    "dump_manifest",
    "load_manifest",
    "manifest_from_payload",
    "payload_from_manifest",
    "qualified_name",
    "resolve_type",
]
