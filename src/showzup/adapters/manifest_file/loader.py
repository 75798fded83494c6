"""Read and write manifest JSON files."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from showzup.domain.errors import InvalidManifestError

from .schema import ManifestPayload
from .translator import manifest_from_payload, payload_from_manifest

if TYPE_CHECKING:
    from pathlib import Path

    from showzup.domain.manifest import Manifest
    from showzup.domain.variant_provider import VariantProvider


log = getLogger(__name__)


def load_manifest(path: Path, variant_provider: VariantProvider) -> Manifest:
    """Load the manifest stored at ``path``.

    Raises ``FileNotFoundError`` when the file is missing and
    ``InvalidManifestError`` when its content cannot be translated.
    """

    text = path.read_text(encoding="utf-8")
    try:
        payload = ManifestPayload.model_validate_json(text)
    except ValidationError as exc:
        raise InvalidManifestError(f"Malformed manifest file {path}: {exc}") from exc

    manifest = manifest_from_payload(payload, variant_provider)
    log.info("Loaded %s from %s", manifest, path)
    return manifest


def dump_manifest(manifest: Manifest, path: Path) -> None:
    payload = payload_from_manifest(manifest)
    path.write_text(payload.model_dump_json(indent=2) + "\n", encoding="utf-8")
    log.info("Wrote %s to %s", manifest, path)
