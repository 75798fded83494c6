from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from showzup.adapters.manifest_file import dump_manifest, load_manifest
from showzup.domain import InvalidManifestError, ManifestBuilder, VariantProvider
from tests.support.showzup_types import AnimalView, AnimalVM, DogVM, Form, Size
from tests.support.views.popup import DogImplicitPopupView

if TYPE_CHECKING:
    from pathlib import Path


def test_dump_then_load_preserves_manifest(
    tmp_path: Path,
    manifest_builder: ManifestBuilder,
    variant_provider: VariantProvider,
) -> None:
    manifest = (
        manifest_builder.map_view_model(AnimalVM, AnimalView, variants=[Size.LARGE])
        .map_view_model(DogVM, DogImplicitPopupView)
        .map_prefab(AnimalView, "prefabs/animal")
        .build()
    )
    path = tmp_path / "manifest.json"

    dump_manifest(manifest, path)
    loaded = load_manifest(path, variant_provider)

    assert loaded == manifest
    assert loaded.view_models_to_views is not None
    assert Form.POPUP in loaded.view_models_to_views[1].implicit_variants
    assert json.loads(path.read_text())["views_to_prefabs"][0]["target"] == "prefabs/animal"


def test_load_manifest_rejects_invalid_json(tmp_path: Path, variant_provider: VariantProvider) -> None:
    path = tmp_path / "manifest.json"
    path.write_text("{not json")

    with pytest.raises(InvalidManifestError, match="Malformed manifest file"):
        load_manifest(path, variant_provider)


def test_load_manifest_propagates_missing_file(tmp_path: Path, variant_provider: VariantProvider) -> None:
    with pytest.raises(FileNotFoundError):
        load_manifest(tmp_path / "missing.json", variant_provider)
