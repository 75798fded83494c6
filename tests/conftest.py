from __future__ import annotations

import pytest

from showzup.domain import Manifest, ManifestBuilder, VariantProvider, ViewResolver
from tests.support.showzup_types import (
    Animal,
    AnimalView,
    AnimalVM,
    Form,
    Size,
    Theme,
)


@pytest.fixture
def variant_provider() -> VariantProvider:
    return VariantProvider.from_types(Form, Size, Theme)


@pytest.fixture
def manifest_builder() -> ManifestBuilder:
    return ManifestBuilder(variant_groups=(Form, Size, Theme))


@pytest.fixture
def animal_manifest() -> Manifest:
    return (
        ManifestBuilder()
        .map_model(Animal, AnimalVM)
        .map_view_model(AnimalVM, AnimalView)
        .map_prefab(AnimalView, "prefabs/animal")
        .build()
    )


@pytest.fixture
def animal_resolver(animal_manifest: Manifest, variant_provider: VariantProvider) -> ViewResolver:
    return ViewResolver(animal_manifest, variant_provider)
