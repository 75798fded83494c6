"""View resolution core: variants, manifest, scoring and resolver."""

from __future__ import annotations

from showzup.domain.capabilities import View, ViewModel, is_view_model_type, is_view_type
from showzup.domain.errors import (
    ConflictingVariantsError,
    InvalidManifestError,
    InvalidMappingError,
    InvalidVariantGroupError,
    ResolutionError,
    ShowzupError,
    UnknownVariantError,
    UnresolvedMappingError,
    UnsupportedInputError,
)
from showzup.domain.manifest import Manifest, ManifestBuilder, infer_implicit_variants
from showzup.domain.mappings import TypeToTypeMapping, ViewToPrefabMapping
from showzup.domain.resolver import ViewResolver
from showzup.domain.scoring import Score, ScoreEvaluator, inheritance_distance
from showzup.domain.variant_provider import ObservableValue, VariantProvider
from showzup.domain.variants import Variant, VariantGroup, VariantSet, is_variant_group
from showzup.domain.view_info import Options, ViewInfo

__all__ = [
    "ConflictingVariantsError",
    "InvalidManifestError",
    "InvalidMappingError",
    "InvalidVariantGroupError",
    "Manifest",
    "ManifestBuilder",
    "ObservableValue",
    "Options",
    "ResolutionError",
    "Score",
    "ScoreEvaluator",
    "ShowzupError",
    "TypeToTypeMapping",
    "UnknownVariantError",
    "UnresolvedMappingError",
    "UnsupportedInputError",
    "Variant",
    "VariantGroup",
    "VariantProvider",
    "VariantSet",
    "View",
    "ViewInfo",
    "ViewModel",
    "ViewResolver",
    "ViewToPrefabMapping",
    "infer_implicit_variants",
    "inheritance_distance",
    "is_variant_group",
    "is_view_model_type",
    "is_view_type",
]
