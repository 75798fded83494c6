"""Resolve models, view models, views and types into a :class:`ViewInfo`.

Resolution runs up to three phases against the manifest:

1) Model -> ViewModel (skipped for view model and view inputs)
2) ViewModel -> View (skipped for view inputs)
3) View -> Prefab

Each phase scores every candidate mapping and keeps the best one; among equal
scores the first mapping in manifest order wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from showzup.domain.capabilities import View, ViewModel, is_view_model_type, is_view_type
from showzup.domain.errors import (
    ConflictingVariantsError,
    InvalidManifestError,
    UnresolvedMappingError,
    UnsupportedInputError,
)
from showzup.domain.scoring import ScoreEvaluator
from showzup.domain.variants import VariantSet
from showzup.domain.view_info import ViewInfo, variants_or_default

if TYPE_CHECKING:
    from collections.abc import Sequence

    from showzup.domain.manifest import Manifest
    from showzup.domain.mappings import TypeToTypeMapping, ViewToPrefabMapping
    from showzup.domain.scoring import Score
    from showzup.domain.variant_provider import VariantProvider
    from showzup.domain.view_info import Options

log = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class _Candidate[M]:
    mapping: M
    score: Score | float


class ViewResolver:
    """Stateless per call; holds read-only references to its collaborators."""

    def __init__(
        self,
        manifest: Manifest | None,
        variant_provider: VariantProvider,
        score_evaluator: ScoreEvaluator | None = None,
    ) -> None:
        if manifest is None:
            raise InvalidManifestError("Manifest is None")
        manifest.validate()

        self._manifest = manifest
        self._variant_provider = variant_provider
        self._score_evaluator = score_evaluator or ScoreEvaluator()

    @property
    def manifest(self) -> Manifest:
        return self._manifest

    def resolve(self, value: object, options: Options | None = None) -> ViewInfo:
        log.debug("Resolving input: %r", value)

        if value is None:
            log.debug("Resolved None input to null view")
            return ViewInfo.NULL

        requested = self._requested_variants(options)

        if isinstance(value, type):
            view_info = self._resolve_from_type(value, requested)
        elif isinstance(value, View):
            view_info = self._resolve_from_view(value, requested)
        elif isinstance(value, ViewModel):
            view_info = self._resolve_from_view_model(value, requested)
        else:
            view_info = self._resolve_from_model(value, requested)

        if options is not None and options.parameters is not None:
            view_info = replace(view_info, parameters=options.parameters)
        return view_info

    def _requested_variants(self, options: Options | None) -> VariantSet:
        requested = variants_or_default(options).union(self._variant_provider.global_variants.value)
        if not requested.is_well_formed:
            raise ConflictingVariantsError(
                f"Cannot request more than one variant per group: {requested}"
            )
        return requested

    def _resolve_from_type(self, value: type, requested: VariantSet) -> ViewInfo:
        log.debug("Resolving type: %s", value)

        if is_view_type(value):
            return self._resolve_from_view_type(value, requested)

        if is_view_model_type(value):
            return self._resolve_from_view_model_type(value, requested)

        raise UnsupportedInputError(
            f"Only view or view model types can be passed as type input, got {value!r}"
        )

    def _resolve_from_model(self, model: object, requested: VariantSet) -> ViewInfo:
        log.debug("Resolving model: %r", model)

        model_type = type(model)
        view_model_type = self._resolve_view_model_from_model(model_type, requested).target
        view_type = self._resolve_view_from_view_model(view_model_type, requested).target
        prefab_uri = self._resolve_prefab_from_view_type(view_type, requested)

        return ViewInfo(
            model=model,
            model_type=model_type,
            view_model_type=view_model_type,
            view_type=view_type,
            prefab_uri=prefab_uri,
        )

    def _resolve_from_view_model(self, view_model: ViewModel, requested: VariantSet) -> ViewInfo:
        # A view model may itself be mapped as a model to another view model.
        try:
            return self._resolve_from_model(view_model, requested)
        except UnresolvedMappingError:
            log.debug("No model mapping for %r, resolving it as view model", view_model)

        return replace(
            self._resolve_from_view_model_type(type(view_model), requested),
            view_model=view_model,
        )

    def _resolve_from_view(self, view: View, requested: VariantSet) -> ViewInfo:
        log.debug("Resolving view: %r", view)
        return replace(self._resolve_from_view_type(type(view), requested), view=view)

    def _resolve_from_view_model_type(self, view_model_type: type, requested: VariantSet) -> ViewInfo:
        log.debug("Resolving view model type: %s", view_model_type)

        view_type = self._resolve_view_from_view_model(view_model_type, requested).target
        prefab_uri = self._resolve_prefab_from_view_type(view_type, requested)

        return ViewInfo(
            view_model_type=view_model_type,
            view_type=view_type,
            prefab_uri=prefab_uri,
        )

    def _resolve_from_view_type(self, view_type: type, requested: VariantSet) -> ViewInfo:
        log.debug("Resolving view type: %s", view_type)

        prefab_uri = self._resolve_prefab_from_view_type(view_type, requested)
        return ViewInfo(view_type=view_type, prefab_uri=prefab_uri)

    def _resolve_view_model_from_model(self, model_type: type, requested: VariantSet) -> TypeToTypeMapping:
        return self._resolve_type_mapping(
            model_type,
            "Model",
            "ViewModel",
            self._manifest.models_to_view_models,
            requested,
        )

    def _resolve_view_from_view_model(
        self, view_model_type: type, requested: VariantSet
    ) -> TypeToTypeMapping:
        return self._resolve_type_mapping(
            view_model_type,
            "ViewModel",
            "View",
            self._manifest.view_models_to_views,
            requested,
        )

    def _resolve_type_mapping(
        self,
        subject_type: type,
        source_kind: str,
        target_kind: str,
        mappings: Sequence[TypeToTypeMapping],
        requested: VariantSet,
    ) -> TypeToTypeMapping:
        candidates: list[_Candidate[TypeToTypeMapping]] = []
        for mapping in mappings:
            score = self._score_evaluator.get_score(
                mapping.source,
                mapping.variants,
                mapping.implicit_variants,
                subject_type,
                requested,
            )
            if score is not None:
                candidates.append(_Candidate(mapping, score))

        best = _first_max(candidates)
        if best is None:
            raise UnresolvedMappingError(
                f"Failed to resolve {source_kind} {subject_type} to some {target_kind} "
                f"(Variants: {requested})"
            )

        _log_resolution(
            f"{source_kind} {subject_type}",
            f"{target_kind} {best.mapping.target}",
            best,
            candidates,
        )
        return best.mapping

    def _resolve_prefab_from_view_type(self, view_type: type, requested: VariantSet) -> str:
        candidates: list[_Candidate[ViewToPrefabMapping]] = []
        for mapping in self._manifest.views_to_prefabs:
            if mapping.source is not view_type:
                continue
            score = self._score_evaluator.get_variant_score(requested, mapping.variants, VariantSet.EMPTY)
            if score is not None:
                candidates.append(_Candidate(mapping, score))

        best = _first_max(candidates)
        if best is None:
            raise UnresolvedMappingError(
                f"Failed to resolve View {view_type} to some Prefab (Variants: {requested})"
            )

        _log_resolution(f"View {view_type}", f"Prefab {best.mapping.target}", best, candidates)
        return best.mapping.target


def _first_max[M](candidates: Sequence[_Candidate[M]]) -> _Candidate[M] | None:
    best: _Candidate[M] | None = None
    for candidate in candidates:
        if best is None or candidate.score > best.score:
            best = candidate
    return best


def _log_resolution[M](
    subject: str,
    resolved: str,
    best: _Candidate[M],
    candidates: Sequence[_Candidate[M]],
) -> None:
    if not log.isEnabledFor(logging.DEBUG):
        return

    log.debug("Resolved %s to %s (Score: %s)", subject, resolved, best.score)
    others = [candidate for candidate in candidates if candidate is not best]
    if others:
        log.debug(
            "Other candidates were:\n%s",
            "\n".join(f"{candidate.mapping} (Score: {candidate.score})" for candidate in others),
        )
