"""Candidate scoring for view resolution.

Two independent measures are combined:

- the *type score* rewards mappings declared for a type close to the subject in
  its inheritance graph;
- the *variant score* rewards mappings whose declared (or implied) variants
  match the requested ones, and rejects mappings contradicting them.

Scores are ordered type first, then variant, so a more specific mapping always
beats a more generic one, whatever their variants.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from showzup.domain.variants import VariantSet


class Score(NamedTuple):
    type_score: float
    variant_score: float

    @property
    def combined(self) -> float:
        return self.type_score * self.variant_score


def inheritance_distance(subject_type: type, candidate_type: type) -> int | None:
    """Shortest number of ``__bases__`` hops from ``subject_type`` to ``candidate_type``.

    ``None`` when ``subject_type`` is not a subclass. A virtual subclass (ABC
    registration, runtime protocol) is one hop away from the nearest nominal
    ancestor that satisfies ``issubclass`` without any of its own bases doing so.
    ``object`` sits behind every other ancestor.
    """

    try:
        if not issubclass(subject_type, candidate_type):
            return None
    except TypeError:
        return None

    if candidate_type is object and subject_type is not object:
        return len(subject_type.__mro__)

    best: int | None = None
    queue: deque[tuple[type, int]] = deque([(subject_type, 0)])
    seen: set[type] = {subject_type}
    while queue:
        current, distance = queue.popleft()
        if best is not None and distance >= best:
            break
        if current is candidate_type:
            return distance

        bases = [base for base in current.__bases__ if issubclass(base, candidate_type)]
        if not bases:
            best = distance + 1
            continue
        for base in bases:
            if base not in seen:
                seen.add(base)
                queue.append((base, distance + 1))

    return best


class ScoreEvaluator:
    """Pure scoring functions; ``None`` means the candidate is rejected."""

    def get_type_score(self, candidate_source: type, subject_type: type) -> float | None:
        distance = inheritance_distance(subject_type, candidate_source)
        if distance is None:
            return None
        return 1.0 / (1 + distance)

    def get_variant_score(
        self,
        requested: VariantSet,
        declared: VariantSet,
        implicit: VariantSet,
    ) -> float | None:
        """Score how well a candidate's variants satisfy the requested ones.

        With ``r`` requested groups, ``m`` of them matched (``e`` explicitly) and
        ``u`` candidate groups nobody asked for, the score is
        ``((r + 1) * m + e + 1 / (1 + u)) / (r + 1) ** 2``. Each extra match
        outweighs any number of explicit matches, which in turn outweigh any
        number of unrequested groups.
        """

        matches = 0
        explicit_matches = 0
        for variant in requested:
            declared_variant = declared.get(variant.group)
            if declared_variant is not None:
                if declared_variant is not variant:
                    return None
                matches += 1
                explicit_matches += 1
                continue

            implicit_variant = implicit.get(variant.group)
            if implicit_variant is not None:
                if implicit_variant is not variant:
                    return None
                matches += 1

        requested_groups = set(requested.groups())
        unrequested = len(
            {group for group in (*declared.groups(), *implicit.groups()) if group not in requested_groups}
        )

        scale = len(requested_groups) + 1
        return (scale * matches + explicit_matches + 1.0 / (1 + unrequested)) / scale**2

    def get_score(
        self,
        candidate_source: type,
        variants: VariantSet,
        implicit_variants: VariantSet,
        subject_type: type,
        requested: VariantSet,
    ) -> Score | None:
        type_score = self.get_type_score(candidate_source, subject_type)
        if type_score is None:
            return None

        variant_score = self.get_variant_score(requested, variants, implicit_variants)
        if variant_score is None:
            return None

        return Score(type_score, variant_score)
