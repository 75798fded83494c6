"""Resolver input options and output record."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from showzup.domain.variants import VariantSet

if TYPE_CHECKING:
    from showzup.domain.capabilities import View, ViewModel


@dataclass(frozen=True, slots=True, kw_only=True)
class Options:
    variants: VariantSet = field(default=VariantSet.EMPTY)
    parameters: Mapping[str, object] | None = None


def variants_or_default(options: Options | None) -> VariantSet:
    return options.variants if options is not None else VariantSet.EMPTY


@dataclass(frozen=True, slots=True, kw_only=True)
class ViewInfo:
    """Resolved model, view model, view and prefab quadruple.

    Instances passed to the resolver are echoed back in ``model``,
    ``view_model`` or ``view``; the ``*_type`` fields always hold types.
    """

    model: object | None = None
    view_model: ViewModel | None = None
    view: View | None = None
    model_type: type | None = None
    view_model_type: type | None = None
    view_type: type | None = None
    prefab_uri: str | None = None
    parameters: Mapping[str, object] | None = None

    NULL: ClassVar[ViewInfo]

    @property
    def is_null(self) -> bool:
        return self == ViewInfo.NULL


ViewInfo.NULL = ViewInfo()
