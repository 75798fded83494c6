"""Error taxonomy raised by the view resolution core."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from showzup.domain.mappings import Mapping


class ShowzupError(Exception):
    """Base class for every error raised by ``showzup``."""


class InvalidManifestError(ShowzupError, ValueError):
    """Raised when a manifest is missing, has missing tables or missing entries."""


class InvalidMappingError(ShowzupError, ValueError):
    """Raised when a manifest entry is not a valid mapping."""

    def __init__(self, mapping: Mapping, message: str) -> None:
        super().__init__(f"{message} (mapping: {mapping})")
        self.mapping = mapping


class UnsupportedInputError(ShowzupError, TypeError):
    """Raised when a type input is neither a view nor a view model type."""


class ResolutionError(ShowzupError, RuntimeError):
    """Raised when a resolution request cannot be honoured."""


class UnresolvedMappingError(ResolutionError):
    """Raised when no manifest candidate survives scoring."""


class ConflictingVariantsError(ResolutionError, ValueError):
    """Raised when a variant set holds more than one variant of the same group."""


class InvalidVariantGroupError(ShowzupError, ValueError):
    """Raised when a type registered as variant group is not one."""


class UnknownVariantError(ShowzupError, ValueError):
    """Raised when a variant identifier does not name a known variant."""
