"""Capability base classes recognised by the resolver.

Anything that is neither a view nor a view model is treated as a model.
"""

from __future__ import annotations


class ViewModel:
    """Presentation state bound to a view."""


class View:
    """Renderable counterpart of a view model, instantiated from a prefab."""

    view_model: ViewModel | None = None


def is_view_type(value: type) -> bool:
    return issubclass(value, View)


def is_view_model_type(value: type) -> bool:
    return issubclass(value, ViewModel)
