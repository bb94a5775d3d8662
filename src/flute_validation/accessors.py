"""
Property accessors.

The validator never inspects target objects itself; it asks a
:class:`PropertyAccessor` for each bound property. One accessor is chosen
per validator and applied to every property, so a name always resolves the
same way.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .exceptions import PropertyResolutionError

_MISSING = object()


def _public_names(obj: Any) -> list[str]:
    return [name for name in dir(obj) if not name.startswith("_")]


@runtime_checkable
class PropertyAccessor(Protocol):
    """
    Protocol for resolving a property name on a target object.

    Implementations raise :class:`PropertyResolutionError` when the name
    cannot be resolved; they must not fall back to ``None``.
    """

    def __call__(self, obj: Any, name: str) -> Any:
        ...


class AttributeAccessor:
    """Reads a same-named attribute (``obj.name``). The default strategy."""

    def __call__(self, obj: Any, name: str) -> Any:
        value = getattr(obj, name, _MISSING)
        if value is _MISSING:
            raise PropertyResolutionError(name, type(obj).__name__, _public_names(obj))
        return value


class GetterAccessor:
    """Invokes a same-named zero-argument method (``obj.name()``)."""

    def __call__(self, obj: Any, name: str) -> Any:
        getter = getattr(obj, name, _MISSING)
        if getter is _MISSING or not callable(getter):
            callables = [
                n for n in _public_names(obj) if callable(getattr(obj, n, None))
            ]
            raise PropertyResolutionError(name, type(obj).__name__, callables)
        return getter()


class MappingAccessor:
    """Looks the name up as a key (``obj["name"]``)."""

    def __call__(self, obj: Any, name: str) -> Any:
        if not isinstance(obj, Mapping):
            raise PropertyResolutionError(name, type(obj).__name__)
        try:
            return obj[name]
        except KeyError as exc:
            raise PropertyResolutionError(
                name, type(obj).__name__, [str(k) for k in obj]
            ) from exc
