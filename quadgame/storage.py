"""Global storage holding one value per type."""

from __future__ import annotations

from typing import Any, Optional, TypeVar

__all__ = ["store", "get", "try_get", "clear"]

T = TypeVar("T")

_STORAGE: dict[type, Any] = {}


def store(data: Any) -> None:
    """Store ``data`` under its type, replacing any earlier value of that type."""
    _STORAGE[type(data)] = data


def try_get(cls: type[T]) -> Optional[T]:
    """Value stored for ``cls``, or ``None`` if there is none."""
    return _STORAGE.get(cls)


def get(cls: type[T]) -> T:
    """Value stored for ``cls``; raises ``KeyError`` if there is none."""
    try:
        return _STORAGE[cls]
    except KeyError:
        raise KeyError(f"no value of type {cls.__name__} in storage") from None


def clear() -> None:
    """Remove every stored value."""
    _STORAGE.clear()