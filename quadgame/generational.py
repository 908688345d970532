"""Slot storage addressed by generational ids."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

__all__ = ["GenerationalId", "GenerationalStorage"]

T = TypeVar("T")


@dataclass(frozen=True)
class GenerationalId:
    """Slot index plus the generation of the value placed there."""

    id: int
    generation: int


@dataclass
class _Cell(Generic[T]):
    generation: int
    state: T


class GenerationalStorage(Generic[T]):
    """Stores values in reusable slots; stale ids never reach newer values."""

    def __init__(self) -> None:
        self._cells: list[Optional[_Cell[T]]] = []
        self._free: list[tuple[int, int]] = []

    def push(self, data: T) -> GenerationalId:
        """Store ``data``, reusing a freed slot if there is one."""
        if self._free:
            index, old_generation = self._free.pop()
            if self._cells[index] is not None:
                raise RuntimeError(f"free slot {index} is occupied")
            generation = old_generation + 1
            self._cells[index] = _Cell(generation, data)
        else:
            index = len(self._cells)
            generation = 0
            self._cells.append(_Cell(generation, data))
        return GenerationalId(index, generation)

    def _cell(self, id: GenerationalId) -> Optional[_Cell[T]]:
        if not 0 <= id.id < len(self._cells):
            return None
        cell = self._cells[id.id]
        if cell is None or cell.generation != id.generation:
            return None
        return cell

    def get(self, id: GenerationalId) -> Optional[T]:
        """Value stored under ``id``, or ``None`` if it is gone or stale."""
        cell = self._cell(id)
        return None if cell is None else cell.state

    def replace(self, id: GenerationalId, data: T) -> bool:
        """Replace the value under ``id``; return whether it was still alive."""
        cell = self._cell(id)
        if cell is None:
            return False
        cell.state = data
        return True

    def retain(self, predicate: Callable[[T], bool]) -> None:
        """Free every value for which ``predicate`` returns false, in slot order."""
        for index, cell in enumerate(self._cells):
            if cell is None:
                continue
            if not predicate(cell.state):
                self._free.append((index, cell.generation))
                self._cells[index] = None

    def count(self) -> int:
        """Number of live values."""
        return sum(1 for cell in self._cells if cell is not None)

    def clear(self) -> None:
        """Drop every value and slot."""
        self._cells.clear()
        self._free.clear()

    def free(self, id: GenerationalId) -> None:
        """Free the value under ``id``; stale or unknown ids are ignored."""
        if self._cell(id) is None:
            return
        self._free.append((id.id, id.generation))
        self._cells[id.id] = None