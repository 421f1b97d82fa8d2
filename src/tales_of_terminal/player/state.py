from __future__ import annotations

import logging
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]

DEFAULT_INVENTORY: Tuple[str, ...] = ("Basic Sword", "Health Potion")


def grants_shield(item: str) -> bool:
    return "shield" in item.lower()


class VisitedCells:
    """Insertion-only record of visited cells inside a square visitable range.

    Cells outside ``[0, size) x [0, size)`` are silently not recorded.
    """

    def __init__(self, size: int = 30) -> None:
        if size <= 0:
            raise ValueError("visit range must be positive")
        self.size = size
        self._cells: Set[Coord] = set()

    def mark(self, x: int, y: int) -> bool:
        if not (0 <= x < self.size and 0 <= y < self.size):
            return False
        self._cells.add((x, y))
        return True

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def cells(self) -> FrozenSet[Coord]:
        return frozenset(self._cells)

    def ordered(self) -> List[Coord]:
        """Visited cells in column-major order (x first, then y)."""
        return sorted(self._cells)

    def to_record_string(self) -> str:
        return "".join(f"({x}-{y});" for x, y in self.ordered())


class PlayerState:
    """Position, vitality, score, steps, inventory and visit history.

    Vitality is stored raw and may drop below zero when a hit lands; the
    ``vitality`` property reports it with a floor of zero while ``alive`` looks
    at the raw value.
    """

    def __init__(
        self,
        name: str,
        *,
        vitality: int = 100,
        inventory: Optional[Iterable[str]] = None,
        visit_range: int = 30,
        position: Coord = (0, 0),
    ) -> None:
        self.name = name
        self._vitality = int(vitality)
        self._score = 0
        self._steps = 0
        self._x, self._y = position
        self._inventory: List[str] = []
        self._shielded = False
        self._visited = VisitedCells(visit_range)
        self._visited.mark(self._x, self._y)
        for item in DEFAULT_INVENTORY if inventory is None else inventory:
            self.add_item(item)

    @property
    def position(self) -> Coord:
        return (self._x, self._y)

    @property
    def vitality(self) -> int:
        return max(0, self._vitality)

    @property
    def raw_vitality(self) -> int:
        return self._vitality

    @property
    def alive(self) -> bool:
        return self._vitality > 0

    @property
    def score(self) -> int:
        return self._score

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def inventory(self) -> Tuple[str, ...]:
        return tuple(self._inventory)

    @property
    def has_shield(self) -> bool:
        return self._shielded

    def step_to(self, x: int, y: int) -> int:
        """Move to (x, y), count the step and mark the cell visited. Returns the new step count."""
        self._x, self._y = x, y
        self._steps += 1
        self._visited.mark(x, y)
        return self._steps

    def take_damage(self, amount: int) -> int:
        if amount < 0:
            raise ValueError("Damage amount must be non-negative")
        self._vitality -= amount
        logger.debug("%s takes %d damage (vitality %d)", self.name, amount, self._vitality)
        return self._vitality

    def add_score(self, points: int) -> int:
        if points <= 0:
            raise ValueError("Score deltas must be positive")
        self._score += points
        return self._score

    def add_item(self, item: str) -> None:
        self._inventory.append(item)
        if grants_shield(item):
            self._shielded = True

    def has_visited(self, x: int, y: int) -> bool:
        return (x, y) in self._visited

    def visited_cells(self) -> FrozenSet[Coord]:
        return self._visited.cells()

    def visited_string(self) -> str:
        return self._visited.to_record_string()

    def __repr__(self) -> str:
        return (
            f"PlayerState({self.name!r}@{self._x},{self._y} hp={self._vitality} "
            f"score={self._score} steps={self._steps})"
        )
