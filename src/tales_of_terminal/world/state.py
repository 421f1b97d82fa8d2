from __future__ import annotations

import logging
from typing import Generator, Iterable, List, Optional, Tuple

from .adversaries import Adversary, AdversarySnapshot, Coord

logger = logging.getLogger(__name__)

ORTHOGONAL_OFFSETS: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


class WorldState:
    """Grid bounds plus everything that lives on the grid besides the player.

    Adversaries keep their listing order for the whole session; that order
    decides strike order, pursuit priority and which adversary a booster kills.
    Boosters are plain coordinates, each collected at most once.
    """

    def __init__(
        self,
        cols: int,
        rows: int,
        adversaries: Optional[Iterable[Adversary]] = None,
        boosters: Optional[Iterable[Coord]] = None,
        destination: Optional[Coord] = None,
    ) -> None:
        if cols <= 0 or rows <= 0:
            raise ValueError("WorldState dimensions must be positive")
        self._cols = int(cols)
        self._rows = int(rows)
        self._adversaries: List[Adversary] = list(adversaries or [])
        self._boosters: List[Coord] = []
        for b in boosters or []:
            coord = (int(b[0]), int(b[1]))
            if coord in self._boosters:
                raise ValueError(f"Duplicate booster at {coord}")
            self._boosters.append(coord)
        self._destination: Coord = destination if destination is not None else (self._cols - 1, self._rows - 1)
        for coord in [a.pos for a in self._adversaries] + self._boosters + [self._destination]:
            if not self.in_bounds(*coord):
                raise ValueError(f"Coordinates out of bounds: {coord} for grid {self._cols}x{self._rows}")
        logger.debug(
            "WorldState %dx%d with %d adversaries, %d boosters, destination %s",
            self._cols, self._rows, len(self._adversaries), len(self._boosters), self._destination,
        )

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def destination(self) -> Coord:
        return self._destination

    @property
    def adversaries(self) -> Tuple[Adversary, ...]:
        return tuple(self._adversaries)

    @property
    def boosters(self) -> Tuple[Coord, ...]:
        return tuple(self._boosters)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._cols and 0 <= y < self._rows

    def neighbors(self, x: int, y: int) -> Generator[Coord, None, None]:
        """Yield in-bounds orthogonal neighbours of (x, y)."""
        for dx, dy in ORTHOGONAL_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield (nx, ny)

    # Adversaries

    def adversary_at(self, x: int, y: int) -> Optional[Adversary]:
        """Return the first adversary (listing order) standing on (x, y)."""
        for adversary in self._adversaries:
            if adversary.pos == (x, y):
                return adversary
        return None

    def adjacent_adversaries(self, x: int, y: int) -> List[Adversary]:
        """Adversaries orthogonally adjacent to (x, y), in listing order."""
        cells = set(self.neighbors(x, y))
        return [a for a in self._adversaries if a.pos in cells]

    def remove_adversary(self, adversary: Adversary) -> bool:
        for i, candidate in enumerate(self._adversaries):
            if candidate is adversary:
                del self._adversaries[i]
                logger.debug("Removed %r", adversary)
                return True
        return False

    def slay_last_adversary(self) -> Optional[Adversary]:
        """Remove and return the last-listed adversary, or None if none remain."""
        if not self._adversaries:
            return None
        slain = self._adversaries.pop()
        logger.debug("Slew last-listed %r", slain)
        return slain

    def snapshot_adversaries(self) -> List[AdversarySnapshot]:
        return [a.snapshot() for a in self._adversaries]

    # Boosters and destination

    def is_booster_at(self, x: int, y: int) -> bool:
        return (x, y) in self._boosters

    def collect_booster_at(self, x: int, y: int) -> Optional[str]:
        """Remove the booster at (x, y) and return its item name, or None."""
        if (x, y) not in self._boosters:
            return None
        self._boosters.remove((x, y))
        return f"Booster-{x}-{y}"

    def is_destination(self, x: int, y: int) -> bool:
        return self._destination == (x, y)

    def __repr__(self) -> str:
        return (
            f"WorldState(cols={self._cols}, rows={self._rows}, "
            f"adversaries={len(self._adversaries)}, boosters={len(self._boosters)})"
        )
