from __future__ import annotations

import logging
from typing import List, Set

from ..core.random import RandomSource
from ..exceptions import WorldConfigError
from .adversaries import Adversary, Coord, kind_for_roll
from .state import WorldState

logger = logging.getLogger(__name__)

ORIGIN: Coord = (0, 0)


class WorldGenerator:
    """Scatters adversaries and boosters over a fresh grid.

    Placement is rejection sampling: draw x then y until a cell is found that is
    neither the origin nor already used by the same category. Adversaries and
    boosters are sampled independently, so a booster may share a cell with an
    adversary. The destination is always the far corner.
    """

    def __init__(self, rng: RandomSource) -> None:
        self.rng = rng

    def generate(self, cols: int, rows: int, adversary_count: int, booster_count: int) -> WorldState:
        _check_capacity(cols, rows, adversary_count, booster_count)

        adversaries: List[Adversary] = []
        used: Set[Coord] = set()
        while len(adversaries) < adversary_count:
            cell = self._sample_free(cols, rows, used)
            used.add(cell)
            kind = kind_for_roll(self.rng.randrange(100))
            adversaries.append(Adversary(kind, *cell))

        boosters: List[Coord] = []
        used = set()
        while len(boosters) < booster_count:
            cell = self._sample_free(cols, rows, used)
            used.add(cell)
            boosters.append(cell)

        world = WorldState(cols, rows, adversaries, boosters, destination=(cols - 1, rows - 1))
        logger.info(
            "Generated %dx%d world: %s; boosters at %s",
            cols, rows, [a.name for a in adversaries], boosters,
        )
        return world

    def _sample_free(self, cols: int, rows: int, used: Set[Coord]) -> Coord:
        while True:
            x = self.rng.randrange(cols)
            y = self.rng.randrange(rows)
            if (x, y) == ORIGIN or (x, y) in used:
                continue
            return (x, y)


def _check_capacity(cols: int, rows: int, adversary_count: int, booster_count: int) -> None:
    if cols <= 0 or rows <= 0:
        raise WorldConfigError(f"Grid dimensions must be positive, got {cols}x{rows}")
    if adversary_count < 0 or booster_count < 0:
        raise WorldConfigError("Entity counts must be non-negative")
    cells = cols * rows
    if adversary_count + 1 > cells:
        raise WorldConfigError(
            f"Cannot place {adversary_count} adversaries on a {cols}x{rows} grid without using the origin"
        )
    if booster_count + 1 > cells:
        raise WorldConfigError(
            f"Cannot place {booster_count} boosters on a {cols}x{rows} grid without using the origin"
        )


def generate(cols: int, rows: int, adversary_count: int, booster_count: int, rng: RandomSource) -> WorldState:
    """Populate a fresh WorldState. Raises WorldConfigError on impossible counts."""
    return WorldGenerator(rng).generate(cols, rows, adversary_count, booster_count)


__all__ = ["WorldGenerator", "generate", "ORIGIN"]
