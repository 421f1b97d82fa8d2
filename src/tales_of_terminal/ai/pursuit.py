from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Set, Tuple

from ..world.adversaries import Adversary, Coord

logger = logging.getLogger(__name__)


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


class PursuitPlanner:
    """Moves every adversary one orthogonal step toward the player.

    All adversaries plan against the positions they held when the phase began,
    and a shared occupied set is seeded with those starting cells. Adversaries
    are then resolved one by one in listing order; a cell reserved by an
    earlier adversary blocks every later one. This is a single ordered pass,
    not true simultaneous movement: earlier-listed adversaries have priority.
    """

    def __init__(self, cols: int, rows: int) -> None:
        self.cols = cols
        self.rows = rows

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def candidates(self, start: Coord, target: Coord) -> List[Coord]:
        """Candidate cells in try order: the longer axis first, horizontal on ties."""
        ex, ey = start
        px, py = target
        dx, dy = _sign(px - ex), _sign(py - ey)
        dist_x, dist_y = abs(px - ex), abs(py - ey)
        horizontal = [(ex + dx, ey)] if dx else []
        vertical = [(ex, ey + dy)] if dy else []
        if dist_x >= dist_y:
            return horizontal + vertical
        return vertical + horizontal

    def plan(self, adversaries: Sequence[Adversary], player_position: Coord) -> Dict[Adversary, Coord]:
        starts: List[Tuple[Adversary, Coord]] = [(a, a.pos) for a in adversaries]
        occupied: Set[Coord] = {pos for _, pos in starts}
        plan: Dict[Adversary, Coord] = {}
        for adversary, start in starts:
            plan[adversary] = start
            for cell in self.candidates(start, player_position):
                if not self.in_bounds(*cell) or cell in occupied:
                    continue
                occupied.add(cell)
                plan[adversary] = cell
                break
            logger.debug("Pursuit %r: %s -> %s", adversary, start, plan[adversary])
        return plan


def plan_step(
    adversaries: Sequence[Adversary], player_position: Coord, cols: int, rows: int
) -> Dict[Adversary, Coord]:
    """Plan one pursuit step for all adversaries; unmoved ones map to their own cell."""
    return PursuitPlanner(cols, rows).plan(adversaries, player_position)
