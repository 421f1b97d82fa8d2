from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Union

from ..world.adversaries import AdversarySnapshot

if TYPE_CHECKING:  # pragma: no cover
    from ..engine.turn_engine import TurnEngine

logger = logging.getLogger(__name__)

HEADER = "=== TALES OF TERMINAL RESULT ==="
FOOTER = "---- End of Result ----"


class EndReason(Enum):
    MANUAL_EXIT = "Manual Save & Exit"
    PLAYER_DIED = "Player Died"
    REACHED_DESTINATION = "Reached Destination"


@dataclass
class ResultRecord:
    """End-of-session summary in the appended result log format.

    This object is UI-agnostic and safe to unit test.
    """

    player: str
    reason: EndReason
    score: int
    hp: int
    steps: int
    visited: str
    inventory: List[str] = field(default_factory=list)
    remaining: List[AdversarySnapshot] = field(default_factory=list)

    @staticmethod
    def from_engine(engine: "TurnEngine", reason: EndReason) -> "ResultRecord":
        player = engine.player
        return ResultRecord(
            player=player.name,
            reason=reason,
            score=player.score,
            hp=player.vitality,
            steps=player.steps,
            visited=player.visited_string(),
            inventory=list(player.inventory),
            remaining=engine.adversaries(),
        )

    def format_lines(self) -> List[str]:
        lines = [
            HEADER,
            f"Player: {self.player}",
            f"Reason: {self.reason.value}",
            f"Score: {self.score}",
            f"HP: {self.hp}",
            f"Steps: {self.steps}",
            f"Visited: {self.visited}",
            f"Inventory: {', '.join(self.inventory)}",
            f"Remaining Enemies: {len(self.remaining)}",
        ]
        for i, adversary in enumerate(self.remaining, start=1):
            x, y = adversary.position
            lines.append(
                f"  {i}) {adversary.name} at ({x},{y}) power={adversary.power} dmg={adversary.damage}"
            )
        lines.append(FOOTER)
        return lines

    def format_block(self) -> str:
        """The record as written to the log, including the trailing blank line."""
        return "\n".join(self.format_lines()) + "\n\n"


class ResultLog:
    """Append-only text store of session results."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def append(self, record: ResultRecord) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(record.format_block())
        logger.info("Appended result for %s (%s) to %s", record.player, record.reason.value, self.path)
        return self.path

    def read(self) -> Optional[str]:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")
