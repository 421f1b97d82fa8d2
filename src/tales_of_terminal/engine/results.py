from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Type, TypeVar

from ..combat.resolver import CombatOutcome
from ..world.adversaries import AdversarySnapshot, Coord


class ActionKind(str, Enum):
    MOVE = "move"
    SEARCH = "search"
    DUEL = "duel"


class TerminalState(str, Enum):
    NONE = "none"
    WON = "won"
    LOST = "lost"


class TurnEvent:
    """Marker base for everything a turn can report."""


@dataclass(frozen=True)
class Moved(TurnEvent):
    origin: Coord
    destination: Coord
    steps: int
    step_bonus: int = 0


@dataclass(frozen=True)
class Encounter(TurnEvent):
    """Player-versus-adversary fight (charge or duel)."""

    outcome: CombatOutcome
    adversary_removed: bool

    @property
    def won(self) -> bool:
        return self.outcome.player_won


@dataclass(frozen=True)
class AdversaryStrike(TurnEvent):
    """An adjacent adversary landed an opportunistic strike and was spent."""

    outcome: CombatOutcome

    @property
    def damage(self) -> int:
        return self.outcome.damage_taken


@dataclass(frozen=True)
class PursuitStep(TurnEvent):
    adversary: AdversarySnapshot
    origin: Coord
    destination: Coord


@dataclass(frozen=True)
class BoosterCollected(TurnEvent):
    item: str
    position: Coord
    slain: Optional[AdversarySnapshot]


@dataclass(frozen=True)
class DuelOffered(TurnEvent):
    adversary: AdversarySnapshot


@dataclass(frozen=True)
class NothingHere(TurnEvent):
    position: Coord


E = TypeVar("E", bound=TurnEvent)


@dataclass
class TurnResult:
    """Everything one engine call produced, in the order it happened."""

    action: ActionKind
    accepted: bool = True
    rejection: Optional[str] = None
    events: List[TurnEvent] = field(default_factory=list)
    terminal: TerminalState = TerminalState.NONE
    killer: Optional[AdversarySnapshot] = None

    @classmethod
    def rejected(cls, action: ActionKind, reason: str) -> "TurnResult":
        return cls(action=action, accepted=False, rejection=reason)

    @property
    def is_terminal(self) -> bool:
        return self.terminal is not TerminalState.NONE

    def add(self, event: TurnEvent) -> None:
        self.events.append(event)

    def events_of(self, kind: Type[E]) -> Tuple[E, ...]:
        return tuple(e for e in self.events if isinstance(e, kind))


__all__ = [
    "ActionKind",
    "AdversaryStrike",
    "BoosterCollected",
    "DuelOffered",
    "Encounter",
    "Moved",
    "NothingHere",
    "PursuitStep",
    "TerminalState",
    "TurnEvent",
    "TurnResult",
]
