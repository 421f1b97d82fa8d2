from .results import (
    ActionKind,
    AdversaryStrike,
    BoosterCollected,
    DuelOffered,
    Encounter,
    Moved,
    NothingHere,
    PursuitStep,
    TerminalState,
    TurnEvent,
    TurnResult,
)
from .session import new_session, start_engine, validate_player_name
from .turn_engine import TurnEngine

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
    "TurnEngine",
    "TurnEvent",
    "TurnResult",
    "new_session",
    "start_engine",
    "validate_player_name",
]
