from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from ..config import EngineSettings
from ..core.random import RandomSource, SeededRandom
from ..exceptions import NameValidationError
from ..player.state import PlayerState
from ..world.generator import WorldGenerator
from ..world.state import WorldState
from .turn_engine import TurnEngine

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[A-Za-z0-9 _-]{2,20}$")


def validate_player_name(name: Optional[str]) -> str:
    """Return the trimmed handle or raise NameValidationError with a readable reason."""
    trimmed = (name or "").strip()
    if not trimmed:
        raise NameValidationError("Name cannot be blank.")
    if not NAME_PATTERN.match(trimmed):
        raise NameValidationError("Only letters, numbers, spaces, - and _ allowed (2-20 chars).")
    return trimmed


def new_session(
    player_name: str,
    cols: Optional[int] = None,
    rows: Optional[int] = None,
    *,
    settings: Optional[EngineSettings] = None,
    rng: Optional[RandomSource] = None,
) -> Tuple[PlayerState, WorldState]:
    """Validate the handle, then create the player and a freshly generated world.

    Grid size defaults to the configured one. WorldConfigError propagates
    before any engine exists.
    """
    settings = settings or EngineSettings()
    name = validate_player_name(player_name)
    rng = rng or SeededRandom()
    cols = settings.world.cols if cols is None else cols
    rows = settings.world.rows if rows is None else rows

    world = WorldGenerator(rng).generate(cols, rows, settings.world.adversaries, settings.world.boosters)
    player = PlayerState(
        name,
        vitality=settings.player.starting_vitality,
        inventory=settings.player.starting_inventory,
        visit_range=settings.player.visit_range,
    )
    logger.info("New session for %s on a %dx%d grid", name, cols, rows)
    return player, world


def start_engine(
    player_name: str,
    cols: Optional[int] = None,
    rows: Optional[int] = None,
    *,
    settings: Optional[EngineSettings] = None,
    rng: Optional[RandomSource] = None,
) -> TurnEngine:
    """Convenience wrapper: new_session plus a TurnEngine sharing the same RNG."""
    settings = settings or EngineSettings()
    rng = rng or SeededRandom()
    player, world = new_session(player_name, cols, rows, settings=settings, rng=rng)
    return TurnEngine(player, world, rng, settings.rules)
