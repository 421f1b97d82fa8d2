"""Tales of Terminal: turn-resolution engine for a grid exploration/combat game."""

from .config import EngineSettings, load_settings
from .core.random import RandomSource, ScriptedRandom, SeededRandom
from .engine import TerminalState, TurnEngine, TurnResult, new_session, start_engine
from .exceptions import (
    ConfigError,
    NameValidationError,
    SessionOverError,
    TalesError,
    WorldConfigError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "EngineSettings",
    "NameValidationError",
    "RandomSource",
    "ScriptedRandom",
    "SeededRandom",
    "SessionOverError",
    "TalesError",
    "TerminalState",
    "TurnEngine",
    "TurnResult",
    "WorldConfigError",
    "load_settings",
    "new_session",
    "start_engine",
]
