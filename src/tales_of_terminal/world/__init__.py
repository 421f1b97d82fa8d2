from .adversaries import ARCHETYPES, Adversary, AdversaryKind, AdversarySnapshot, kind_for_roll
from .generator import WorldGenerator, generate
from .state import WorldState

__all__ = [
    "ARCHETYPES",
    "Adversary",
    "AdversaryKind",
    "AdversarySnapshot",
    "WorldGenerator",
    "WorldState",
    "generate",
    "kind_for_roll",
]
