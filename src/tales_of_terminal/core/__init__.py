from .random import RandomSource, ScriptedRandom, SeededRandom

__all__ = ["RandomSource", "ScriptedRandom", "SeededRandom"]
