from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from ..exceptions import RandomScriptExhausted

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Uniform random draws consumed by the engine.

    Every probabilistic decision goes through one of these two methods so a
    session can be replayed by substituting a scripted source.
    """

    def random(self) -> float: ...
    def randrange(self, stop: int) -> int: ...


@dataclass
class SeededRandom:
    """
    A thin wrapper around random.Random to:
    - centralize RNG handling
    - support optional deterministic seeding for tests and replays
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.seed is not None:
            logger.debug("Initialized SeededRandom with deterministic seed=%s", self.seed)
        else:
            logger.debug("Initialized SeededRandom with non-deterministic seed")

    def random(self) -> float:
        """Return the next random float in the range [0.0, 1.0)."""
        return self._rng.random()

    def randrange(self, stop: int) -> int:
        """Return a random integer N such that 0 <= N < stop."""
        if stop <= 0:
            raise ValueError(f"randrange() stop must be positive, got {stop}")
        return self._rng.randrange(stop)


@dataclass
class ScriptedRandom:
    """Replays fixed draws, for deterministic tests.

    Float draws and integer draws are served from separate queues so a test can
    script the probability checks and the dice rolls independently. With
    ``repeat`` enabled each queue cycles forever instead of running dry.
    """

    floats: Sequence[float] = ()
    ints: Sequence[int] = ()
    repeat: bool = False
    _float_pos: int = field(default=0, init=False, repr=False)
    _int_pos: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self._floats: List[float] = [float(v) for v in self.floats]
        self._ints: List[int] = [int(v) for v in self.ints]
        for value in self._floats:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted float draws must lie in [0, 1), got {value}")

    def random(self) -> float:
        value = self._next(self._floats, "_float_pos", "float")
        logger.debug("Scripted float draw -> %.4f", value)
        return value

    def randrange(self, stop: int) -> int:
        value = self._next(self._ints, "_int_pos", "int")
        if not 0 <= value < stop:
            raise ValueError(f"Scripted int draw {value} is outside [0, {stop})")
        logger.debug("Scripted int draw -> %d (stop=%d)", value, stop)
        return value

    @property
    def remaining_floats(self) -> int:
        return len(self._floats) - self._float_pos

    @property
    def remaining_ints(self) -> int:
        return len(self._ints) - self._int_pos

    def _next(self, queue: List, attr: str, label: str):
        pos = getattr(self, attr)
        if pos >= len(queue):
            if not self.repeat or not queue:
                raise RandomScriptExhausted(f"No scripted {label} draws left")
            pos = 0
        setattr(self, attr, pos + 1)
        return queue[pos]


__all__ = ["RandomSource", "SeededRandom", "ScriptedRandom"]
