import sys
from pathlib import Path

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from tales_of_terminal.core.random import ScriptedRandom  # noqa: E402
from tales_of_terminal.engine.turn_engine import TurnEngine  # noqa: E402
from tales_of_terminal.player.state import PlayerState  # noqa: E402
from tales_of_terminal.world.adversaries import Adversary  # noqa: E402
from tales_of_terminal.world.state import WorldState  # noqa: E402


@pytest.fixture
def build_engine():
    """Build an engine over a hand-placed world with a scripted random source.

    ``adversaries`` is a list of (kind, x, y); ``boosters`` a list of (x, y).
    """

    def _build(
        adversaries=(),
        boosters=(),
        *,
        cols=12,
        rows=8,
        floats=(),
        ints=(),
        repeat=False,
        inventory=None,
        position=(0, 0),
        vitality=100,
    ):
        world = WorldState(
            cols,
            rows,
            [Adversary(kind, x, y) for kind, x, y in adversaries],
            list(boosters),
        )
        player = PlayerState("Tester", vitality=vitality, inventory=inventory, position=position)
        rng = ScriptedRandom(floats=floats, ints=ints, repeat=repeat)
        return TurnEngine(player, world, rng)

    return _build

