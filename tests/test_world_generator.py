import pytest

from tales_of_terminal.core.random import ScriptedRandom, SeededRandom
from tales_of_terminal.exceptions import WorldConfigError
from tales_of_terminal.world.adversaries import AdversaryKind
from tales_of_terminal.world.generator import WorldGenerator, generate


@pytest.mark.parametrize("seed", range(25))
def test_generated_world_is_well_formed(seed):
    world = generate(12, 8, 10, 4, SeededRandom(seed))

    assert len(world.adversaries) == 10
    assert len(world.boosters) == 4
    adversary_cells = [a.pos for a in world.adversaries]
    assert len(set(adversary_cells)) == 10
    assert len(set(world.boosters)) == 4
    for x, y in adversary_cells + list(world.boosters):
        assert world.in_bounds(x, y)
        assert (x, y) != (0, 0)
    assert world.destination == (11, 7)


def test_scripted_generation_skips_origin_and_duplicates():
    ints = [
        0, 0,        # origin, rejected
        1, 0, 10,    # goblin at (1,0)
        1, 0,        # duplicate, rejected
        2, 1, 95,    # dragon at (2,1)
        0, 0,        # origin, rejected for boosters too
        1, 0,        # booster may share a cell with an adversary
    ]
    rng = ScriptedRandom(ints=ints)
    world = WorldGenerator(rng).generate(3, 2, 2, 1)

    assert [(a.kind, a.pos) for a in world.adversaries] == [
        (AdversaryKind.GOBLIN, (1, 0)),
        (AdversaryKind.DRAGON, (2, 1)),
    ]
    assert world.boosters == ((1, 0),)
    assert world.destination == (2, 1)
    assert rng.remaining_ints == 0


def test_every_free_cell_can_be_filled():
    world = generate(2, 2, 3, 3, SeededRandom(3))
    assert sorted(a.pos for a in world.adversaries) == [(0, 1), (1, 0), (1, 1)]
    assert sorted(world.boosters) == [(0, 1), (1, 0), (1, 1)]


@pytest.mark.parametrize(
    "cols,rows,adversaries,boosters",
    [
        (2, 2, 4, 0),
        (1, 1, 1, 0),
        (3, 3, 0, 9),
        (0, 5, 1, 1),
        (4, 4, -1, 0),
    ],
)
def test_impossible_configurations_raise(cols, rows, adversaries, boosters):
    with pytest.raises(WorldConfigError):
        generate(cols, rows, adversaries, boosters, ScriptedRandom())


def test_empty_world_on_single_cell():
    world = generate(1, 1, 0, 0, ScriptedRandom())
    assert world.adversaries == ()
    assert world.boosters == ()
    assert world.destination == (0, 0)
