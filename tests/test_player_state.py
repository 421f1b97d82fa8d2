import pytest

from tales_of_terminal.player.state import PlayerState, VisitedCells


def test_defaults():
    player = PlayerState("Ada")
    assert player.position == (0, 0)
    assert player.vitality == 100
    assert player.score == 0
    assert player.steps == 0
    assert player.inventory == ("Basic Sword", "Health Potion")
    assert player.has_visited(0, 0)
    assert not player.has_shield


def test_shield_capability_from_any_shield_item():
    player = PlayerState("Ada", inventory=[])
    player.add_item("Goblin Tooth")
    assert not player.has_shield
    player.add_item("Silver SHIELD")
    assert player.has_shield


def test_vitality_floor_for_display_but_raw_can_go_negative():
    player = PlayerState("Ada", vitality=30)
    player.take_damage(40)
    assert player.raw_vitality == -10
    assert player.vitality == 0
    assert not player.alive


def test_score_only_increases():
    player = PlayerState("Ada")
    player.add_score(5)
    with pytest.raises(ValueError):
        player.add_score(0)
    with pytest.raises(ValueError):
        player.add_score(-5)
    assert player.score == 5


def test_step_to_counts_and_marks_visited():
    player = PlayerState("Ada")
    assert player.step_to(1, 0) == 1
    assert player.step_to(1, 1) == 2
    assert player.visited_cells() == frozenset({(0, 0), (1, 0), (1, 1)})


def test_visited_string_is_column_major():
    player = PlayerState("Ada")
    player.step_to(0, 1)
    player.step_to(1, 1)
    player.step_to(1, 0)
    assert player.visited_string() == "(0-0);(0-1);(1-0);(1-1);"


def test_visited_range_is_bounded():
    cells = VisitedCells(size=3)
    assert cells.mark(2, 2)
    assert not cells.mark(3, 0)
    assert not cells.mark(0, 5)
    assert (2, 2) in cells
    assert len(cells) == 1
