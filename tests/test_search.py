import pytest

from tales_of_terminal.engine.results import (
    ActionKind,
    BoosterCollected,
    DuelOffered,
    Encounter,
    NothingHere,
    TerminalState,
)
from tales_of_terminal.exceptions import SessionOverError
from tales_of_terminal.world.adversaries import AdversaryKind

GOBLIN = AdversaryKind.GOBLIN
ORC = AdversaryKind.ORC


def test_search_on_empty_cell_is_a_noop(build_engine):
    engine = build_engine([(GOBLIN, 5, 5)], [(3, 3)])
    result = engine.search()

    assert result.accepted
    assert result.action is ActionKind.SEARCH
    assert result.events == [NothingHere((0, 0))]
    assert engine.steps == 0
    assert engine.adversary_at(5, 5) is not None
    assert engine.is_booster_at(3, 3)


def test_search_collects_booster_without_moving(build_engine):
    engine = build_engine([(GOBLIN, 9, 0), (ORC, 9, 1)], [(3, 3), (4, 4)], position=(3, 3))
    result = engine.search()

    collected = result.events_of(BoosterCollected)[0]
    assert collected.item == "Booster-3-3"
    assert collected.slain.kind is ORC
    assert engine.is_booster_at(4, 4)
    assert not engine.is_booster_at(3, 3)
    assert [a.kind for a in engine.adversaries()] == [GOBLIN]
    assert engine.steps == 0


def test_search_offers_duel_and_accept_resolves_it(build_engine):
    engine = build_engine([(GOBLIN, 2, 2)], position=(2, 2), ints=[10, 40])

    offered = engine.search()
    assert offered.events_of(DuelOffered)[0].adversary.kind is GOBLIN
    assert engine.pending_duel.kind is GOBLIN

    lost = engine.accept_duel()
    assert lost.action is ActionKind.DUEL
    assert not lost.events_of(Encounter)[0].won
    assert engine.vitality == 90
    assert engine.adversary_at(2, 2) is not None
    assert engine.pending_duel is None

    assert not engine.accept_duel().accepted

    engine.search()
    won = engine.accept_duel()
    assert won.events_of(Encounter)[0].won
    assert engine.score == 50
    assert engine.inventory[-1] == "Goblin Tooth"
    assert engine.adversaries() == []


def test_declined_or_stale_offer_cannot_be_accepted(build_engine):
    engine = build_engine([(GOBLIN, 1, 1)], position=(1, 1), floats=[0.9], ints=[99])

    engine.search()
    engine.decline_duel()
    assert not engine.accept_duel().accepted

    engine.search()
    engine.attempt_move(1, 0)
    result = engine.accept_duel()
    assert not result.accepted
    assert result.rejection


def test_lethal_duel_from_search_ends_session(build_engine):
    engine = build_engine([(ORC, 4, 4)], position=(4, 4), ints=[0], vitality=15)
    engine.search()
    result = engine.accept_duel()

    assert result.terminal is TerminalState.LOST
    assert result.killer.kind is ORC
    assert engine.adversaries() == []
    with pytest.raises(SessionOverError):
        engine.accept_duel()


def test_rejected_move_keeps_duel_offer(build_engine):
    engine = build_engine([(GOBLIN, 0, 0)], ints=[50])
    engine.search()

    assert not engine.attempt_move(-1, 0).accepted
    assert not engine.attempt_move(1, 1).accepted
    assert engine.pending_duel.kind is GOBLIN

    won = engine.accept_duel()
    assert won.accepted
    assert won.events_of(Encounter)[0].won
