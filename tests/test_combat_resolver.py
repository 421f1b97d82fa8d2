from tales_of_terminal.combat.resolver import (
    CombatMode,
    direct_charge,
    duel,
    effective_power,
    opportunistic_strike,
)
from tales_of_terminal.core.random import ScriptedRandom
from tales_of_terminal.player.state import PlayerState
from tales_of_terminal.world.adversaries import Adversary, AdversaryKind


def test_duel_loss_applies_damage_only():
    player = PlayerState("Ada")
    orc = Adversary(AdversaryKind.ORC, 1, 0)
    outcome = duel(player, orc, ScriptedRandom(ints=[54]))
    assert outcome.mode is CombatMode.DUEL
    assert not outcome.player_won
    assert outcome.damage_taken == 20
    assert player.vitality == 80
    assert player.score == 0
    assert "Orc Axe" not in player.inventory


def test_duel_win_awards_score_and_drop():
    player = PlayerState("Ada")
    orc = Adversary(AdversaryKind.ORC, 1, 0)
    outcome = duel(player, orc, ScriptedRandom(ints=[55]))
    assert outcome.player_won
    assert outcome.item_gained == "Orc Axe"
    assert player.score == 50
    assert player.inventory[-1] == "Orc Axe"
    assert player.vitality == 100


def test_shield_reduces_dragon_power_so_70_wins():
    player = PlayerState("Ada")
    player.add_item("Silver Shield")
    dragon = Adversary(AdversaryKind.DRAGON, 0, 1)
    assert effective_power(dragon, player) == 65

    outcome = duel(player, dragon, ScriptedRandom(ints=[70]))
    assert outcome.player_won
    assert player.score == 50
    assert "Dragon Scale" in player.inventory


def test_same_draw_without_shield_loses_to_dragon():
    player = PlayerState("Ada")
    dragon = Adversary(AdversaryKind.DRAGON, 0, 1)
    outcome = duel(player, dragon, ScriptedRandom(ints=[70]))
    assert not outcome.player_won
    assert player.vitality == 60


def test_shield_power_is_floored_at_zero():
    player = PlayerState("Ada", inventory=["Shield"])
    goblin = Adversary(AdversaryKind.GOBLIN, 0, 1)
    assert effective_power(goblin, player, reduction=50) == 0


def test_strike_ignores_shield():
    player = PlayerState("Ada", inventory=["Tower Shield"])
    dragon = Adversary(AdversaryKind.DRAGON, 0, 1)
    outcome = opportunistic_strike(player, dragon, ScriptedRandom(floats=[0.59]), 0.6)
    assert outcome.landed
    assert player.vitality == 60


def test_strike_miss_changes_nothing():
    player = PlayerState("Ada")
    orc = Adversary(AdversaryKind.ORC, 0, 1)
    outcome = opportunistic_strike(player, orc, ScriptedRandom(floats=[0.6]), 0.6)
    assert not outcome.landed
    assert player.vitality == 100


def test_direct_charge_success_and_failure():
    player = PlayerState("Ada")
    goblin = Adversary(AdversaryKind.GOBLIN, 1, 0)
    won = direct_charge(player, goblin, ScriptedRandom(floats=[0.64]), 0.65)
    assert won.player_won and won.item_gained == "Goblin Tooth"
    assert player.score == 50

    lost = direct_charge(player, goblin, ScriptedRandom(floats=[0.65]), 0.65)
    assert not lost.player_won
    assert player.vitality == 90


def test_strike_miss_is_not_a_player_win():
    player = PlayerState("Ada")
    goblin = Adversary(AdversaryKind.GOBLIN, 0, 1)
    missed = opportunistic_strike(player, goblin, ScriptedRandom(floats=[0.99]), 0.6)
    assert not missed.adversary_hit
    assert not missed.player_won
    assert not missed.landed

    hit = opportunistic_strike(player, goblin, ScriptedRandom(floats=[0.0]), 0.6)
    assert hit.adversary_hit and hit.landed
    assert not hit.player_won
