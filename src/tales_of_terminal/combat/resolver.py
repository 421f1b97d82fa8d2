from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..core.random import RandomSource
from ..player.state import PlayerState
from ..world.adversaries import Adversary, AdversarySnapshot

logger = logging.getLogger(__name__)

KILL_REWARD = 50
SHIELD_POWER_REDUCTION = 15


class CombatMode(str, Enum):
    CHARGE = "charge"    # player moved onto the adversary
    DUEL = "duel"        # power check against a [0, 100) roll
    STRIKE = "strike"    # adversary-initiated, fixed damage


@dataclass(frozen=True)
class CombatOutcome:
    """Result of one combat check.

    ``adversary_hit`` says whether the adversary dealt damage. A charge or duel
    that the adversary did not win is a kill for the player; a strike that did
    not hit is simply a miss.
    """

    mode: CombatMode
    adversary: AdversarySnapshot
    adversary_hit: bool
    damage_taken: int
    item_gained: Optional[str]
    roll: Union[int, float]

    @property
    def player_won(self) -> bool:
        return self.mode is not CombatMode.STRIKE and not self.adversary_hit

    @property
    def landed(self) -> bool:
        return self.mode is CombatMode.STRIKE and self.adversary_hit


def effective_power(adversary: Adversary, player: PlayerState, reduction: int = SHIELD_POWER_REDUCTION) -> int:
    if player.has_shield:
        return max(0, adversary.power - reduction)
    return adversary.power


def _reward(player: PlayerState, adversary: Adversary, reward: int) -> str:
    player.add_score(reward)
    item = adversary.drop_item
    player.add_item(item)
    return item


def duel(
    player: PlayerState,
    adversary: Adversary,
    rng: RandomSource,
    *,
    shield_reduction: int = SHIELD_POWER_REDUCTION,
    reward: int = KILL_REWARD,
) -> CombatOutcome:
    """Power-based duel. Does not remove the adversary from the world."""
    p = rng.randrange(100)
    power = effective_power(adversary, player, shield_reduction)
    if p < power:
        player.take_damage(adversary.damage)
        logger.info("Duel lost to %s (roll=%d < power=%d)", adversary.name, p, power)
        return CombatOutcome(CombatMode.DUEL, adversary.snapshot(), True, adversary.damage, None, p)
    item = _reward(player, adversary, reward)
    logger.info("Duel won against %s (roll=%d >= power=%d)", adversary.name, p, power)
    return CombatOutcome(CombatMode.DUEL, adversary.snapshot(), False, 0, item, p)


def direct_charge(
    player: PlayerState,
    adversary: Adversary,
    rng: RandomSource,
    probability: float,
    *,
    reward: int = KILL_REWARD,
) -> CombatOutcome:
    """Fixed-probability kill check used when the player walks onto an adversary."""
    roll = rng.random()
    if roll < probability:
        item = _reward(player, adversary, reward)
        logger.info("Charge killed %s (roll=%.3f < %.2f)", adversary.name, roll, probability)
        return CombatOutcome(CombatMode.CHARGE, adversary.snapshot(), False, 0, item, roll)
    player.take_damage(adversary.damage)
    logger.info("Charge failed against %s (roll=%.3f); took %d", adversary.name, roll, adversary.damage)
    return CombatOutcome(CombatMode.CHARGE, adversary.snapshot(), True, adversary.damage, None, roll)


def opportunistic_strike(
    player: PlayerState,
    adversary: Adversary,
    rng: RandomSource,
    probability: float,
) -> CombatOutcome:
    """Adversary-initiated strike; the shield gives no protection here.

    A landed strike spends the adversary; the caller removes it.
    """
    roll = rng.random()
    if roll < probability:
        player.take_damage(adversary.damage)
        logger.info("%s strikes for %d (roll=%.3f)", adversary.name, adversary.damage, roll)
        return CombatOutcome(CombatMode.STRIKE, adversary.snapshot(), True, adversary.damage, None, roll)
    logger.debug("%s holds back (roll=%.3f)", adversary.name, roll)
    return CombatOutcome(CombatMode.STRIKE, adversary.snapshot(), False, 0, None, roll)
