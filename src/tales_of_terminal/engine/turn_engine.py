from __future__ import annotations

import logging
from typing import FrozenSet, List, Optional, Tuple

from ..ai.pursuit import PursuitPlanner
from ..combat.resolver import CombatOutcome, direct_charge, duel, opportunistic_strike
from ..config import RuleSettings
from ..core.random import RandomSource
from ..exceptions import SessionOverError
from ..player.state import PlayerState
from ..world.adversaries import Adversary, AdversarySnapshot, Coord
from ..world.state import WorldState
from .results import (
    ActionKind,
    AdversaryStrike,
    BoosterCollected,
    DuelOffered,
    Encounter,
    Moved,
    NothingHere,
    PursuitStep,
    TerminalState,
    TurnResult,
)

logger = logging.getLogger(__name__)


class TurnEngine:
    """Resolves player actions against the world, one full turn per call.

    A move runs these phases in order, stopping early as soon as the player dies:

    1. move validation (single orthogonal step inside the grid)
    2. direct encounter when the player steps onto an adversary (charge check)
    3. opportunistic strikes from orthogonally adjacent adversaries
    4. pursuit: every adversary steps toward the player
    5. duel against an adversary that pursued onto the player's cell
    6. booster pickup on the player's cell
    7. destination check

    A direct encounter in phase 2 skips phases 3 to 5 for that turn. The
    asymmetry is intentional: walking into an adversary is its own fight and
    never also provokes the neighbours or a pursuit step.

    The engine owns the player and world for the whole session and is not
    thread-safe; one call runs to completion before the next is made.
    """

    def __init__(
        self,
        player: PlayerState,
        world: WorldState,
        rng: RandomSource,
        rules: Optional[RuleSettings] = None,
    ) -> None:
        if not world.in_bounds(*player.position):
            raise ValueError(f"Player position {player.position} is outside the world")
        self.player = player
        self.world = world
        self.rng = rng
        self.rules = rules or RuleSettings()
        self._planner = PursuitPlanner(world.cols, world.rows)
        self._terminal = TerminalState.NONE
        self._pending_duel: Optional[Adversary] = None
        logger.info("TurnEngine ready for %s on %r", player.name, world)

    # ------------------------------------------------------------------ actions

    def attempt_move(self, dx: int, dy: int) -> TurnResult:
        """Try to move the player by one orthogonal step and resolve the turn."""
        self._ensure_active()

        if abs(dx) + abs(dy) != 1:
            logger.debug("Rejected move (%d, %d): not a single orthogonal step", dx, dy)
            return TurnResult.rejected(ActionKind.MOVE, "Moves must be a single orthogonal step.")
        x, y = self.player.position
        nx, ny = x + dx, y + dy
        if not self.world.in_bounds(nx, ny):
            logger.debug("Rejected move to (%d, %d): out of bounds", nx, ny)
            return TurnResult.rejected(ActionKind.MOVE, "You cannot leave the map.")

        self._pending_duel = None
        result = TurnResult(action=ActionKind.MOVE)
        self._apply_step(result, (x, y), (nx, ny))

        if self._direct_encounter(result):
            if result.is_terminal:
                return result
        else:
            self._adjacent_strikes(result)
            if result.is_terminal:
                return result
            self._pursuit(result)
            self._post_pursuit_encounter(result)
            if result.is_terminal:
                return result

        self._booster_check(result)
        self._terminal_check(result)
        return result

    def search(self) -> TurnResult:
        """Look around the current cell without moving.

        An adversary here produces a duel offer that the caller confirms with
        :meth:`accept_duel` or drops with :meth:`decline_duel`. Otherwise a
        booster here is collected. Otherwise nothing happens.
        """
        self._ensure_active()
        self._pending_duel = None
        result = TurnResult(action=ActionKind.SEARCH)
        x, y = self.player.position

        adversary = self.world.adversary_at(x, y)
        if adversary is not None:
            self._pending_duel = adversary
            result.add(DuelOffered(adversary.snapshot()))
            logger.info("Search found %r; duel offered", adversary)
            return result

        if not self._booster_check(result):
            result.add(NothingHere((x, y)))
            logger.debug("Search at %s found nothing", (x, y))
        return result

    def accept_duel(self) -> TurnResult:
        """Fight the adversary offered by the last search."""
        self._ensure_active()
        adversary, self._pending_duel = self._pending_duel, None
        if adversary is None:
            return TurnResult.rejected(ActionKind.DUEL, "There is no duel to accept.")
        if adversary not in self.world.adversaries or adversary.pos != self.player.position:
            return TurnResult.rejected(ActionKind.DUEL, "That adversary is no longer here.")

        result = TurnResult(action=ActionKind.DUEL)
        self._resolve_duel(result, adversary)
        return result

    def decline_duel(self) -> None:
        if self._pending_duel is not None:
            logger.debug("Duel with %r declined", self._pending_duel)
        self._pending_duel = None

    # ------------------------------------------------------------------ phases

    def _apply_step(self, result: TurnResult, origin: Coord, target: Coord) -> None:
        steps = self.player.step_to(*target)
        bonus = 0
        if steps % self.rules.step_bonus_interval == 0:
            bonus = self.rules.step_bonus
            self.player.add_score(bonus)
        result.add(Moved(origin, target, steps, bonus))
        logger.debug("Player moved %s -> %s (steps=%d, bonus=%d)", origin, target, steps, bonus)

    def _direct_encounter(self, result: TurnResult) -> bool:
        adversary = self.world.adversary_at(*self.player.position)
        if adversary is None:
            return False
        outcome = direct_charge(
            self.player, adversary, self.rng, self.rules.charge_kill_chance, reward=self.rules.kill_reward
        )
        if outcome.player_won:
            self.world.remove_adversary(adversary)
            result.add(Encounter(outcome, adversary_removed=True))
        elif not self.player.alive:
            self.world.remove_adversary(adversary)
            result.add(Encounter(outcome, adversary_removed=True))
            self._finish(result, TerminalState.LOST, outcome.adversary)
        else:
            result.add(Encounter(outcome, adversary_removed=False))
        return True

    def _adjacent_strikes(self, result: TurnResult) -> None:
        for adversary in self.world.adjacent_adversaries(*self.player.position):
            outcome = opportunistic_strike(self.player, adversary, self.rng, self.rules.strike_chance)
            if not outcome.landed:
                continue
            self.world.remove_adversary(adversary)
            result.add(AdversaryStrike(outcome))
            if not self.player.alive:
                self._finish(result, TerminalState.LOST, outcome.adversary)
                return

    def _pursuit(self, result: TurnResult) -> None:
        plan = self._planner.plan(self.world.adversaries, self.player.position)
        for adversary, (nx, ny) in plan.items():
            origin = adversary.pos
            if origin == (nx, ny):
                continue
            adversary.move_to(nx, ny)
            result.add(PursuitStep(adversary.snapshot(), origin, (nx, ny)))

    def _post_pursuit_encounter(self, result: TurnResult) -> None:
        adversary = self.world.adversary_at(*self.player.position)
        if adversary is not None:
            logger.info("%r moved onto the player", adversary)
            self._resolve_duel(result, adversary)

    def _booster_check(self, result: TurnResult) -> bool:
        x, y = self.player.position
        item = self.world.collect_booster_at(x, y)
        if item is None:
            return False
        self.player.add_item(item)
        slain = self.world.slay_last_adversary()
        result.add(BoosterCollected(item, (x, y), slain.snapshot() if slain else None))
        logger.info("Collected %s; slain=%r", item, slain)
        return True

    def _terminal_check(self, result: TurnResult) -> None:
        if self.world.is_destination(*self.player.position):
            self._finish(result, TerminalState.WON)

    # ------------------------------------------------------------------ helpers

    def _resolve_duel(self, result: TurnResult, adversary: Adversary) -> CombatOutcome:
        outcome = duel(
            self.player,
            adversary,
            self.rng,
            shield_reduction=self.rules.shield_power_reduction,
            reward=self.rules.kill_reward,
        )
        removed = outcome.player_won or not self.player.alive
        if removed:
            self.world.remove_adversary(adversary)
        result.add(Encounter(outcome, adversary_removed=removed))
        if not self.player.alive:
            self._finish(result, TerminalState.LOST, outcome.adversary)
        return outcome

    def _finish(self, result: TurnResult, state: TerminalState, killer: Optional[AdversarySnapshot] = None) -> None:
        self._terminal = state
        result.terminal = state
        result.killer = killer
        logger.info("Session over for %s: %s", self.player.name, state.value)

    def _ensure_active(self) -> None:
        if self._terminal is not TerminalState.NONE:
            raise SessionOverError(f"Session already ended ({self._terminal.value})")

    # ------------------------------------------------------------------ queries

    @property
    def terminal(self) -> TerminalState:
        return self._terminal

    @property
    def pending_duel(self) -> Optional[AdversarySnapshot]:
        return self._pending_duel.snapshot() if self._pending_duel else None

    @property
    def position(self) -> Coord:
        return self.player.position

    @property
    def vitality(self) -> int:
        return self.player.vitality

    @property
    def score(self) -> int:
        return self.player.score

    @property
    def steps(self) -> int:
        return self.player.steps

    @property
    def inventory(self) -> Tuple[str, ...]:
        return self.player.inventory

    @property
    def visited(self) -> FrozenSet[Coord]:
        return self.player.visited_cells()

    def adversaries(self) -> List[AdversarySnapshot]:
        return self.world.snapshot_adversaries()

    def adversary_at(self, x: int, y: int) -> Optional[AdversarySnapshot]:
        adversary = self.world.adversary_at(x, y)
        return adversary.snapshot() if adversary else None

    def is_booster_at(self, x: int, y: int) -> bool:
        return self.world.is_booster_at(x, y)

    def is_destination(self, x: int, y: int) -> bool:
        return self.world.is_destination(x, y)
