from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import EngineSettings, load_settings
from .core.random import SeededRandom
from .engine import (
    AdversaryStrike,
    BoosterCollected,
    DuelOffered,
    Encounter,
    Moved,
    NothingHere,
    PursuitStep,
    TerminalState,
    TurnEngine,
    TurnEvent,
    TurnResult,
    start_engine,
)
from .exceptions import ConfigError, NameValidationError, WorldConfigError
from .logging_config import configure_logging
from .paths import AppPaths
from .summary import EndReason, ResultLog, ResultRecord

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="tales-of-terminal",
        description="Play a headless Tales of Terminal session and append its result.",
    )
    p.add_argument("--name", default="Wanderer", help="Player handle (2-20 chars)")
    p.add_argument("--seed", type=int, default=None, help="Seed for a reproducible session")
    p.add_argument("--config", type=Path, default=None, help="Path to an engine.yaml settings file")
    p.add_argument("--cols", type=int, default=None, help="Override grid width")
    p.add_argument("--rows", type=int, default=None, help="Override grid height")
    p.add_argument("--max-turns", type=int, default=200, help="Stop with a manual exit after this many turns")
    p.add_argument("--results-file", type=Path, default=None, help="Where to append the result record")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def resolve_settings(args: argparse.Namespace, paths: AppPaths) -> EngineSettings:
    if args.config is not None:
        return load_settings(args.config)
    if paths.user_config_file.exists():
        return load_settings(paths.user_config_file)
    return load_settings()


def describe_event(event: TurnEvent) -> Optional[str]:
    if isinstance(event, Moved):
        bonus = f" (+{event.step_bonus} step bonus)" if event.step_bonus else ""
        return f"You move to {event.destination}.{bonus}"
    if isinstance(event, Encounter):
        name = event.outcome.adversary.name
        if event.won:
            return f"You defeated the {name}! Item: {event.outcome.item_gained}"
        return f"The {name} hit you for {event.outcome.damage_taken} damage!"
    if isinstance(event, AdversaryStrike):
        return f"{event.outcome.adversary.name} attacked you for {event.damage} damage!"
    if isinstance(event, PursuitStep):
        return None
    if isinstance(event, BoosterCollected):
        info = "A nearby enemy was killed by the booster!" if event.slain else "No enemies left to kill."
        return f"Collected booster: {event.item}. {info}"
    if isinstance(event, DuelOffered):
        return f"Enemy found: {event.adversary.name}."
    if isinstance(event, NothingHere):
        return "No enemy or booster here."
    return None


def status_line(engine: TurnEngine) -> str:
    return (
        f"Player: {engine.player.name} | HP: {engine.vitality} | Score: {engine.score} "
        f"| Steps: {engine.steps} | Enemies: {len(engine.world.adversaries)}"
    )


def autopilot_direction(engine: TurnEngine) -> tuple:
    """East until the last column, then south: always one step closer to the destination."""
    x, _ = engine.position
    if x < engine.world.cols - 1:
        return (1, 0)
    return (0, 1)


def play(engine: TurnEngine, max_turns: int) -> EndReason:
    for _ in range(max_turns):
        result: TurnResult = engine.attempt_move(*autopilot_direction(engine))
        if not result.accepted:
            logger.warning("Autopilot move rejected: %s", result.rejection)
            break
        for event in result.events:
            line = describe_event(event)
            if line:
                print(line)
        print(status_line(engine))
        if result.terminal is TerminalState.WON:
            print("You reached the Destination! You win!")
            return EndReason.REACHED_DESTINATION
        if result.terminal is TerminalState.LOST:
            print("You died. Game over.")
            return EndReason.PLAYER_DIED
    return EndReason.MANUAL_EXIT


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(logging.DEBUG if args.debug else logging.WARNING)

    paths = AppPaths()
    try:
        settings = resolve_settings(args, paths)
        engine = start_engine(args.name, args.cols, args.rows, settings=settings, rng=SeededRandom(args.seed))
    except NameValidationError as exc:
        print(f"Invalid name: {exc.reason}", file=sys.stderr)
        return 2
    except (ConfigError, WorldConfigError) as exc:
        print(f"Cannot start session: {exc}", file=sys.stderr)
        return 2

    reason = play(engine, args.max_turns)
    record = ResultRecord.from_engine(engine, reason)
    try:
        out = ResultLog(args.results_file or paths.results_file).append(record)
    except OSError as exc:
        logger.error("Failed to append result: %s", exc)
        print(f"Unable to save result: {exc}", file=sys.stderr)
        return 1
    print(f"Result saved to {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
