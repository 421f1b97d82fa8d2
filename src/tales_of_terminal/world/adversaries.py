from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

Coord = Tuple[int, int]


class AdversaryKind(str, Enum):
    GOBLIN = "Goblin"
    ORC = "Orc"
    DRAGON = "Dragon"


@dataclass(frozen=True)
class Archetype:
    power: int
    damage: int
    drop_item: str
    description: str


ARCHETYPES: Dict[AdversaryKind, Archetype] = {
    AdversaryKind.GOBLIN: Archetype(35, 10, "Goblin Tooth", "Sneaky and weak creature."),
    AdversaryKind.ORC: Archetype(55, 20, "Orc Axe", "Strong and tough enemy."),
    AdversaryKind.DRAGON: Archetype(80, 40, "Dragon Scale", "Huge and powerful mythical beast."),
}

# Upper bounds (exclusive) of a [0, 100) roll for each kind, in roll order.
SPAWN_THRESHOLDS: Tuple[Tuple[int, AdversaryKind], ...] = (
    (60, AdversaryKind.GOBLIN),
    (90, AdversaryKind.ORC),
    (100, AdversaryKind.DRAGON),
)


def kind_for_roll(roll: int) -> AdversaryKind:
    """Map a uniform roll in [0, 100) to an archetype (60% / 30% / 10%)."""
    if not 0 <= roll < 100:
        raise ValueError(f"Spawn roll must be in [0, 100), got {roll}")
    for bound, kind in SPAWN_THRESHOLDS:
        if roll < bound:
            return kind
    raise AssertionError("unreachable")  # pragma: no cover


@dataclass(frozen=True)
class AdversarySnapshot:
    kind: AdversaryKind
    position: Coord
    power: int
    damage: int

    @property
    def name(self) -> str:
        return self.kind.value


@dataclass(eq=False)
class Adversary:
    """A live hostile actor on the grid.

    Equality is identity: two adversaries that happen to share a cell are still
    distinct, and removal from the world always targets the exact record.
    """

    kind: AdversaryKind
    x: int
    y: int

    @property
    def pos(self) -> Coord:
        return (self.x, self.y)

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def power(self) -> int:
        return ARCHETYPES[self.kind].power

    @property
    def damage(self) -> int:
        return ARCHETYPES[self.kind].damage

    @property
    def drop_item(self) -> str:
        return ARCHETYPES[self.kind].drop_item

    @property
    def description(self) -> str:
        return ARCHETYPES[self.kind].description

    def snapshot(self) -> AdversarySnapshot:
        return AdversarySnapshot(kind=self.kind, position=self.pos, power=self.power, damage=self.damage)

    def __repr__(self) -> str:
        return f"Adversary({self.name}@{self.x},{self.y})"


__all__ = [
    "ARCHETYPES",
    "Adversary",
    "AdversaryKind",
    "AdversarySnapshot",
    "Archetype",
    "Coord",
    "SPAWN_THRESHOLDS",
    "kind_for_roll",
]
