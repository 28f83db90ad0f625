"""An army: a named, ordered group of randomly chosen creatures."""

from __future__ import annotations

import random
from enum import Enum
from typing import Iterator, List, Optional

from .creature import (
    ARMY_WIDTH,
    DAMAGE_WIDTH,
    DEFAULT_CREATURE_NAME,
    HEALTH_WIDTH,
    MAX_HEALTH,
    MAX_STRENGTH,
    MIN_HEALTH,
    MIN_STRENGTH,
    NAME_WIDTH,
    STRENGTH_WIDTH,
    TYPE_WIDTH,
    Creature,
    make_creature,
)
from .helper import RandomSource, give_ran_val, set_upper

MIN_ARMY_SIZE = 5
MAX_ARMY_SIZE = 30
DEFAULT_ARMY_SIZE = 5
MIN_ARMY_NAME = 3
DEFAULT_ARMY_NAME = "ARMY"


class SortKey(Enum):
    """Fields an army can be sorted by; RETURN leaves the order alone."""

    TYPE = 1
    NAME = 2
    HEALTH = 3
    STRENGTH = 4
    RETURN = 5


class InvalidArmyError(ValueError):
    """Raised when an army is given a bad name or size."""


def army_name_is_valid(name: str) -> bool:
    """A name needs at least three letters, or must be the default name."""
    letters = sum(1 for ch in name if ch.isascii() and ch.isalpha())
    return letters >= MIN_ARMY_NAME or name == DEFAULT_ARMY_NAME


def army_size_is_valid(size: int) -> bool:
    return size >= MIN_ARMY_SIZE


class Army:
    """A named list of creatures of random kinds."""

    def __init__(
        self,
        name: str = DEFAULT_ARMY_NAME,
        size: int = DEFAULT_ARMY_SIZE,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._rng: RandomSource = rng if rng is not None else random
        self._name = DEFAULT_ARMY_NAME
        self._creatures: List[Creature] = []
        self.reset(name, size)

    @property
    def name(self) -> str:
        return self._name

    def reset(self, name: str, size: int) -> None:
        """Replace the army with *size* new creatures of random kinds."""
        if not army_name_is_valid(name):
            raise InvalidArmyError(f"invalid army name: {name!r}")
        if not army_size_is_valid(size):
            raise InvalidArmyError(
                f"army size must be at least {MIN_ARMY_SIZE}, got {size}"
            )
        self._creatures = [make_creature(None, self._rng) for _ in range(size)]
        self._name = set_upper(name)

    def copy(self) -> "Army":
        """Return an independent army with copies of every creature."""
        clone = Army.__new__(Army)
        clone._rng = self._rng
        clone._name = self._name
        clone._creatures = [creature.copy() for creature in self._creatures]
        return clone

    def header(self) -> str:
        return (
            f"{'TYPE':<{TYPE_WIDTH}}{'NAME':<{NAME_WIDTH}}"
            f"{'HEALTH':>{HEALTH_WIDTH}}{'STRENGTH':>{STRENGTH_WIDTH}}"
        )

    def defend_line(self, position: int) -> str:
        creature = self[position]
        return (
            f"{self._name:<{ARMY_WIDTH}}{creature.name:<{NAME_WIDTH}}"
            f"{creature.health:>{HEALTH_WIDTH}}"
        )

    def attack_line(self, position: int, damage: int) -> str:
        creature = self[position]
        return (
            f"{self._name:<{ARMY_WIDTH}}{creature.name:<{NAME_WIDTH}}"
            f"{damage:>{DAMAGE_WIDTH}}"
        )

    def __len__(self) -> int:
        return len(self._creatures)

    def __getitem__(self, position: int) -> Creature:
        if not 0 <= position < len(self._creatures):
            raise IndexError(f"invalid position: {position}")
        return self._creatures[position]

    def __iter__(self) -> Iterator[Creature]:
        return iter(self._creatures)

    def damage(self, position: int) -> int:
        """Roll the damage dealt by the creature at *position*."""
        return self[position].damage()

    def apply_damage(self, position: int, damage: int) -> None:
        """Lower the health of the creature at *position*, never below zero."""
        creature = self[position]
        creature.update(health=max(0, creature.health - damage))

    def single(self, position: int) -> str:
        return str(self[position])

    def load_creatures(self) -> None:
        """Give every creature a numbered name and random stats."""
        for number, creature in enumerate(self._creatures, start=1):
            health = give_ran_val(MIN_HEALTH, MAX_HEALTH, self._rng)
            strength = give_ran_val(MIN_STRENGTH, MAX_STRENGTH, self._rng)
            creature.update(f"creature_{number}", health, strength)

    def sort(self, key: SortKey) -> None:
        """Sort the creatures in ascending order, keeping ties in place."""
        getters = {
            SortKey.TYPE: lambda c: c.type_name,
            SortKey.NAME: lambda c: c.name,
            SortKey.HEALTH: lambda c: c.health,
            SortKey.STRENGTH: lambda c: c.strength,
        }
        getter = getters.get(key)
        if getter is not None:
            self._creatures.sort(key=getter)

    def filter(self, min_health: int, max_health: int) -> List[Creature]:
        """Return the creatures whose health lies in the inclusive range."""
        return [c for c in self._creatures if min_health <= c.health <= max_health]

    def clear(self) -> None:
        self._creatures = []

    def __repr__(self) -> str:
        return f"Army(name={self._name!r}, size={len(self._creatures)})"

    def __str__(self) -> str:
        if not self._creatures:
            return "\nThere are no creatures in this army.\n"
        rows = "".join(f"\n{creature}" for creature in self._creatures)
        return f"\n{self._name}\n{self.header()}\n\n{rows}"


__all__ = [
    "DEFAULT_ARMY_NAME",
    "DEFAULT_ARMY_SIZE",
    "DEFAULT_CREATURE_NAME",
    "MAX_ARMY_SIZE",
    "MIN_ARMY_NAME",
    "MIN_ARMY_SIZE",
    "Army",
    "InvalidArmyError",
    "SortKey",
    "army_name_is_valid",
    "army_size_is_valid",
]