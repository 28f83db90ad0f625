"""Creatures that fight in an army, and the rules for their stats and damage."""

from __future__ import annotations

import random
from enum import Enum
from typing import Optional

from .helper import RandomSource, give_ran_val, set_upper

NAME_WIDTH = 14
TYPE_WIDTH = 15
HEALTH_WIDTH = 8
STRENGTH_WIDTH = 10
DAMAGE_WIDTH = 8
ARMY_WIDTH = 16
GAP_WIDTH = 10
CREATURE_WIDTH = TYPE_WIDTH + NAME_WIDTH + HEALTH_WIDTH + STRENGTH_WIDTH

MAX_HEALTH = 250
MIN_HEALTH = 120
DEFAULT_HEALTH = 150
MAX_STRENGTH = 250
MIN_STRENGTH = 120
DEFAULT_STRENGTH = 150

MIN_CREATURE_NAME = 3
DEFAULT_CREATURE_NAME = "CREATURE"
DEFAULT_TYPE = "CREATURE"

CYBER_BONUS = 30
CYBER_CHANCE = 10
CEFFYL_BONUS = 25
CEFFYL_CHANCE = 15
NUGGLE_MULTIPLIER = 2
NUGGLE_CHANCE = 15


class CreatureType(Enum):
    """The kinds of creature, in the order used for random selection."""

    BAHAMUT = "BAHAMUT"
    CYBER_BAHAMUT = "CYBER BAHAMUT"
    CEFFYL = "CEFFYL"
    NUGGLE = "NUGGLE"


class InvalidCreatureError(ValueError):
    """Raised when a creature is given a bad name, health or strength."""


def name_is_valid(name: str) -> bool:
    """A name needs at least three letters, or must be the default name."""
    letters = sum(1 for ch in name if ch.isascii() and ch.isalpha())
    return letters >= MIN_CREATURE_NAME or name == DEFAULT_CREATURE_NAME


def health_is_valid(health: int) -> bool:
    return 0 <= health <= MAX_HEALTH


def strength_is_valid(strength: int) -> bool:
    return MIN_STRENGTH <= strength <= MAX_STRENGTH


def creature_type_from_name(name: str) -> CreatureType:
    """Return the creature type whose display name is *name*."""
    try:
        return CreatureType(name)
    except ValueError:
        raise ValueError(f"unknown creature type: {name!r}") from None


class Creature:
    """A named fighter with health and strength."""

    kind: Optional[CreatureType] = None

    def __init__(
        self,
        name: str = DEFAULT_CREATURE_NAME,
        health: int = DEFAULT_HEALTH,
        strength: int = DEFAULT_STRENGTH,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._rng: RandomSource = rng if rng is not None else random
        self._name = DEFAULT_CREATURE_NAME
        self._health = DEFAULT_HEALTH
        self._strength = DEFAULT_STRENGTH
        self.update(name, health, strength)

    @property
    def name(self) -> str:
        return self._name

    @property
    def health(self) -> int:
        return self._health

    @property
    def strength(self) -> int:
        return self._strength

    @property
    def type_name(self) -> str:
        return self.kind.value if self.kind is not None else DEFAULT_TYPE

    def update(
        self,
        name: Optional[str] = None,
        health: Optional[int] = None,
        strength: Optional[int] = None,
    ) -> None:
        """Change any of the stats; nothing changes if one of them is invalid."""
        new_name = self._name if name is None else name
        new_health = self._health if health is None else health
        new_strength = self._strength if strength is None else strength
        if not name_is_valid(new_name):
            raise InvalidCreatureError(f"invalid name: {new_name!r}")
        if not health_is_valid(new_health):
            raise InvalidCreatureError(f"invalid health: {new_health}")
        if not strength_is_valid(new_strength):
            raise InvalidCreatureError(f"invalid strength: {new_strength}")
        self._name = set_upper(new_name)
        self._health = new_health
        self._strength = new_strength

    def damage(self) -> int:
        """Roll a hit between 1 and the creature's strength."""
        return self._rng.randint(1, self._strength)

    def title(self) -> str:
        return f"{self._name} the {self.type_name}"

    def copy(self) -> "Creature":
        return type(self)(self._name, self._health, self._strength, self._rng)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Creature):
            return NotImplemented
        return (type(self), self._name, self._health, self._strength) == (
            type(other),
            other._name,
            other._health,
            other._strength,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._name!r}, "
            f"health={self._health}, strength={self._strength})"
        )

    def __str__(self) -> str:
        return (
            f"{self.type_name:<{TYPE_WIDTH}}{self._name:<{NAME_WIDTH}}"
            f"{self._health:>{HEALTH_WIDTH}}{self._strength:>{STRENGTH_WIDTH}}"
        )


class Bahamut(Creature):
    """Strikes twice per attack."""

    kind = CreatureType.BAHAMUT

    def damage(self) -> int:
        return super().damage() + super().damage()


class CyberBahamut(Bahamut):
    """A Bahamut with a small chance of an extra bonus."""

    kind = CreatureType.CYBER_BAHAMUT

    def damage(self) -> int:
        bonus = CYBER_BONUS if self._rng.randrange(100) < CYBER_CHANCE else 0
        return super().damage() + bonus


class Ceffyl(Creature):
    """Deals a plain hit; its bonus roll never adds to the result."""

    kind = CreatureType.CEFFYL

    def damage(self) -> int:
        return super().damage()


class Nuggle(Creature):
    """Has a chance to double its hit."""

    kind = CreatureType.NUGGLE

    def damage(self) -> int:
        hit = super().damage()
        if self._rng.randrange(100) < NUGGLE_CHANCE:
            hit *= NUGGLE_MULTIPLIER
        return hit


_CLASSES = {
    CreatureType.BAHAMUT: Bahamut,
    CreatureType.CYBER_BAHAMUT: CyberBahamut,
    CreatureType.CEFFYL: Ceffyl,
    CreatureType.NUGGLE: Nuggle,
}


def make_creature(
    kind: Optional[CreatureType] = None, rng: Optional[RandomSource] = None
) -> Creature:
    """Build a creature of *kind* with default stats; pick a kind at random if none."""
    if kind is None:
        kinds = list(CreatureType)
        kind = kinds[give_ran_val(0, len(kinds) - 1, rng)]
    return _CLASSES[kind](rng=rng)