"""Console input helpers and small utilities shared by the game."""

from __future__ import annotations

import random
import re
from typing import Callable, Optional, Protocol

BUFFER_SIZE = 1000

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class RandomSource(Protocol):
    """The part of :class:`random.Random` the game relies on."""

    def randint(self, a: int, b: int) -> int: ...

    def randrange(self, stop: int) -> int: ...


def set_upper(text: str) -> str:
    """Return *text* in upper case."""
    return text.upper()


def get_string(prompt: str, input_func: Optional[Callable[[str], str]] = None) -> str:
    """Prompt for a line of text and return it unchanged."""
    reader = input_func if input_func is not None else input
    return reader(f"\n\n{prompt}")


def get_num(
    prompt: str,
    input_func: Optional[Callable[[str], str]] = None,
    output: Optional[Callable[[str], object]] = None,
) -> int:
    """Prompt until the reply starts with an integer and return that integer."""
    reader = input_func if input_func is not None else input
    writer = output if output is not None else print
    reply = reader(f"\n\n{prompt}")
    while True:
        match = _LEADING_INT.match(reply)
        if match:
            return int(match.group(1))
        writer("\nInvalid input.")
        reply = reader(prompt)


def give_ran_val(min_val: int, max_val: int, rng: Optional[RandomSource] = None) -> int:
    """Return a random integer between *min_val* and *max_val* inclusive."""
    if min_val > max_val:
        raise ValueError(f"empty range: {min_val} > {max_val}")
    source = rng if rng is not None else random
    return source.randint(min_val, max_val)