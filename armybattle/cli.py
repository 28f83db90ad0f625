"""Command-line menu that starts battles until the user chooses to leave."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum
from typing import Callable, Optional, Sequence

from .game import Game
from .helper import RandomSource, get_num

Reader = Callable[[str], str]
Writer = Callable[[str], object]


class MenuChoice(Enum):
    """Entries of the main menu, numbered as the user types them."""

    PLAY_GAME = 1
    EXIT = 2


INVALID_SELECTION_MESSAGE = "\n\nInvalid selection.\n\n"


def menu_text() -> str:
    """Return the text of the main menu."""
    return "\n\n1. Play game\n2. Exit Program"


def exit_message() -> str:
    """Return the farewell shown when the program ends."""
    return "\n\nProgram will exit\n"


def play_game(
    input_func: Optional[Reader] = None,
    output: Optional[Writer] = None,
    rng: Optional[RandomSource] = None,
) -> Game:
    """Play one full game and return it once it has been fought."""
    game = Game(rng=rng)
    game.play(input_func, output)
    return game


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="armybattle",
        description="Raise two armies of creatures and let them fight.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the random number generator, for repeatable battles",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Show the menu and act on each selection until the user exits."""
    args = _parse_args(argv)
    rng: RandomSource = random.Random(args.seed)

    try:
        while True:
            _write(menu_text())
            number = get_num("Make your selection: ")
            try:
                selection = MenuChoice(number)
            except ValueError:
                _write(INVALID_SELECTION_MESSAGE)
                continue
            if selection is MenuChoice.PLAY_GAME:
                play_game(None, _write, rng)
            else:
                _write(exit_message())
                return 0
    except (EOFError, KeyboardInterrupt):
        _write("\n")
        return 0


if __name__ == "__main__":
    raise SystemExit(main())