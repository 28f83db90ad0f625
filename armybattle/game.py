"""A battle between two armies, fought creature against creature."""

from __future__ import annotations

import random
import sys
from typing import Callable, Optional

from .army import (
    DEFAULT_ARMY_NAME,
    DEFAULT_ARMY_SIZE,
    MIN_ARMY_SIZE,
    Army,
    InvalidArmyError,
    army_size_is_valid,
)
from .creature import (
    ARMY_WIDTH,
    CREATURE_WIDTH,
    DAMAGE_WIDTH,
    GAP_WIDTH,
    HEALTH_WIDTH,
    NAME_WIDTH,
)
from .helper import RandomSource, get_num, get_string

GAME_OVER_MESSAGE = "\nGame has ended\n\n"
SETUP_ERROR_MESSAGE = (
    "An error occurred while setting the game.\nPlease try again later"
)

Writer = Callable[[str], object]
Reader = Callable[[str], str]


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


class Game:
    """Two armies of equal size that fight one round per position."""

    def __init__(
        self,
        player_name: str = DEFAULT_ARMY_NAME,
        opponent_name: str = DEFAULT_ARMY_NAME,
        size: int = DEFAULT_ARMY_SIZE,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self._rng: RandomSource = rng if rng is not None else random
        self._player = Army(player_name, size, self._rng)
        self._opponent = Army(opponent_name, size, self._rng)
        self._size = size

    @property
    def player(self) -> Army:
        return self._player

    @property
    def opponent(self) -> Army:
        return self._opponent

    @property
    def size(self) -> int:
        return self._size

    def copy(self) -> "Game":
        """Return an independent game with copies of both armies."""
        clone = Game.__new__(Game)
        clone._rng = self._rng
        clone._player = self._player.copy()
        clone._opponent = self._opponent.copy()
        clone._size = self._size
        return clone

    def setup(self, player_name: str, opponent_name: str, size: int) -> None:
        """Raise two new armies of *size* loaded creatures; keep the old ones on error."""
        if not army_size_is_valid(size):
            raise InvalidArmyError(
                f"army size must be at least {MIN_ARMY_SIZE}, got {size}"
            )
        player = Army(player_name, size, self._rng)
        opponent = Army(opponent_name, size, self._rng)
        player.load_creatures()
        opponent.load_creatures()
        self._player = player
        self._opponent = opponent
        self._size = size

    def play(
        self, input_func: Optional[Reader] = None, output: Optional[Writer] = None
    ) -> None:
        """Ask for the armies, fight every round and report the winner."""
        writer = output if output is not None else _write
        self.input_army_values(input_func, writer)
        writer(
            self.filler()
            + "\nOriginal stats:\n"
            + self.armies_table()
            + self.filler()
        )
        for position in range(self._size):
            writer(
                self.filler()
                + self.round_header(position)
                + self.fight_round(position)
                + self.filler()
            )
        writer(self.winner())
        writer(GAME_OVER_MESSAGE)

    def input_army_values(
        self, input_func: Optional[Reader] = None, output: Optional[Writer] = None
    ) -> bool:
        """Read both army names and the size, then set the game up.

        Returns whether the new armies were raised.
        """
        writer = output if output is not None else _write
        player_name = get_string("Name your army: ", input_func)
        opponent_name = get_string("Name your opponent's army: ", input_func)
        size = get_num("Enter the size of the armies: ", input_func, writer)
        writer(f"{player_name} vs {opponent_name}\nArmy size: {size}\n")
        try:
            self.setup(player_name, opponent_name, size)
        except InvalidArmyError:
            writer(SETUP_ERROR_MESSAGE)
            return False
        return True

    def filler(self) -> str:
        total_width = CREATURE_WIDTH * 2 + GAP_WIDTH
        return "\n" + "-" * total_width + "\n"

    def armies_table(self) -> str:
        gap = " " * GAP_WIDTH
        lines = [
            "\n",
            f"{self._player.name:<{CREATURE_WIDTH}}{gap}"
            f"{self._opponent.name:<{CREATURE_WIDTH}}\n\n",
            f"{self._player.header()}{gap}{self._opponent.header()}\n\n",
        ]
        lines.extend(
            f"{self._player.single(i)}{gap}{self._opponent.single(i)}\n"
            for i in range(self._size)
        )
        return "".join(lines)

    def winner(self) -> str:
        player_total = sum(c.health for c in self._player)
        opponent_total = sum(c.health for c in self._opponent)
        player_name = self._player.name
        opponent_name = self._opponent.name

        if player_total > opponent_total:
            verdict = (
                f"\n{player_name} has won with a net health of {player_total} "
                f"to {opponent_name}'S net health of {opponent_total}\n"
            )
        elif player_total < opponent_total:
            verdict = (
                f"\n{opponent_name} has won with a net health of {opponent_total} "
                f"to {player_name}'S net health of {player_total}\n"
            )
        else:
            verdict = (
                f"Both {player_name} and {opponent_name} have the same net health "
                f"of {player_total}\n"
            )
        return self.filler() + verdict + self.filler()

    def round_header(self, position: int) -> str:
        side_attack = (
            f"{'ARMY':<{ARMY_WIDTH}}{'ATTACKER':<{NAME_WIDTH}}"
            f"{'DAMAGE':>{DAMAGE_WIDTH}}"
        )
        side_defend = (
            f"{'ARMY':<{ARMY_WIDTH}}{'DEFENDER':<{NAME_WIDTH}}"
            f"{'HEALTH':>{HEALTH_WIDTH}}"
        )
        return (
            f"\nRound {position + 1}\n\n"
            f"{side_attack}{' ' * GAP_WIDTH}{side_defend}\n\n"
        )

    def fight_round(self, position: int) -> str:
        """Let the two creatures at *position* trade blows until one falls."""
        player, opponent = self._player, self._opponent
        player_turn = self._rng.randrange(2) != 0
        moves = []

        while player[position].health > 0 and opponent[position].health > 0:
            if player_turn:
                damage = player.damage(position)
                moves.append(self.move_line(player, opponent, position, damage))
                opponent.apply_damage(position, damage)
            else:
                damage = opponent.damage(position)
                moves.append(self.move_line(opponent, player, position, damage))
                player.apply_damage(position, damage)
            player_turn = not player_turn

        if player_turn:
            loser, victor = player, opponent
        else:
            loser, victor = opponent, player
        moves.append(
            f"\n{loser.name}'S {loser[position].name} has been defeated by "
            f"{victor.name}'S {victor[position].name}\n"
        )
        moves.append("\n\nCurrent stats:\n" + self.armies_table())
        return "".join(moves)

    def move_line(
        self, attacker: Army, defender: Army, position: int, damage: int
    ) -> str:
        return (
            attacker.attack_line(position, damage)
            + " " * GAP_WIDTH
            + defender.defend_line(position)
            + "\n"
        )

    def __repr__(self) -> str:
        return (
            f"Game(player={self._player.name!r}, "
            f"opponent={self._opponent.name!r}, size={self._size})"
        )


__all__ = ["GAME_OVER_MESSAGE", "SETUP_ERROR_MESSAGE", "Game"]