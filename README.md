# armybattle

A console battle simulation. You name two armies and pick their size. Each
army is filled with creatures of random kinds: Bahamut, Cyber Bahamut, Ceffyl
and Nuggle. Each creature gets random health and strength. The creatures then
fight one on one, position by position, until one of each pair falls. When
every round is over, the army with the greater total health left wins.

## Installing

```
pip install .
```

## Playing

```
armybattle
```

To get the same battle every time, give a seed for the random number
generator:

```
armybattle --seed 42
```

A menu appears:

```
1. Play game
2. Exit Program
```

Choose `1`. Enter a name for your army, a name for your opponent's army, then
the army size. Names are shown in upper case. An army name needs at least three
letters, and an army holds at least five creatures. If the names or the size
are rejected, the program says so and the battle is fought between two default
armies named `ARMY`, each with five creatures of default stats.

The program prints the starting stats, a move-by-move log of every round with
the running stats, and then the winner. A reply that does not start with a
whole number is asked for again; a number that is not on the menu is reported
as an invalid selection. Choose `2` to leave; end of input or Ctrl-C also
leaves.

## Creatures

| Type          | Damage per attack                                          |
|---------------|------------------------------------------------------------|
| Bahamut       | two random hits, each between 1 and its strength           |
| Cyber Bahamut | as Bahamut, plus a 10% chance of 30 bonus damage           |
| Ceffyl        | one random hit between 1 and its strength                  |
| Nuggle        | one random hit, with a 15% chance of doing double damage   |

Loaded creatures get health and strength between 120 and 250. Health never
drops below zero. A new creature starts with the name `CREATURE`, health 150
and strength 150.

## Using it as a library

The package has these modules:

- `armybattle.creature`: `Creature` and its kinds `Bahamut`, `CyberBahamut`,
  `Ceffyl` and `Nuggle`; `CreatureType`; `make_creature`; the validity checks
  and `InvalidCreatureError`.
- `armybattle.army`: `Army`, a named sequence of creatures that can be
  indexed, iterated, sorted by a `SortKey` and filtered by a health range;
  `InvalidArmyError` is raised for a bad name or size.
- `armybattle.game`: `Game`, which pairs two armies and renders the tables,
  round logs and the verdict as text.
- `armybattle.cli`: the `armybattle` command and its menu.
- `armybattle.helper`: prompting and random helpers.

```python
import random

from armybattle.army import Army, SortKey
from armybattle.game import Game

rng = random.Random(42)

army = Army("lima", 6, rng=rng)
army.load_creatures()
army.sort(SortKey.HEALTH)
print(army)
print(army.filter(150, 200))

game = Game(rng=rng)
game.setup("lima", "bravo", 8)
print(game.armies_table())
for position in range(game.size):
    print(game.fight_round(position))
print(game.winner())
```

`Game.setup` loads both armies with random stats; a `Game` built directly from
its constructor holds creatures with default stats. Pass a seeded
`random.Random` to get the same battle every time.

## Running the tests

```
pip install .[test]
pytest
```