import random

import pytest

from armybattle.army import InvalidArmyError
from armybattle.creature import GAP_WIDTH, MAX_HEALTH, MIN_HEALTH
from armybattle.game import Game


def _answers(*replies):
    it = iter(replies)
    return lambda prompt: next(it)


def _collector():
    chunks = []
    return chunks, chunks.append


def _loaded(player="lima", opponent="bravo", size=5, seed=1):
    game = Game(rng=random.Random(seed))
    game.setup(player, opponent, size)
    return game


def test_default_game_has_default_armies():
    game = Game(rng=random.Random(0))
    assert game.size == 5
    assert game.player.name == "ARMY"
    assert len(game.opponent) == 5


def test_setup_loads_named_creatures():
    game = _loaded(size=7)
    assert game.size == 7
    assert game.player.name == "LIMA"
    assert game.opponent.name == "BRAVO"
    assert [c.name for c in game.player][0] == "CREATURE_1"
    assert [c.name for c in game.opponent][-1] == "CREATURE_7"
    assert all(MIN_HEALTH <= c.health <= MAX_HEALTH for c in game.player)


def test_setup_rejects_small_size_and_keeps_state():
    game = _loaded()
    before = [c.name for c in game.player]
    with pytest.raises(InvalidArmyError):
        game.setup("lima", "bravo", 4)
    assert game.size == 5
    assert [c.name for c in game.player] == before


def test_setup_rejects_bad_name():
    game = _loaded()
    with pytest.raises(InvalidArmyError):
        game.setup("x1", "bravo", 6)
    assert game.player.name == "LIMA"


def test_filler_is_dash_line():
    line = Game(rng=random.Random(0)).filler()
    assert line.startswith("\n") and line.endswith("\n")
    assert set(line.strip()) == {"-"}
    assert len(line.strip()) == 104


def test_armies_table_layout():
    game = _loaded()
    lines = game.armies_table().split("\n")
    assert lines[1].startswith("LIMA")
    assert lines[1].rstrip().endswith("BRAVO")
    assert lines[3] == game.player.header() + " " * GAP_WIDTH + game.opponent.header()
    assert lines[5] == game.player.single(0) + " " * GAP_WIDTH + game.opponent.single(0)


def test_round_header_matches_sample():
    header = Game(rng=random.Random(0)).round_header(1)
    assert header.startswith("\nRound 2\n\n")
    assert (
        "ARMY            ATTACKER        DAMAGE          "
        "ARMY            DEFENDER        HEALTH\n\n"
    ) in header


def test_move_line_matches_sample():
    game = _loaded("lima", "bravo")
    game.player[0].update(health=151)
    line = game.move_line(game.opponent, game.player, 0, 195)
    assert line == (
        "BRAVO           CREATURE_1         195          "
        "LIMA            CREATURE_1         151\n"
    )


def test_fight_round_ends_with_one_defeated():
    game = _loaded(seed=3)
    text = game.fight_round(2)
    p, o = game.player[2], game.opponent[2]
    assert (p.health == 0) != (o.health == 0)
    if p.health == 0:
        expected = f"LIMA'S {p.name} has been defeated by BRAVO'S {o.name}"
    else:
        expected = f"BRAVO'S {o.name} has been defeated by LIMA'S {p.name}"
    assert expected in text
    assert text.endswith("\n\nCurrent stats:\n" + game.armies_table())


def test_fight_round_only_touches_its_position():
    game = _loaded(seed=5)
    before = [c.health for c in game.player]
    game.fight_round(0)
    assert [c.health for c in game.player][1:] == before[1:]


def test_winner_sample_text():
    game = _loaded("lima", "bravo")
    for creature, health in zip(game.player, [250, 250, 250, 117, 0]):
        creature.update(health=health)
    for creature, health in zip(game.opponent, [250, 147, 0, 0, 0]):
        creature.update(health=health)
    text = game.winner()
    assert "\nLIMA has won with a net health of 867 to BRAVO'S net health of 397\n" in text
    assert text.startswith(game.filler()) and text.endswith(game.filler())


def test_winner_opponent_wins():
    game = _loaded("lima", "bravo")
    for creature in game.player:
        creature.update(health=0)
    text = game.winner()
    total = sum(c.health for c in game.opponent)
    assert f"\nBRAVO has won with a net health of {total} to LIMA'S net health of 0\n" in text


def test_winner_tie():
    game = Game(rng=random.Random(0))
    total = sum(c.health for c in game.player)
    assert f"Both ARMY and ARMY have the same net health of {total}\n" in game.winner()


def test_copy_is_independent():
    game = _loaded()
    clone = game.copy()
    clone.player.apply_damage(0, 1000)
    assert clone.player[0].health == 0
    assert game.player[0].health > 0
    assert clone.size == game.size


def test_play_full_game():
    game = Game(rng=random.Random(11))
    chunks, output = _collector()
    game.play(_answers("lima", "bravo", "12"), output)
    text = "".join(chunks)
    assert "lima vs bravo\nArmy size: 12\n" in text
    assert "\nOriginal stats:\n" in text
    assert "\nRound 12\n" in text
    assert "\nRound 13\n" not in text
    assert text.endswith("\nGame has ended\n\n")
    assert all(
        game.player[i].health == 0 or game.opponent[i].health == 0 for i in range(12)
    )


def test_play_is_deterministic_with_seed():
    outputs = []
    healths = []
    for _ in range(2):
        chunks, output = _collector()
        game = Game(rng=random.Random(42))
        game.play(_answers("alpha", "omega", "6"), output)
        outputs.append("".join(chunks))
        healths.append(
            ([c.health for c in game.player], [c.health for c in game.opponent])
        )
    assert "alpha vs omega\nArmy size: 6\n" in outputs[0]
    assert "\nRound 6\n" in outputs[0]
    assert "\nRound 7\n" not in outputs[0]
    assert outputs[0] == outputs[1]
    assert healths[0] == healths[1]
    assert len(healths[0][0]) == 6


def test_input_retries_on_bad_number():
    game = Game(rng=random.Random(2))
    chunks, output = _collector()
    assert game.input_army_values(_answers("lima", "bravo", "abc", "6"), output)
    assert game.size == 6
    assert "\nInvalid input." in chunks


def test_input_reports_setup_error():
    game = Game(rng=random.Random(2))
    chunks, output = _collector()
    assert not game.input_army_values(_answers("lima", "bravo", "3"), output)
    assert "An error occurred while setting the game.\nPlease try again later" in chunks
    assert game.size == 5
    assert game.player.name == "ARMY"