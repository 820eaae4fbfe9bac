import io
import random
from unittest import mock

import pytest

from monsterduel.console import Console
from monsterduel.game import CHOSEN_MARK, TEAM_SIZE, Game, GameOver, main
from monsterduel.models import Monster
from monsterduel.player import Player
from monsterduel.roster import find_monster


class FixedRng:
    """Always rolls the highest die and never lands on zero."""

    def randint(self, low, high):
        return high

    def randrange(self, stop):
        return stop - 1


def make_game(text, rng=None):
    out = io.StringIO()
    console = Console(stdin=io.StringIO(text), stdout=out, clearer=None)
    game = Game(console=console, rng=rng if rng is not None else random.Random(1))
    return game, out


def test_roll_dice_stays_in_range():
    game, _ = make_game("")
    rolls = {game.roll_dice() for _ in range(500)}
    assert rolls == {1, 2, 3, 4, 5, 6}


def test_toss_coin_gives_both_sides():
    game, _ = make_game("")
    assert {game.toss_coin() for _ in range(200)} == {True, False}


def test_choose_team_picks_in_order():
    game, out = make_game("1\n2\n3\n")
    team = game.choose_team("Player 1")
    assert [m.name for m in team] == ["Flamo", "Aquaril", "Terraplant"]
    assert len(team) == TEAM_SIZE
    assert "Player 1 choosen : Flamo Aquaril Terraplant" in out.getvalue()


def test_choose_team_rejects_repeats_and_bad_numbers():
    game, out = make_game("4\n4\n0\n9\nabc\n5\n6\n")
    team = game.choose_team("Player 2")
    assert [m.name for m in team] == ["Zappy", "Rocky", "Mysty"]
    text = out.getvalue()
    assert "This monster is choosen." in text
    assert f"4. {CHOSEN_MARK} (Electric)" in text


def test_choose_team_returns_independent_monsters():
    game, _ = make_game("1\n2\n3\n")
    team = game.choose_team("Player 1")
    team[0].take_damage(50)
    assert find_monster("Flamo").hp == 100


def test_start_builds_players_and_first_turn():
    game, out = make_game("1 2 3\n4 5 6\n", rng=FixedRng())
    game.start()
    assert game.player1.name == "Player 1"
    assert game.player2.name == "Player 2"
    assert [m.name for m in game.player2.team] == ["Zappy", "Rocky", "Mysty"]
    assert game.current is game.player2
    assert "Player 2 will start first!" in out.getvalue()


def test_opponent_is_the_other_player():
    game, _ = make_game("1 2 3\n4 5 6\n", rng=FixedRng())
    game.start()
    assert game.opponent() is game.player1
    game.current = game.player1
    assert game.opponent() is game.player2


def test_turn_switch_before_start_fails():
    game, _ = make_game("1\n")
    with pytest.raises(RuntimeError):
        game.turn_switch()


def test_turn_switch_attack_damages_and_hands_over():
    game, _ = make_game("1 4\n", rng=FixedRng())
    game.player1 = Player("Player 1", [find_monster("Flamo")])
    game.player2 = Player("Player 2", [find_monster("Terraplant")])
    game.current = game.player1
    game.turn_switch()
    assert game.player2.team[0].hp < 100
    assert game.player1.team[0].hp == 100
    assert game.current is game.player2


def test_turn_switch_switch_action():
    game, out = make_game("switch 2\n", rng=FixedRng())
    game.player1 = Player("Player 1", [find_monster("Flamo"), find_monster("Rocky")])
    game.player2 = Player("Player 2", [find_monster("Aquaril")])
    game.current = game.player1
    game.turn_switch()
    assert game.player1.active_monster().name == "Rocky"
    assert "Player 1 choose to Switch!" in out.getvalue()
    assert game.current is game.player2


def test_turn_switch_unknown_action_only_passes():
    game, _ = make_game("x\n", rng=FixedRng())
    game.player1 = Player("Player 1", [find_monster("Flamo")])
    game.player2 = Player("Player 2", [find_monster("Aquaril")])
    game.current = game.player2
    game.turn_switch()
    assert game.player1.team[0].hp == 100
    assert game.player2.team[0].hp == 100
    assert game.current is game.player1


def test_check_win_without_loser_does_nothing():
    game, out = make_game("")
    game.player1 = Player("Player 1", [find_monster("Flamo")])
    game.player2 = Player("Player 2", [find_monster("Aquaril")])
    game.check_win()
    assert "wins" not in out.getvalue()


@pytest.mark.parametrize("loser, winner", [(1, "Player 2"), (2, "Player 1")])
def test_check_win_reports_winner(loser, winner):
    game, out = make_game("")
    game.player1 = Player("Player 1", [find_monster("Flamo")])
    game.player2 = Player("Player 2", [find_monster("Aquaril")])
    beaten = game.player1 if loser == 1 else game.player2
    beaten.team[0].take_damage(1000)
    with pytest.raises(GameOver) as caught:
        game.check_win()
    assert caught.value.winner == winner
    assert f"{winner} wins!" in out.getvalue()


def test_run_plays_a_whole_game():
    turns = []
    for switch_to in ("2", "3", None):
        hits = 3 if switch_to else 4
        for hit in range(hits):
            last = hit == hits - 1
            turns.append("1 4" + (f" {switch_to}" if last and switch_to else ""))
            if not (last and switch_to is None):
                turns.append("x")
    script = "1 5 6\n2 1 3\n" + "\n".join(turns) + "\n"
    game, out = make_game(script, rng=FixedRng())
    assert game.run() == "Player 2"
    assert all(not m.is_alive() for m in game.player1.team)
    assert all(m.hp == 100 for m in game.player2.team)
    assert "Player 2 wins!" in out.getvalue()


def test_run_stops_on_exhausted_input():
    game, _ = make_game("1 2\n")
    with pytest.raises(EOFError):
        game.run()


def test_game_over_carries_message():
    over = GameOver("Player 1")
    assert str(over) == "Player 1 wins!"


def test_main_returns_failure_when_input_ends():
    fake_out = io.StringIO()
    with mock.patch("sys.stdin", io.StringIO("")), mock.patch(
        "sys.stdout", fake_out
    ), mock.patch("subprocess.run"):
        code = main([])
    assert code == 1
    assert "Game started!" in fake_out.getvalue()


def test_monster_fixture_is_fresh_each_time():
    first = find_monster("Mysty")
    first.take_damage(10)
    assert isinstance(first, Monster)
    assert find_monster("Mysty").hp == first.hp + 10