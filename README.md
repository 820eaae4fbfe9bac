# monsterduel

A turn-based monster battle for two players who share one terminal.

Each player drafts three monsters from a roster of six: Flamo (Fire),
Aquaril (Water), Terraplant (Grass), Zappy (Electric), Rocky (Rock) and
Mysty (Psychic). Every monster starts with 100 HP and has four moves. A
move's cost runs from 2 to 5 and its damage from 15 to 30.

## Playing

Install the package, then start a game:

```
pip install .
monsterduel
```

Player 1 drafts first, then Player 2. Each picks monsters by their number
in the list. A monster that is already picked is shown as `_Choosen_`, and
it cannot be picked again by the same player. Both players draft from the
full roster, so the two teams can share monsters.

A coin toss decides who moves first. On your turn the game shows the name,
type and HP of both active monsters. You then pick an action by number or
by name:

1. **Attack** (`1`, `Attack` or `attack`): a six-sided die is rolled. Only
   moves whose cost is no higher than the roll can be used, so a roll of 1
   passes the turn. Pick one of the listed moves by its number. Type
   matchups scale the damage by 1.5 or 0.5, and one hit in ten is a
   critical that doubles it. Entering a number that is not on the list
   passes the turn.
2. **Switch** (`2`, `Switch` or `switch`): swap your active monster for any
   team member that has not fainted.

Any other answer passes the turn. When a monster faints and its owner still
has a monster standing, the owner must switch to one that has not fainted.
A player whose whole team has fainted loses, and the game announces the
winner.

The screen is cleared between steps with the system's `clear` command
(`cls` on Windows). If input ends or the game is interrupted, `monsterduel`
stops and exits with status 1.

## Type chart

| Attack   | Strong against (×1.5) | Weak against (×0.5) |
|----------|-----------------------|---------------------|
| Fire     | Grass                 | Water, Rock         |
| Water    | Fire, Rock            | Grass, Electric     |
| Grass    | Water, Rock           | Fire                |
| Electric | Water                 | Grass, Rock         |
| Rock     | Fire, Electric        | Water, Grass        |
| Psychic  | Electric, Rock        | Psychic             |

Any other pairing deals normal damage (×1.0).

## Using it as a library

- `monsterduel.models`: `Move`, a frozen dataclass with `name`, `type`,
  `cost` and `damage`, and `Monster`, with `hp`, `moves`, `take_damage()`
  (HP never drops below zero), `is_alive()` and `copy()`.
- `monsterduel.roster`: `all_monsters()` returns fresh copies of the six
  monsters in menu order. `find_monster(name)` returns a fresh copy of one
  of them and raises `KeyError` for an unknown name.
- `monsterduel.player`: `type_effectiveness(attack_type, target_type)`, and
  `Player` with `active_monster()`, `available_moves(dice)`,
  `choose_attack(dice, opponent, console, rng)` (returns the damage dealt,
  or `None` when no attack was made) and `switch_monster(console)`.
- `monsterduel.game`: `Game(console=None, rng=None)` with `start()`,
  `turn_switch()`, `check_win()`, `run()` (plays a whole game and returns the
  winner's name), `roll_dice()` and `toss_coin()`. `check_win()` raises
  `GameOver`, whose `winner` attribute holds the winning player's name.
  `main()` is the entry point of the `monsterduel` command.
- `monsterduel.console`: `Console(stdin=None, stdout=None, clearer=clear_console)`
  reads whitespace-separated tokens and writes text. Pass your own streams,
  and `clearer=None`, to drive a game from a script or a test.
  `clear_console()` clears the terminal.
- `monsterduel.display`: `BattleScreen`, a 166×30 character grid. It can
  draw framed boxes with a player name, a monster name and a 20-cell HP bar.
  `update(...)` draws the opponent's box at the top left and the player's box
  at the bottom right, then prints the grid.

For example, a seeded game that reads its moves from a string:

```python
import io
import random

from monsterduel.console import Console
from monsterduel.game import Game

moves = io.StringIO("1 2 3\n4 5 6\n" + "1 1\n" * 200)
game = Game(Console(stdin=moves, stdout=io.StringIO(), clearer=None), random.Random(7))
print(game.run())
```

## What it does not do

- There is no computer opponent. Both sides are played by people at the
  same keyboard.
- `BattleScreen` is not used by the game itself. During play, the status of
  the two monsters is printed as plain lines of text.
- Games cannot be saved or resumed, and no scores are kept.

## Tests

```
pip install ".[test]"
pytest
```