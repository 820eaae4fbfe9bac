"""The two-player game: team selection, turns and the win check."""

from __future__ import annotations

import random
import sys

from monsterduel.console import Console
from monsterduel.models import Monster
from monsterduel.player import Player
from monsterduel.roster import all_monsters

TEAM_SIZE = 3
CHOSEN_MARK = "_Choosen_"


class GameOver(Exception):
    """Raised when one side has no monster left standing."""

    def __init__(self, winner: str) -> None:
        super().__init__(f"{winner} wins!")
        self.winner = winner


class Game:
    """Two players taking turns until one team is wiped out."""

    def __init__(
        self,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.console = console if console is not None else Console()
        self.rng = rng if rng is not None else random.Random()
        self.player1 = Player("Player1")
        self.player2 = Player("Player2")
        self.current: Player | None = None

    def roll_dice(self) -> int:
        """Return a dice roll from 1 to 6."""
        return self.rng.randint(1, 6)

    def toss_coin(self) -> bool:
        """Return True or False with equal chance."""
        return self.rng.randrange(2) == 0

    def choose_team(self, label: str) -> list[Monster]:
        """Ask until TEAM_SIZE different monsters have been picked and return them."""
        console = self.console
        candidates = all_monsters()
        entries = [[monster.name, monster.type] for monster in candidates]
        team: list[Monster] = []

        while len(team) < TEAM_SIZE:
            console.write(f"Choose {TEAM_SIZE - len(team)} monsters for your team:\n")
            for number, (name, kind) in enumerate(entries, start=1):
                console.write(f"{number}. {name} ({kind})\n")
            try:
                choice = console.read_int(
                    "Enter the number of the monster you want to have in your team: "
                )
            except ValueError:
                choice = 0
            if 1 <= choice <= len(entries):
                entry = entries[choice - 1]
                if entry[0] == CHOSEN_MARK:
                    console.write("This monster is choosen.")
                else:
                    team.append(candidates[choice - 1])
                    entry[0] = CHOSEN_MARK
            console.clear()

        names = "".join(f"{monster.name} " for monster in team)
        console.write(f"{label} choosen : {names}\n")
        return team

    def start(self) -> None:
        """Let both players pick their teams and decide who goes first."""
        self.console.write("Game started!\n")
        self.console.clear()
        first_team = self.choose_team("Player 1")
        second_team = self.choose_team("Player 2")
        self.player1 = Player("Player 1", first_team, 0)
        self.player2 = Player("Player 2", second_team, 0)
        self.current = self.player1 if self.toss_coin() else self.player2
        self.console.write(f"{self.current.name} will start first!\n")

    def opponent(self) -> Player:
        """The player whose turn it is not."""
        return self.player2 if self.current is self.player1 else self.player1

    def _require_started(self) -> Player:
        if self.current is None:
            raise RuntimeError("the game has not been started")
        return self.current

    def turn_switch(self) -> None:
        """Play one turn for the current player, then hand the turn over."""
        current = self._require_started()
        console = self.console
        console.clear()
        opponent = self.opponent()
        mine = current.active_monster()
        theirs = opponent.active_monster()

        console.write(f"{current.name} and {mine.name}'s Turn!\n")
        console.write("\n--- Status ---\n")
        console.write(f"{current.name}: {mine.name} ({mine.type}) HP: {mine.hp}\n")
        console.write(f"{opponent.name}: {theirs.name} ({theirs.type}) HP: {theirs.hp}\n")
        console.write("-----------------\n\n")

        console.write("Choose 1 action:\n1. Attack\n2. Switch\n")
        action = console.read_token()
        if action in ("1", "Attack", "attack"):
            current.choose_attack(self.roll_dice(), opponent, console, self.rng)
        elif action in ("2", "Switch", "switch"):
            console.write(f"{current.name} choose to Switch!\n")
            current.switch_monster(console)

        self.current = opponent
        console.clear()

    def check_win(self) -> None:
        """Raise GameOver if either team has no monster left alive."""
        player1_alive = any(monster.is_alive() for monster in self.player1.team)
        player2_alive = any(monster.is_alive() for monster in self.player2.team)
        if not player1_alive:
            winner = self.player2.name
        elif not player2_alive:
            winner = self.player1.name
        else:
            return
        self.console.write(f"{winner} wins!\n")
        raise GameOver(winner)

    def run(self) -> str:
        """Play a whole game and return the winner's name."""
        self.start()
        try:
            while True:
                self.turn_switch()
                self.check_win()
        except GameOver as over:
            return over.winner


def main(argv: list[str] | None = None) -> int:
    """Play one game on the terminal."""
    game = Game()
    try:
        game.run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())