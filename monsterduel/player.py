"""Players, their teams, and the attack and switch actions."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from monsterduel.console import Console
from monsterduel.models import Monster, Move

SUPER_EFFECTIVE = 1.5
NOT_VERY_EFFECTIVE = 0.5
NEUTRAL = 1.0

# attack type -> (types it is strong against, types it is weak against)
_EFFECTIVENESS: dict[str, tuple[frozenset[str], frozenset[str]]] = {
    "Fire": (frozenset({"Grass"}), frozenset({"Water", "Rock"})),
    "Water": (frozenset({"Fire", "Rock"}), frozenset({"Grass", "Electric"})),
    "Grass": (frozenset({"Water", "Rock"}), frozenset({"Fire"})),
    "Electric": (frozenset({"Water"}), frozenset({"Grass", "Rock"})),
    "Rock": (frozenset({"Fire", "Electric"}), frozenset({"Water", "Grass"})),
    "Psychic": (frozenset({"Electric", "Rock"}), frozenset({"Psychic"})),
}


def type_effectiveness(attack_type: str, target_type: str) -> float:
    """Damage multiplier of an attack type against a target type."""
    strong, weak = _EFFECTIVENESS.get(attack_type, (frozenset(), frozenset()))
    if target_type in strong:
        return SUPER_EFFECTIVE
    if target_type in weak:
        return NOT_VERY_EFFECTIVE
    return NEUTRAL


@dataclass
class Player:
    """A named player with a team of monsters, one of them in play."""

    name: str
    team: list[Monster] = field(default_factory=list)
    current: int = 0

    def active_monster(self) -> Monster:
        return self.team[self.current]

    def available_moves(self, dice: int) -> list[Move]:
        """Moves of the active monster whose cost the dice roll covers."""
        return [move for move in self.active_monster().moves if move.cost <= dice]

    def choose_attack(
        self,
        dice: int,
        opponent: Player,
        console: Console,
        rng: random.Random,
    ) -> int | None:
        """Let the player pick a move and hit the opponent's active monster.

        Returns the damage dealt, or None if no attack was made.
        """
        attacker = self.active_monster()
        console.write(f"{attacker.name} choose to Attack!\n")
        console.write(f"your point is {dice} Here're move(s) you can use\n")

        moves = self.available_moves(dice)
        for number, move in enumerate(moves, start=1):
            console.write(f"{number}. {move.name}type : {move.type}damage : {move.damage}\n")
        if not moves:
            console.write(" There's no move(s) that can be use. Passing the turn")
            return None

        try:
            choice = console.read_int("\nEnter the number of the move you want to use: ")
        except ValueError:
            return None
        if not 1 <= choice <= len(moves):
            return None

        move = moves[choice - 1]
        console.write(f"{self.name}'s {attacker.name} use {move.name}!\n")

        target = opponent.active_monster()
        multiplier = type_effectiveness(move.type, target.type)
        damage = int(move.damage * multiplier)
        if multiplier > NEUTRAL:
            console.write("It's super effective!\n")
        elif multiplier < NEUTRAL:
            console.write("It's not very effective...\n")

        if rng.randrange(10) == 0:
            damage *= 2
        console.write("Critical Hit! \n")

        target.take_damage(damage)
        if not target.is_alive():
            console.write(f"{target.name} fainted!\n")
            if any(monster.is_alive() for monster in opponent.team):
                opponent.switch_monster(console)
        return damage

    def switch_monster(self, console: Console) -> None:
        """Ask until the player picks a monster that has not fainted, and bring it in."""
        console.clear()
        console.write("Choose a monster to switch to: \n")
        for number, monster in enumerate(self.team, start=1):
            fainted = "" if monster.is_alive() else " - Fainted "
            console.write(f"{number}. {monster.name} type : {monster.hp}{fainted}\n")

        while True:
            try:
                choice = console.read_int(
                    "Enter the number of the monster you want to switch to: "
                )
            except ValueError:
                choice = 0
            if not 1 <= choice <= len(self.team):
                console.write("Invalid input. Try again.\n")
                continue
            picked = self.team[choice - 1]
            if not picked.is_alive():
                console.write(f"{picked.name} has fainted! Choose another.\n")
                continue
            break

        self.current = choice - 1
        console.write(f"Switched to {self.active_monster().name}!\n")