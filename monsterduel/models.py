"""Moves and monsters."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Move:
    """An attack with an element type, a dice cost and base damage."""

    name: str
    type: str
    cost: int
    damage: int

    def use(self, attacker: str, target: str) -> str:
        """Announce the move being used and return the announcement."""
        message = f"{attacker} uses {self.name} on {target}!\n"
        print(message, end="")
        return message


@dataclass
class Monster:
    """A fighting monster with hit points and a set of moves."""

    name: str
    type: str
    hp: int
    moves: tuple[Move, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        self.moves = tuple(self.moves)

    def take_damage(self, amount: int) -> None:
        """Subtract damage from HP, never going below zero."""
        self.hp = max(self.hp - amount, 0)

    def is_alive(self) -> bool:
        return self.hp > 0

    def copy(self) -> Monster:
        """Return an independent monster with the same state."""
        return dataclasses.replace(self)