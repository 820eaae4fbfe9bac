"""A fixed-size text screen showing both sides of a battle."""

from __future__ import annotations

import sys

WIDTH = 166
HEIGHT = 30
BOX_WIDTH = 40
BOX_HEIGHT = 5
HP_BAR_WIDTH = 20


def _truncated_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class BattleScreen:
    """A grid of characters with framed status boxes for each side."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        self.width = width
        self.height = height
        self._cells: list[list[str]] = []
        self.clear()

    @property
    def lines(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self.lines)

    def clear(self) -> None:
        """Blank every cell."""
        self._cells = [[" "] * self.width for _ in range(self.height)]

    def _check_inside(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the {self.width}x{self.height} screen")

    def _write_text(self, x: int, y: int, text: str) -> None:
        if text:
            self._check_inside(x, y)
            self._check_inside(x + len(text) - 1, y)
        for offset, char in enumerate(text):
            self._cells[y][x + offset] = char

    def draw_frame(self, x: int, y: int, box_width: int, box_height: int) -> None:
        """Draw a box outline with '+' corners, '-' edges and '|' sides."""
        if box_width < 1 or box_height < 1:
            raise ValueError("a frame needs a positive width and height")
        right = x + box_width - 1
        bottom = y + box_height - 1
        self._check_inside(x, y)
        self._check_inside(right, bottom)
        for column in range(x, right + 1):
            self._cells[y][column] = "-"
            self._cells[bottom][column] = "-"
        for row in range(y, bottom + 1):
            self._cells[row][x] = "|"
            self._cells[row][right] = "|"
        for column, row in ((x, y), (right, y), (x, bottom), (right, bottom)):
            self._cells[row][column] = "+"

    def draw_monster_box(
        self,
        x: int,
        y: int,
        player_name: str,
        monster_name: str,
        current_hp: int,
        max_hp: int,
    ) -> None:
        """Draw a framed box with the player, monster and an HP bar."""
        self.draw_frame(x, y, BOX_WIDTH, BOX_HEIGHT)
        filled = _truncated_div(current_hp * HP_BAR_WIDTH, max_hp)
        bar = "".join("#" if i < filled else "-" for i in range(HP_BAR_WIDTH))
        self._write_text(x + 1, y + 1, f" Player: {player_name}")
        self._write_text(x + 1, y + 2, f" Monster: {monster_name}")
        self._write_text(x + 1, y + 3, f" HP: [{bar}] {current_hp}/{max_hp}")

    def render(self) -> str:
        """Write the screen to standard output and return the text written."""
        text = str(self)
        sys.stdout.write(text)
        sys.stdout.flush()
        return text

    def update(
        self,
        bot_player: str,
        bot_monster: str,
        bot_hp: int,
        bot_max_hp: int,
        player_name: str,
        player_monster: str,
        player_hp: int,
        player_max_hp: int,
    ) -> None:
        """Redraw both boxes, the opponent top left and the player bottom right, and print."""
        self.clear()
        self.draw_monster_box(1, 1, bot_player, bot_monster, bot_hp, bot_max_hp)
        self.draw_monster_box(
            self.width - BOX_WIDTH - 1,
            self.height - BOX_HEIGHT - 1,
            player_name,
            player_monster,
            player_hp,
            player_max_hp,
        )
        self.render()