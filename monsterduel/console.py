"""Terminal input and output used by the game."""

from __future__ import annotations

import os
import subprocess
import sys
from collections import deque
from collections.abc import Callable
from typing import TextIO


def clear_console() -> None:
    """Clear the terminal with the platform's clear command."""
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


class Console:
    """Whitespace-token reader and text writer over a pair of streams."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clearer: Callable[[], None] | None = clear_console,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._clearer = clearer
        self._tokens: deque[str] = deque()

    def write(self, text: str) -> None:
        """Write text to the output stream."""
        self._out.write(text)
        self._out.flush()

    def read_token(self, prompt: str = "") -> str:
        """Show the prompt and return the next whitespace-separated token.

        Raises EOFError once the input is exhausted.
        """
        if prompt:
            self.write(prompt)
        while not self._tokens:
            line = self._in.readline()
            if not line:
                raise EOFError("no more input")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def read_int(self, prompt: str = "") -> int:
        """Read the next token as an integer.

        On a token that is not an integer the rest of its line is dropped
        and ValueError is raised.
        """
        token = self.read_token(prompt)
        try:
            return int(token)
        except ValueError:
            self._tokens.clear()
            raise ValueError(f"not a number: {token!r}") from None

    def clear(self) -> None:
        """Clear the screen, if this console has a way to do so."""
        if self._clearer is not None:
            self._clearer()