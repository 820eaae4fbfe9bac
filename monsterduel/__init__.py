"""A two-player, turn-based monster battle game for the terminal."""

__version__ = "0.1.0"

__all__ = ["console", "display", "game", "models", "player", "roster"]