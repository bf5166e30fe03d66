"""A tile-based puzzle game: map validation, game rules, a pygame window and a command."""

__version__ = "0.1.0"
__all__ = ["validation", "game", "render", "cli"]