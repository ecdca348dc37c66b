"""A pygame window that clears to a cycling Okhsv rainbow colour, with a file logger that stows its log as xz."""

__version__ = "0.1.0"
__all__ = ["color", "game", "graphics", "logger"]