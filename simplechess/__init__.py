"""A small two-player chess game for the terminal."""

__version__ = "0.1.0"