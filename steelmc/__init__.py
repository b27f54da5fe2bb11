"""Building blocks for a block-game server: vectors, identifiers, chat text, chunk sections and login helpers."""

__version__ = "0.1.0"