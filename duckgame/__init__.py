"""Helper library for a tile-based puzzle game, found in the ``duckgame.ft`` sub-package."""

__version__ = "0.1.0"