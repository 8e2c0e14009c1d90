"""A falling-block puzzle game with a ghost piece, line clears and scoring."""

__version__ = "1.0.0"

__all__ = ["__version__"]