"""Tiling window layouts with configurable gaps, and colour themes."""

__version__ = "0.1.0"
__all__ = ["gaps", "layouts", "model", "themes"]