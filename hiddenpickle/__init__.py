"""Intro splash and main menu for the Hidden Pickle game, drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["common", "geometry", "menu", "app"]