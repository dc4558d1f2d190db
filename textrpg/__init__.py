"""A turn-based text role-playing game for the terminal: items, the character, monsters, battles, the shop and the menus."""

__version__ = "0.1.0"
__all__ = ["character", "game", "gamemanager", "items", "monsters"]