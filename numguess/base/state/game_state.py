"""
Game state for the number game.
"""

from enum import Enum, auto


class GameState(Enum):
    """Top-level state of the game; governs which commands are valid."""
    MAIN_MENU = auto()  # Nothing started yet
    PLAYING = auto()  # A session is active and accepting guesses
    GAME_OVER = auto()  # Round won or quit
