"""
State module for the number game.

This module provides the game state enum and the guessing session.
"""

from numguess.base.state.game_state import GameState
from numguess.base.state.session import NumberGuessingSession, RandomSource

__all__ = [
    'GameState',
    'NumberGuessingSession',
    'RandomSource',
]
