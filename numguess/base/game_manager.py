#!/usr/bin/env python3
"""
Game manager for the number game.

This module provides the GameManager class, which owns the game state and
the active guessing session, and mediates between the command processor,
the session and the save file store.
"""

import random
from typing import Optional

from numguess.base.commands import (
    CommandProcessor, CommandResult, ErrorKind,
    MSG_CORRECT, MSG_CORRUPTED_SAVE, MSG_LOAD_FAILED, MSG_LOADED, MSG_NO_SAVE,
    MSG_NOT_PLAYING, MSG_NOTHING_TO_SAVE, MSG_SAVE_FAILED, MSG_SAVED,
    MSG_TOO_HIGH, MSG_TOO_LOW,
)
from numguess.base.config import DEFAULT_CONFIGS, GameConfig
from numguess.base.state import GameState, NumberGuessingSession, RandomSource
from numguess.utils.logging_config import get_logger
from numguess.utils.save_manager import (
    FileSaveStore, PersistenceStore, SaveDataInvalidError, SaveFileCorruptedError,
    SaveFileError, decode_session, encode_session,
)

# Get the module logger
logger = get_logger("GAME")

DEFAULT_MIN_NUMBER = DEFAULT_CONFIGS["game"]["min_number"]
DEFAULT_MAX_NUMBER = DEFAULT_CONFIGS["game"]["max_number"]
DEFAULT_SAVE_PATH = DEFAULT_CONFIGS["system"]["save_path"]


class GameManager:
    """
    Owner of the game state and the active session.

    The manager starts in MAIN_MENU with no session. While the state is
    PLAYING a valid session is always present. Every public operation
    returns a CommandResult instead of raising, so a host can display the
    message whatever happened.
    """

    def __init__(self,
                 min_number: int = DEFAULT_MIN_NUMBER,
                 max_number: int = DEFAULT_MAX_NUMBER,
                 save_path: str = DEFAULT_SAVE_PATH,
                 store: Optional[PersistenceStore] = None,
                 rng: Optional[RandomSource] = None):
        """
        Initialize the game manager.

        Args:
            min_number: Lower bound for new sessions.
            max_number: Upper bound for new sessions.
            save_path: Where save/load read and write the session.
            store: Persistence store; defaults to the local filesystem.
            rng: Random source for new targets; defaults to a fresh random.Random.

        Raises:
            ValueError: If min_number is not below max_number.
        """
        if min_number >= max_number:
            raise ValueError(f"min_number ({min_number}) must be less than max_number ({max_number})")

        self._min_number = min_number
        self._max_number = max_number
        self._save_path = save_path
        self._store: PersistenceStore = store if store is not None else FileSaveStore()
        self._rng: RandomSource = rng if rng is not None else random.Random()

        self._state = GameState.MAIN_MENU
        self._session: Optional[NumberGuessingSession] = None
        self._command_processor = CommandProcessor()

    @classmethod
    def from_config(cls, config: GameConfig,
                    store: Optional[PersistenceStore] = None,
                    rng: Optional[RandomSource] = None) -> 'GameManager':
        """
        Build a manager from configuration.

        Invalid bounds in the configuration are logged and replaced with the
        defaults rather than stopping the game.
        """
        min_number = config.get("game.min_number", DEFAULT_MIN_NUMBER)
        max_number = config.get("game.max_number", DEFAULT_MAX_NUMBER)
        is_valid, errors = config.validate()
        if not is_valid:
            logger.warning(f"Invalid configuration ({'; '.join(errors)}). Using {DEFAULT_MIN_NUMBER}..{DEFAULT_MAX_NUMBER}.")
            min_number, max_number = DEFAULT_MIN_NUMBER, DEFAULT_MAX_NUMBER

        save_path = config.get("system.save_path") or DEFAULT_SAVE_PATH
        return cls(min_number, max_number, save_path, store=store, rng=rng)

    @property
    def current_state(self) -> GameState:
        """Get the current game state."""
        return self._state

    @property
    def session(self) -> Optional[NumberGuessingSession]:
        """Get the active session, if any."""
        return self._session

    @property
    def save_path(self) -> str:
        return self._save_path

    @property
    def min_number(self) -> int:
        return self._min_number

    @property
    def max_number(self) -> int:
        return self._max_number

    def start_new_game(self) -> NumberGuessingSession:
        """Replace any session with a fresh one and move to PLAYING."""
        self._session = NumberGuessingSession.create(self._min_number, self._max_number, self._rng)
        self._state = GameState.PLAYING
        logger.info(f"New game started ({self._min_number}..{self._max_number})")
        return self._session

    def end_game(self) -> None:
        """Move to GAME_OVER. The session is kept so it can still be saved."""
        self._state = GameState.GAME_OVER
        logger.info("Game over")

    def handle_guess(self, guess: int) -> CommandResult:
        """
        Check a guess against the active session.

        Outside PLAYING nothing changes and the "start first" message is
        returned. A correct guess ends the game and reveals the target.
        """
        if self._state != GameState.PLAYING or self._session is None:
            return CommandResult.failure(MSG_NOT_PLAYING)

        outcome = self._session.check_guess(guess)
        if outcome == 0:
            target = self._session.target_number
            self.end_game()
            return CommandResult.success(MSG_CORRECT.format(target=target), data={"outcome": 0, "target": target})
        if outcome < 0:
            return CommandResult.success(MSG_TOO_LOW, data={"outcome": -1})
        return CommandResult.success(MSG_TOO_HIGH, data={"outcome": 1})

    def save_game(self) -> CommandResult:
        """Write the active session to the save path."""
        if self._session is None:
            return CommandResult.failure(MSG_NOTHING_TO_SAVE)

        try:
            self._store.write_blob(self._save_path, encode_session(self._session))
        except (SaveFileError, OSError) as e:
            logger.error(f"Error saving game to {self._save_path}: {e}")
            return CommandResult.error(MSG_SAVE_FAILED, ErrorKind.PERSISTENCE)

        logger.info(f"Game saved to {self._save_path}")
        return CommandResult.success(MSG_SAVED)

    def load_game(self) -> CommandResult:
        """
        Replace the active session with the one at the save path.

        On any failure (no file, unreadable file, bad content) the current
        state and session are left exactly as they were.
        """
        try:
            text = self._store.read_blob(self._save_path)
        except (SaveFileError, OSError) as e:
            logger.error(f"Error reading save file {self._save_path}: {e}")
            return CommandResult.error(MSG_LOAD_FAILED, ErrorKind.PERSISTENCE)

        if text is None:
            return CommandResult.failure(MSG_NO_SAVE, ErrorKind.PERSISTENCE)

        try:
            loaded = decode_session(text)
        except SaveDataInvalidError as e:
            logger.warning(f"Rejected save file {self._save_path}: {e}")
            return CommandResult.failure(MSG_CORRUPTED_SAVE, ErrorKind.VALIDATION)
        except SaveFileCorruptedError as e:
            logger.warning(f"Unreadable save file {self._save_path}: {e}")
            return CommandResult.error(MSG_CORRUPTED_SAVE, ErrorKind.PERSISTENCE)

        self._session = loaded
        self._state = GameState.PLAYING
        logger.info(f"Game loaded from {self._save_path} ({loaded.min_number}..{loaded.max_number})")
        return CommandResult.success(
            MSG_LOADED.format(min=loaded.min_number, max=loaded.max_number),
            data={"min": loaded.min_number, "max": loaded.max_number},
        )

    def process_command(self, command_text: str) -> CommandResult:
        """Run one line of player input through the command processor."""
        return self._command_processor.process_command(self, command_text)

    def handle(self, text: str) -> str:
        """Process a line of input and return the reply to display."""
        return self.process_command(text).message
