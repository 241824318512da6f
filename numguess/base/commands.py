#!/usr/bin/env python3
"""
Command processing for the number game.

This module provides the CommandProcessor class, which turns a raw line of
player input into one of the registered game commands, and the
CommandResult dataclass every command returns.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional

from numguess.base.state import GameState
from numguess.utils.logging_config import get_logger

if TYPE_CHECKING:
    from numguess.base.game_manager import GameManager

# Get the module logger
logger = get_logger("COMMANDS")

# Player-facing messages
MSG_EMPTY_COMMAND = "Please type a command. Type 'help'."
MSG_UNKNOWN_COMMAND = "Unknown command. Type 'help'."
MSG_NOT_PLAYING = "You must start a game first. Type 'start'."
MSG_GUESS_USAGE = "Usage: guess <number>"
MSG_INVALID_NUMBER = "Please enter a valid number."
MSG_TOO_LOW = "Too low! Try again."
MSG_TOO_HIGH = "Too high! Try again."
MSG_CORRECT = "Correct! The number was {target}. Game over."
MSG_STARTED = "Game started! Guess a number between {min} and {max}."
MSG_RESTARTED = "Game restarted! Guess a number between {min} and {max}."
MSG_QUIT = "Game ended. Type 'start' to play again."
MSG_NOTHING_TO_SAVE = "No game to save. Start a game first."
MSG_SAVED = "Game saved successfully."
MSG_SAVE_FAILED = "An error occurred while saving the game."
MSG_NO_SAVE = "No saved game found."
MSG_CORRUPTED_SAVE = "Save file is corrupted or invalid."
MSG_LOAD_FAILED = "An error occurred while loading the game."
MSG_LOADED = "Game loaded! Guess a number between {min} and {max}."
MSG_UNEXPECTED = "An unexpected error occurred. Try again."

# Optional sign followed by ASCII digits
_INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


class CommandStatus(Enum):
    """Status of a command execution."""
    SUCCESS = auto()
    FAILURE = auto()
    ERROR = auto()
    INVALID = auto()
    HELP = auto()


class ErrorKind(Enum):
    """Why a command did not succeed."""
    USER_INPUT = auto()  # Empty command, bad number, wrong state
    PERSISTENCE = auto()  # Missing save, I/O failure, unreadable content
    VALIDATION = auto()  # Loaded values failed the sanity check
    UNEXPECTED = auto()  # Anything else


@dataclass
class CommandResult:
    """
    Result of a command execution.

    Carries the message shown to the player, the status, and for
    unsuccessful commands the kind of error that occurred.
    """
    status: CommandStatus
    message: str
    error_kind: Optional[ErrorKind] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def success(cls, message: str, data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """Create a success result."""
        return cls(CommandStatus.SUCCESS, message, None, data)

    @classmethod
    def failure(cls, message: str, error_kind: ErrorKind = ErrorKind.USER_INPUT,
                data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """Create a failure result (the command was understood but could not be done)."""
        return cls(CommandStatus.FAILURE, message, error_kind, data)

    @classmethod
    def error(cls, message: str, error_kind: ErrorKind = ErrorKind.UNEXPECTED,
              data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """Create an error result."""
        return cls(CommandStatus.ERROR, message, error_kind, data)

    @classmethod
    def invalid(cls, message: str, data: Optional[Dict[str, Any]] = None) -> 'CommandResult':
        """Create an invalid command result."""
        return cls(CommandStatus.INVALID, message, ErrorKind.USER_INPUT, data)

    @classmethod
    def help(cls, message: str) -> 'CommandResult':
        """Create a help result."""
        return cls(CommandStatus.HELP, message)

    @property
    def is_success(self) -> bool:
        """Check if the result is a success."""
        return self.status in (CommandStatus.SUCCESS, CommandStatus.HELP)

    @property
    def is_failure(self) -> bool:
        """Check if the result is a failure."""
        return self.status in (CommandStatus.FAILURE, CommandStatus.ERROR, CommandStatus.INVALID)


def parse_int(token: str) -> Optional[int]:
    """
    Parse a guess argument.

    Returns:
        The integer, or None if the token is not a signed 32-bit decimal integer.
    """
    if not _INTEGER_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


class CommandProcessor:
    """
    Processor for parsing and executing commands.

    Commands are registered by name together with their help syntax. Input
    is trimmed, lower-cased and split on single spaces; the first token
    selects the command and the rest are passed to its handler as arguments.
    """

    # Handler signature: (manager, args) -> result
    HandlerFunc = Callable[['GameManager', List[str]], CommandResult]

    @dataclass
    class CommandHelp:
        """Help information for a command."""
        command: str
        syntax: str
        description: str

    def __init__(self):
        """Initialize the command processor with the game commands."""
        # Command handlers by name, in registration order
        self._handlers: Dict[str, CommandProcessor.HandlerFunc] = {}

        # Help information by command name
        self._help_data: Dict[str, CommandProcessor.CommandHelp] = {}

        self._register_game_commands()

    def _register_game_commands(self):
        """Register the built-in game commands."""
        self.register_command(
            name="start",
            handler=self._start_command,
            description="Start a new game.",
        )
        self.register_command(
            name="guess",
            handler=self._guess_command,
            syntax="guess <number>",
            description="Guess the secret number.",
        )
        self.register_command(
            name="restart",
            handler=self._restart_command,
            description="Throw away the current game and start a new one.",
        )
        self.register_command(
            name="quit",
            handler=self._quit_command,
            description="End the current game.",
        )
        self.register_command(
            name="save",
            handler=self._save_command,
            description="Save the current game.",
        )
        self.register_command(
            name="load",
            handler=self._load_command,
            description="Load the saved game.",
        )
        self.register_command(
            name="help",
            handler=self._help_command,
            description="List the available commands.",
        )

    def _start_command(self, manager: 'GameManager', args: List[str]) -> CommandResult:
        session = manager.start_new_game()
        return CommandResult.success(
            MSG_STARTED.format(min=session.min_number, max=session.max_number),
            data={"min": session.min_number, "max": session.max_number},
        )

    def _restart_command(self, manager: 'GameManager', args: List[str]) -> CommandResult:
        session = manager.start_new_game()
        return CommandResult.success(
            MSG_RESTARTED.format(min=session.min_number, max=session.max_number),
            data={"min": session.min_number, "max": session.max_number},
        )

    def _guess_command(self, manager: 'GameManager', args: List[str]) -> CommandResult:
        """
        Make a guess.

        The state is checked before the argument, so a bare "guess" outside
        a game still reports that no game is running.
        """
        if manager.current_state != GameState.PLAYING:
            return CommandResult.failure(MSG_NOT_PLAYING)

        if not args:
            return CommandResult.invalid(MSG_GUESS_USAGE)

        guess = parse_int(args[0])
        if guess is None:
            return CommandResult.invalid(MSG_INVALID_NUMBER)

        return manager.handle_guess(guess)

    def _quit_command(self, manager: 'GameManager', args: List[str]) -> CommandResult:
        manager.end_game()
        return CommandResult.success(MSG_QUIT)

    def _save_command(self, manager: 'GameManager', args: List[str]) -> CommandResult:
        return manager.save_game()

    def _load_command(self, manager: 'GameManager', args: List[str]) -> CommandResult:
        return manager.load_game()

    def _help_command(self, manager: 'GameManager', args: List[str]) -> CommandResult:
        return CommandResult.help(self.help_text())

    def register_command(self,
                         name: str,
                         handler: HandlerFunc,
                         syntax: str = "",
                         description: str = "") -> None:
        """
        Register a command handler.

        Args:
            name: The name of the command.
            handler: The function to handle the command.
            syntax: The command syntax shown by help. Defaults to the name.
            description: A description of the command.
        """
        self._handlers[name.lower()] = handler
        self._help_data[name.lower()] = CommandProcessor.CommandHelp(
            command=name.lower(),
            syntax=syntax or name.lower(),
            description=description or "No description available.",
        )
        logger.debug(f"Registered command: {name}")

    def get_command_handler(self, command: str) -> Optional[HandlerFunc]:
        """Get the handler for a command, or None if not found."""
        return self._handlers.get(command.lower())

    def get_all_commands(self) -> List[str]:
        """Get the registered command names in registration order."""
        return list(self._handlers.keys())

    def get_command_help(self, command: str) -> Optional[CommandHelp]:
        """Get help information for a command, or None if not found."""
        return self._help_data.get(command.lower())

    def help_text(self) -> str:
        """The command list shown by "help"; independent of game state."""
        lines = ["Commands:"]
        lines.extend(self._help_data[cmd].syntax for cmd in self._handlers)
        return "\n".join(lines)

    @staticmethod
    def tokenize(command_text: Optional[str]) -> List[str]:
        """Trim, lower-case and split on single spaces."""
        return (command_text or "").strip().lower().split(" ")

    def process_command(self, manager: 'GameManager', command_text: Optional[str]) -> CommandResult:
        """
        Process a command.

        Args:
            manager: The game manager the command acts on.
            command_text: The raw input line.

        Returns:
            The result of executing the command. Exceptions raised by a
            handler are logged and returned as an UNEXPECTED error.
        """
        parts = self.tokenize(command_text)
        if not parts or not parts[0]:
            return CommandResult.invalid(MSG_EMPTY_COMMAND)

        command_name, args = parts[0], parts[1:]

        handler = self.get_command_handler(command_name)
        if handler is None:
            logger.debug(f"Unknown command: {command_name}")
            return CommandResult.invalid(MSG_UNKNOWN_COMMAND)

        try:
            logger.debug(f"Executing command: {command_name} with args: {args}")
            result = handler(manager, args)

            if result.is_success:
                logger.debug(f"Command {command_name} succeeded: {result.message}")
            else:
                logger.debug(f"Command {command_name} failed ({result.error_kind}): {result.message}")

            return result
        except Exception as e:
            logger.error(f"Error executing command {command_name}: {e}", exc_info=True)
            return CommandResult.error(MSG_UNEXPECTED, ErrorKind.UNEXPECTED)
