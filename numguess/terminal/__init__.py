"""Terminal host for the number game: line-based adapter and CLI entry point."""

from numguess.terminal.adapter import CommandHandler, TerminalAdapter

__all__ = [
    'CommandHandler',
    'TerminalAdapter',
]
