#!/usr/bin/env python3
"""
Terminal host adapter.

Reads raw lines from an input stream, forwards each one to a CommandHandler
and writes the reply to an output stream. The game core never sees the
streams; anything that can turn text into a reply can be plugged in.
"""

import sys
from typing import Dict, Iterable, List, Optional, Protocol, TextIO

from numguess.base.commands import MSG_UNEXPECTED
from numguess.utils.logging_config import get_logger

logger = get_logger("TERMINAL")


class CommandHandler(Protocol):
    """Anything that answers a line of player input with a reply."""

    def handle(self, text: str) -> str:
        ...


class TerminalAdapter:
    """
    Line-based terminal host for a CommandHandler.

    Every submitted line counts as an Enter key press. Key presses are
    logged only; they never reach the game.
    """

    def __init__(self,
                 handler: CommandHandler,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 prompt: str = "> ",
                 record_transcript: bool = False):
        self._handler = handler
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._prompt = prompt
        self._record_transcript = record_transcript
        self._transcript: List[Dict[str, str]] = []

    @property
    def transcript(self) -> List[Dict[str, str]]:
        """Recorded commands and replies, oldest first."""
        return list(self._transcript)

    def on_key_pressed(self, key: str) -> None:
        if key == "enter":
            logger.debug("Enter key pressed.")

    def write(self, text: str) -> None:
        """Display a line of text."""
        self._stdout.write(text + "\n")
        self._stdout.flush()

    def submit(self, line: str) -> str:
        """
        Forward one line to the handler and display the reply.

        The exchange is kept in the transcript only when recording is on.

        Returns:
            The reply that was displayed.
        """
        self.on_key_pressed("enter")
        try:
            reply = self._handler.handle(line)
        except Exception as e:
            logger.error(f"Unhandled error processing {line!r}: {e}", exc_info=True)
            reply = MSG_UNEXPECTED

        if self._record_transcript:
            self._transcript.append({"command": line, "reply": reply})
        self.write(reply)
        return reply

    def run_script(self, commands: Iterable[str]) -> List[Dict[str, str]]:
        """Submit each command in order, echoing it first. Scripted runs are always recorded."""
        self._record_transcript = True
        for command in commands:
            self.write(f"{self._prompt}{command}")
            self.submit(command)
        return self.transcript

    def run(self) -> int:
        """
        Read and answer lines until end of input or Ctrl+C.

        Returns:
            Process exit code.
        """
        logger.info("Terminal session started")
        while True:
            self._stdout.write(self._prompt)
            self._stdout.flush()
            try:
                line = self._stdin.readline()
            except KeyboardInterrupt:
                self.write("")
                break
            if not line:
                # EOF
                self.write("")
                break
            self.submit(line.rstrip("\r\n"))

        logger.info("Terminal session ended")
        return 0
