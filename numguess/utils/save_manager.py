#!/usr/bin/env python3
"""
Save file management for the guessing game.

This module owns the on-disk side of save/load: a small persistence store
that reads and writes a whole-file text blob, the save file exceptions, and
the encode/decode step between a NumberGuessingSession and its JSON form.
The GameManager talks to it but never touches files itself.
"""

import os
from typing import Any, Dict, Optional, Protocol

from jsonschema import Draft202012Validator

from numguess.base.state.session import NumberGuessingSession
from numguess.utils.json_utils import from_json, to_json
from numguess.utils.logging_config import get_logger

logger = get_logger("SAVE")

# Shape of a save file: exactly the three bounds/target integers
SAVE_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {
        "min": {"type": "integer", "exclusiveMinimum": 0},
        "max": {"type": "integer", "exclusiveMinimum": 0},
        "target": {"type": "integer"},
    },
    "required": ["min", "max", "target"],
    "additionalProperties": False,
}

_SAVE_VALIDATOR = Draft202012Validator(SAVE_SCHEMA)


class SaveFileError(Exception):
    """Base exception for save file operations."""
    pass


class SaveFileCorruptedError(SaveFileError):
    """Exception raised when a save file is corrupted or invalid."""
    pass


class SaveDataInvalidError(SaveFileCorruptedError):
    """Exception raised when a save file parses but its values are not a valid session."""
    pass


class PersistenceStore(Protocol):
    """Whole-blob storage used by the GameManager for save/load."""

    def write_blob(self, path: str, data: str) -> None:
        ...

    def read_blob(self, path: str) -> Optional[str]:
        ...


class FileSaveStore:
    """
    Persistence store backed by the local filesystem.

    Writes go to a temporary file first and are then moved over the target,
    so a failed write never leaves a half-written save behind.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write_blob(self, path: str, data: str) -> None:
        """
        Overwrite the file at path with data.

        Raises:
            SaveFileError: If the file cannot be written.
        """
        tmp_path = path + ".tmp"
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            with open(tmp_path, "w", encoding=self.encoding) as f:
                f.write(data)
            os.replace(tmp_path, path)
            logger.debug(f"Save written to {path}")
        except OSError as e:
            logger.error(f"Failed to write save file {path}: {e}", exc_info=True)
            if os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    logger.warning(f"Could not remove temporary save file {tmp_path}")
            raise SaveFileError(f"Could not write {path}") from e

    def read_blob(self, path: str) -> Optional[str]:
        """
        Read the whole file at path.

        Returns:
            The file contents, or None if there is no file at path.

        Raises:
            SaveFileError: If the file exists but cannot be read.
        """
        if not os.path.exists(path):
            logger.info(f"No save file at {path}")
            return None

        try:
            with open(path, "r", encoding=self.encoding) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Failed to read save file {path}: {e}", exc_info=True)
            raise SaveFileError(f"Could not read {path}") from e


def encode_session(session: NumberGuessingSession) -> str:
    """Serialize a session to the save file JSON text."""
    return to_json(session.to_dict(), pretty=True)


def validate_save_data(data: Any) -> None:
    """
    Check decoded save data before it is turned into a session.

    The schema covers the field types and the positive bounds; the range
    relationship between the three values is checked here as well.

    Raises:
        SaveDataInvalidError: If the data does not describe a valid session.
    """
    errors = sorted(_SAVE_VALIDATOR.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        details = "; ".join(f"{'/'.join(map(str, e.path)) or '<root>'}: {e.message}" for e in errors)
        raise SaveDataInvalidError(f"Save data failed schema validation: {details}")

    if data["min"] >= data["max"]:
        raise SaveDataInvalidError(f"Save range is empty: min={data['min']} max={data['max']}")

    if not data["min"] <= data["target"] <= data["max"]:
        raise SaveDataInvalidError(
            f"Save target {data['target']} outside range {data['min']}..{data['max']}"
        )


def decode_session(text: str) -> NumberGuessingSession:
    """
    Parse save file text into a session.

    Raises:
        SaveFileCorruptedError: If the text is not valid JSON or fails validation.
    """
    try:
        data = from_json(text)
    except (ValueError, RecursionError) as e:
        # Also covers oversized integers and runaway nesting
        raise SaveFileCorruptedError("Save file is not valid JSON") from e

    validate_save_data(data)
    return NumberGuessingSession.from_dict(data)
