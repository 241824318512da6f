#!/usr/bin/env python3
"""
JSON utilities for the guessing game.

Thin wrappers around the json module that log failures before re-raising,
so callers can decide how a bad file is reported to the player.
"""

import json
import os
from typing import Any

from numguess.utils.logging_config import get_logger

# Get the module logger
logger = get_logger("SYSTEM")


def to_json(obj: Any, pretty: bool = False) -> str:
    """Convert an object to a JSON string."""
    indent = 4 if pretty else None
    try:
        return json.dumps(obj, indent=indent)
    except (TypeError, ValueError) as e:
        logger.error(f"Error serializing to JSON: {e}")
        raise


def from_json(json_str: str) -> Any:
    """Convert a JSON string back to Python objects."""
    try:
        return json.loads(json_str)
    except (ValueError, RecursionError) as e:
        logger.error(f"Error deserializing from JSON: {e}")
        raise


def save_json(obj: Any, file_path: str, pretty: bool = True) -> None:
    """Save an object to a JSON file, creating the parent directory if needed."""
    try:
        os.makedirs(os.path.dirname(file_path) or ".", exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            json.dump(obj, f, indent=4 if pretty else None)
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Error saving JSON to {file_path}: {e}")
        raise


def load_json(file_path: str) -> Any:
    """Load an object from a JSON file."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading JSON from {file_path}: {e}")
        raise
