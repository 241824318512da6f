#!/usr/bin/env python3
import os

import pytest

from numguess.base.game_manager import GameManager


class FixedRandom:
    """RandomSource that always returns the same value and records its calls."""

    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return self.value


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def save_path(tmp_path):
    return os.path.join(str(tmp_path), "saves", "savegame.json")


@pytest.fixture
def manager(save_path):
    # Target is always 7 within the default 1..10 range
    return GameManager(save_path=save_path, rng=FixedRandom(7))
