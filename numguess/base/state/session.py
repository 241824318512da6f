"""
Guessing session for the number game.

This module provides the NumberGuessingSession dataclass, which holds the
bounds and the secret target of one round, and the RandomSource protocol
used to pick that target.
"""

from dataclasses import dataclass
from typing import Any, Dict, Protocol


class RandomSource(Protocol):
    """Source of uniform integers, inclusive on both ends (random.Random fits)."""

    def randint(self, a: int, b: int) -> int:
        ...


@dataclass(frozen=True)
class NumberGuessingSession:
    """
    A single guessing round.

    Bounds and target are fixed for the lifetime of the session; a new
    round always means a new session object.
    """
    min_number: int
    max_number: int
    target_number: int

    @classmethod
    def create(cls, min_number: int, max_number: int, rng: RandomSource) -> 'NumberGuessingSession':
        """
        Start a round with a target drawn uniformly from [min_number, max_number].

        Args:
            min_number: Lowest possible target.
            max_number: Highest possible target.
            rng: Random source used to pick the target.

        Raises:
            ValueError: If min_number is not below max_number.
        """
        if min_number >= max_number:
            raise ValueError(f"min_number ({min_number}) must be less than max_number ({max_number})")
        return cls(min_number, max_number, rng.randint(min_number, max_number))

    def check_guess(self, guess: int) -> int:
        """Return 0 for a correct guess, -1 if too low, 1 if too high."""
        if guess == self.target_number:
            return 0
        if guess < self.target_number:
            return -1
        return 1

    def to_dict(self) -> Dict[str, int]:
        """Convert to the save file dictionary."""
        return {
            "min": self.min_number,
            "max": self.max_number,
            "target": self.target_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NumberGuessingSession':
        """Create a session from a save file dictionary."""
        return cls(
            min_number=int(data["min"]),
            max_number=int(data["max"]),
            target_number=int(data["target"]),
        )
