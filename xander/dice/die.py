"""Dice.

A die is identified by its side count alone; two D20 instances are
interchangeable and their rolls land in the same group of a RollSet.

Examples:
    >>> D6(2).total()       # Roll two d6 and sum them.
    >>> (D20 + 5).apply()   # Roll one d20 and add 5.
    >>> Die(123).sample()   # A single raw value from a 123-sided die.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from xander.dice.rolls import Roll, RollSet
from xander.exceptions import InvalidDie

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Die:
    """An n-sided die.

    Attributes:
        sides: Number of faces; rolls land uniformly in [1, sides].

    Raises:
        InvalidDie: If sides is not a positive integer.
    """

    sides: int

    def __post_init__(self) -> None:
        if isinstance(self.sides, bool) or not isinstance(self.sides, int) or self.sides < 1:
            raise InvalidDie(self.sides)

    def sample(self) -> int:
        """Draw a single raw value in [1, sides]."""
        return random.randint(1, self.sides)

    def roll(self, times: int = 1) -> RollSet:
        """Roll this die `times` times.

        Args:
            times: How many rolls to make (zero gives an empty set).

        Returns:
            A new RollSet holding the rolls, grouped under this die.
        """
        if times < 0:
            raise ValueError(f"Cannot roll a die {times} times")
        values = [self.sample() for _ in range(times)]
        logger.debug(f"Rolled {times}d{self.sides}: {values}")
        return RollSet().add(self, (Roll(v) for v in values))

    def __call__(self, times: int = 1) -> RollSet:
        return self.roll(times)

    # Arithmetic on a bare die rolls it once first.

    def __add__(self, other: int | Die | RollSet) -> RollSet:
        if isinstance(other, Die):
            return self.roll() + other.roll()
        return self.roll() + other

    def __sub__(self, other: int) -> RollSet:
        return self.roll() - other

    def __mul__(self, other: int) -> RollSet:
        return self.roll() * other

    def __floordiv__(self, other: int) -> RollSet:
        return self.roll() // other

    def __str__(self) -> str:
        return f"d{self.sides}"


D4 = Die(4)
D6 = Die(6)
D8 = Die(8)
D10 = Die(10)
D12 = Die(12)
D20 = Die(20)
D100 = Die(100)

STANDARD_DICE = (D4, D6, D8, D10, D12, D20, D100)
