"""Dice system type definitions.

Immutable dataclasses for dice expressions and check outcomes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xander.dice.rolls import RollSet


class AdvantageType(str, Enum):
    """Type of advantage for a roll."""

    NORMAL = "normal"
    ADVANTAGE = "advantage"
    DISADVANTAGE = "disadvantage"


@dataclass(frozen=True)
class DiceExpression:
    """A dice expression like 2d6+3 or 2d20kh1.

    Attributes:
        num_dice: Number of dice to roll.
        die_size: Size of each die (e.g., 6 for d6, 20 for d20).
        modifier: Flat modifier to add to the total.
        keep: Keep only the highest (ADVANTAGE) or lowest (DISADVANTAGE) die.
    """

    num_dice: int
    die_size: int
    modifier: int = 0
    keep: AdvantageType = AdvantageType.NORMAL

    def __str__(self) -> str:
        text = f"{self.num_dice}d{self.die_size}"
        if self.keep == AdvantageType.ADVANTAGE:
            text += "kh1"
        elif self.keep == AdvantageType.DISADVANTAGE:
            text += "kl1"
        if self.modifier:
            text += f"{self.modifier:+d}"
        return text


@dataclass(frozen=True)
class CheckResult:
    """Result of comparing a check or saving throw against a DC.

    Attributes:
        rolls: Evaluated copy of the roll set (dropped dice hidden).
        total: Final value of the roll set.
        dc: Difficulty class that was checked against.
        success: Whether the total met the DC.
        margin: How much the total exceeded or fell short of the DC.
        natural: The kept d20 face, or None if no d20 was visible.
    """

    rolls: RollSet
    total: int
    dc: int
    success: bool
    margin: int
    natural: int | None = None

    @property
    def is_natural_twenty(self) -> bool:
        """Check if the kept d20 showed a 20."""
        return self.natural == 20

    @property
    def is_natural_one(self) -> bool:
        """Check if the kept d20 showed a 1."""
        return self.natural == 1
