"""Dice system.

Provides dice, roll sets with modifier chains, notation parsing and
check resolution.

Usage:
    >>> from xander.dice import D20, Advantage, roll
    >>> D20(2).then(Advantage(D20)).total()
    >>> roll("2d6+3").total()
"""

# Types
from xander.dice.types import AdvantageType, CheckResult, DiceExpression

# Rolls
from xander.dice.rolls import Roll, RollSet

# Modifiers
from xander.dice.modifiers import (
    Add,
    Advantage,
    Arithmetic,
    Computed,
    Disadvantage,
    Div,
    Expression,
    Modifier,
    Mul,
    Sub,
)

# Dice
from xander.dice.die import D4, D6, D8, D10, D12, D20, D100, STANDARD_DICE, Die

# Parser
from xander.dice.parser import DiceParseError, parse_dice

# Roller
from xander.dice.roller import roll, roll_dice, roll_with_advantage

# Checks
from xander.dice.checks import (
    DC_EASY,
    DC_HARD,
    DC_MEDIUM,
    DC_NEARLY_IMPOSSIBLE,
    DC_VERY_EASY,
    DC_VERY_HARD,
    ability_modifier,
    describe_difficulty,
    resolve_check,
)

__all__ = [
    # Types
    "AdvantageType",
    "CheckResult",
    "DiceExpression",
    # Rolls
    "Roll",
    "RollSet",
    # Modifiers
    "Modifier",
    "Arithmetic",
    "Add",
    "Sub",
    "Mul",
    "Div",
    "Expression",
    "Computed",
    "Advantage",
    "Disadvantage",
    # Dice
    "Die",
    "D4",
    "D6",
    "D8",
    "D10",
    "D12",
    "D20",
    "D100",
    "STANDARD_DICE",
    # Parser
    "parse_dice",
    "DiceParseError",
    # Roller
    "roll",
    "roll_dice",
    "roll_with_advantage",
    # Checks
    "ability_modifier",
    "describe_difficulty",
    "resolve_check",
    "DC_VERY_EASY",
    "DC_EASY",
    "DC_MEDIUM",
    "DC_HARD",
    "DC_VERY_HARD",
    "DC_NEARLY_IMPOSSIBLE",
]
