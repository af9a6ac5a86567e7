"""Core dice rolling entry points.

Turns dice expressions and notation into roll sets, with support for
advantage/disadvantage.
"""

from xander.dice.die import Die
from xander.dice.modifiers import Advantage, Disadvantage
from xander.dice.parser import parse_dice
from xander.dice.rolls import RollSet
from xander.dice.types import AdvantageType, DiceExpression


def _attach_keep(rolls: RollSet, die: Die, advantage_type: AdvantageType) -> RollSet:
    if advantage_type == AdvantageType.ADVANTAGE:
        return rolls.then(Advantage(die))
    if advantage_type == AdvantageType.DISADVANTAGE:
        return rolls.then(Disadvantage(die))
    return rolls


def roll_dice(expression: DiceExpression) -> RollSet:
    """Roll dice according to the expression.

    Args:
        expression: The dice expression to roll.

    Returns:
        RollSet with the individual rolls, any keep modifier, and the
        flat modifier attached.

    Examples:
        >>> expr = DiceExpression(num_dice=2, die_size=6, modifier=3)
        >>> len(roll_dice(expr))
        2
    """
    die = Die(expression.die_size)
    rolls = _attach_keep(die.roll(expression.num_dice), die, expression.keep)
    if expression.modifier > 0:
        rolls = rolls + expression.modifier
    elif expression.modifier < 0:
        rolls = rolls - abs(expression.modifier)
    return rolls


def roll(notation: str) -> RollSet:
    """Parse dice notation and roll.

    Args:
        notation: Dice notation string (e.g., "2d6+3").

    Returns:
        RollSet ready for ``total()``.

    Raises:
        DiceParseError: If notation is invalid.

    Examples:
        >>> roll("1d20+5").total()
    """
    return roll_dice(parse_dice(notation))


def roll_with_advantage(die: Die, advantage_type: AdvantageType) -> RollSet:
    """Roll a die with advantage or disadvantage.

    For advantage: rolls twice, keeps higher.
    For disadvantage: rolls twice, keeps lower.
    For normal: rolls once.

    Args:
        die: The die to roll.
        advantage_type: Whether to use advantage, disadvantage, or normal.

    Returns:
        RollSet with the keep modifier already attached, so arithmetic
        added afterwards runs on the kept roll.
    """
    if advantage_type == AdvantageType.NORMAL:
        return die.roll(1)
    return _attach_keep(die.roll(2), die, advantage_type)
