"""Dice notation parser.

Parses standard dice notation like 1d20, 2d6+3, d100, 4d6-2, 2d20kh1.
"""

import re

from xander.dice.types import AdvantageType, DiceExpression


class DiceParseError(ValueError):
    """Error parsing dice notation."""

    pass


# Pattern: optional count, 'd', die size, optional keep, optional modifier
# Examples: 1d20, 2d6+3, d100, 4d6-2, 2d20kh1, 2d20kl1 + 5
DICE_PATTERN = re.compile(
    r"^\s*(\d*)d(\d+)(k[hl]1?)?\s*([+-]\s*\d+)?\s*$",
    re.IGNORECASE,
)


def parse_dice(notation: str) -> DiceExpression:
    """Parse dice notation into a DiceExpression.

    Args:
        notation: Dice notation string (e.g., "2d6+3", "1d20", "2d20kh1").

    Returns:
        DiceExpression with parsed values.

    Raises:
        DiceParseError: If notation is invalid.

    Examples:
        >>> parse_dice("2d6+3")
        DiceExpression(num_dice=2, die_size=6, modifier=3, keep=<AdvantageType.NORMAL: 'normal'>)
        >>> parse_dice("2d20kh1").keep
        <AdvantageType.ADVANTAGE: 'advantage'>
    """
    if not notation or not notation.strip():
        raise DiceParseError("Dice notation cannot be empty")

    match = DICE_PATTERN.match(notation)
    if not match:
        raise DiceParseError(f"Invalid dice notation: '{notation}'")

    num_dice_str, die_size_str, keep_str, modifier_str = match.groups()

    # "d20" means "1d20"
    num_dice = int(num_dice_str) if num_dice_str else 1
    die_size = int(die_size_str)

    modifier = 0
    if modifier_str:
        modifier = int(modifier_str.replace(" ", ""))

    keep = AdvantageType.NORMAL
    if keep_str:
        keep = (
            AdvantageType.ADVANTAGE
            if keep_str.lower().startswith("kh")
            else AdvantageType.DISADVANTAGE
        )

    if num_dice < 1:
        raise DiceParseError(f"Number of dice must be at least 1, got {num_dice}")
    if die_size < 1:
        raise DiceParseError(f"Die size must be at least 1, got {die_size}")
    if keep != AdvantageType.NORMAL and num_dice < 2:
        raise DiceParseError(f"Keeping one die needs at least 2 dice: '{notation}'")

    return DiceExpression(num_dice=num_dice, die_size=die_size, modifier=modifier, keep=keep)
