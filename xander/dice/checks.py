"""Ability modifiers and check resolution.

Key features:
- Standard (score - 10) // 2 ability modifier, rounding toward -infinity
- Difficulty Class constants from the SRD
- Resolving a check or save roll set against a DC
"""

import logging

from xander.dice.die import D20
from xander.dice.rolls import RollSet
from xander.dice.types import CheckResult

logger = logging.getLogger(__name__)


# Standard Difficulty Classes (DCs)
DC_VERY_EASY = 5
DC_EASY = 10
DC_MEDIUM = 15
DC_HARD = 20
DC_VERY_HARD = 25
DC_NEARLY_IMPOSSIBLE = 30

DIFFICULTY_NAMES = {
    DC_VERY_EASY: "very easy",
    DC_EASY: "easy",
    DC_MEDIUM: "medium",
    DC_HARD: "hard",
    DC_VERY_HARD: "very hard",
    DC_NEARLY_IMPOSSIBLE: "nearly impossible",
}


def ability_modifier(score: int) -> int:
    """Convert an ability score to its modifier.

    Uses floor division, so odd scores below 10 round down.

    Examples:
        >>> ability_modifier(10)
        0
        >>> ability_modifier(7)
        -2
        >>> ability_modifier(20)
        5
    """
    return (score - 10) // 2


def describe_difficulty(dc: int) -> str:
    """Name the closest standard difficulty at or below `dc`.

    Examples:
        >>> describe_difficulty(15)
        'medium'
        >>> describe_difficulty(17)
        'medium'
        >>> describe_difficulty(2)
        'trivial'
    """
    name = "trivial"
    for threshold, label in sorted(DIFFICULTY_NAMES.items()):
        if dc >= threshold:
            name = label
    return name


def resolve_check(rolls: RollSet, dc: int) -> CheckResult:
    """Evaluate a check or saving throw roll set against a DC.

    The roll set is not consumed; the result holds an evaluated copy
    with dropped dice hidden.

    Args:
        rolls: A roll set as produced by ``Creature.check``/``save``.
        dc: Difficulty Class to meet or beat.

    Returns:
        CheckResult with total, margin and the kept d20 face.
    """
    total = rolls.peek()
    # Visibility is decided by the chain
    evaluated = rolls.preview()
    natural = evaluated.natural(D20)
    margin = total - dc
    result = CheckResult(
        rolls=evaluated,
        total=total,
        dc=dc,
        success=total >= dc,
        margin=margin,
        natural=natural,
    )
    logger.debug(f"Check vs DC {dc}: total={total} natural={natural} success={result.success}")
    return result
