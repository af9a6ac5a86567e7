"""Exception definitions.

Custom exception hierarchy for the rules engine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xander.dice.rolls import RollSet


class XanderError(Exception):
    """Base exception for rules engine errors."""

    pass


class UnresolvedRollSet(XanderError):
    """No modifier in a roll set's chain produced a final value.

    Recoverable: attach a scalar modifier to ``rolls`` and apply again,
    or fall back to ``rolls.total()`` for the plain visible sum.

    Attributes:
        rolls: The roll set, with any visibility changes already applied.
    """

    def __init__(self, rolls: RollSet) -> None:
        super().__init__(
            f"No scalar-producing modifier in chain of {len(rolls.modifiers)} modifier(s)"
        )
        self.rolls = rolls


class MissingAbilityScore(XanderError):
    """A check or save needs an ability score the creature does not have.

    Attributes:
        ability_id: Identity of the missing ability.
    """

    def __init__(self, ability_id: str) -> None:
        super().__init__(f"No score recorded for ability '{ability_id}'")
        self.ability_id = ability_id


class InvalidDie(XanderError, ValueError):
    """A die was declared with fewer than one side.

    Attributes:
        sides: The rejected side count.
    """

    def __init__(self, sides: object) -> None:
        super().__init__(f"A die needs at least one side, got {sides!r}")
        self.sides = sides


class DivisionByZero(XanderError, ZeroDivisionError):
    """An arithmetic modifier was built with a zero divisor."""

    def __init__(self, message: str = "Division modifier cannot divide by zero") -> None:
        super().__init__(message)


class DuplicateIdentity(XanderError):
    """Two rule entities were registered under the same identity.

    Attributes:
        identity: The clashing identity string.
    """

    def __init__(self, identity: str) -> None:
        super().__init__(f"Identity '{identity}' is already registered")
        self.identity = identity
