"""Roll containers.

A RollSet groups individual rolls by the side count of the die that
produced them and carries an ordered chain of modifiers. Evaluating the
chain either yields a final value from the first scalar-producing
modifier, or falls back to summing every visible roll.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Union

from xander.dice.modifiers import (
    Add,
    Arithmetic,
    Computed,
    Div,
    Expression,
    Modifier,
    Mul,
    Sub,
)
from xander.exceptions import UnresolvedRollSet

if TYPE_CHECKING:
    from xander.dice.die import Die

logger = logging.getLogger(__name__)


@dataclass
class Roll:
    """Result of rolling a single die.

    Hidden rolls are kept for display but count as zero in totals.

    Attributes:
        raw: The face that came up.
        hidden: Whether a modifier has dropped this roll.
    """

    raw: int
    hidden: bool = False

    @property
    def value(self) -> int:
        """Contribution to totals: the raw face, or 0 when hidden."""
        return 0 if self.hidden else self.raw

    def hide(self) -> None:
        self.hidden = True

    def show(self) -> None:
        self.hidden = False

    def __repr__(self) -> str:
        return f"Roll({'_' if self.hidden else self.raw})"


RollGroups = dict[int, list[Roll]]
ModifierLike = Union[Modifier, Callable[[int], int]]


def _run_chain(groups: RollGroups, modifiers: Iterable[Modifier]) -> int | None:
    """Apply modifiers in order until one produces a scalar."""
    for modifier in modifiers:
        result = modifier.apply(list(groups.items()))
        if result is not None:
            logger.debug(f"Modifier {modifier.id} resolved roll set to {result}")
            return result
    return None


def _visible_sum(groups: RollGroups) -> int:
    return sum(roll.value for rolls in groups.values() for roll in rolls)


class RollSet:
    """Accumulator of die rolls plus a chain of modifiers.

    Rolls are grouped by die side count: two different D20 instances
    share a group. Within a group, insertion order is preserved.

    Combining operations take ownership of their inputs: ``extend`` and
    ``+ other_set`` empty the other set. The arithmetic operators
    (``+ int``, ``- int``, ``* int``, ``// int``) also change the left
    operand in place and return it, so after ``bonus = base + 5``,
    ``bonus is base``. Take a ``copy()`` first to keep the original.

    Example:
        >>> rolls = D20(2).then(Advantage(D20)) + 5
        >>> rolls.peek()   # Repeatable, leaves the set untouched
        >>> rolls.apply()  # Consumes the chain
    """

    def __init__(self) -> None:
        self._groups: RollGroups = {}
        self._modifiers: list[Modifier] = []

    @property
    def groups(self) -> dict[int, tuple[Roll, ...]]:
        """Read-only view of the rolls, keyed by side count."""
        return {sides: tuple(rolls) for sides, rolls in self._groups.items()}

    @property
    def modifiers(self) -> tuple[Modifier, ...]:
        """Attached modifiers, in evaluation order."""
        return tuple(self._modifiers)

    def add(self, die: Die, rolls: Iterable[Roll | int]) -> RollSet:
        """Append rolls to the group for `die`'s side count.

        Args:
            die: The die that produced the rolls.
            rolls: Roll objects or raw face values.

        Returns:
            This roll set, for chaining.
        """
        group = self._groups.setdefault(die.sides, [])
        group.extend(roll if isinstance(roll, Roll) else Roll(roll) for roll in rolls)
        return self

    def get(self, die: Die) -> tuple[Roll, ...]:
        """Rolls produced by dice with `die`'s side count (empty if none)."""
        return tuple(self._groups.get(die.sides, ()))

    def __getitem__(self, die: Die) -> tuple[Roll, ...]:
        return self.get(die)

    def natural(self, die: Die) -> int | None:
        """First visible face rolled on `die`, or None."""
        for roll in self._groups.get(die.sides, ()):
            if not roll.hidden:
                return roll.raw
        return None

    def then(self, modifier: ModifierLike) -> RollSet:
        """Attach a modifier to the end of the chain.

        Plain callables taking the visible subtotal are wrapped as
        scalar-producing modifiers.

        Returns:
            This roll set, for chaining.
        """
        if not isinstance(modifier, Modifier):
            if not callable(modifier):
                raise TypeError(f"Expected a Modifier or callable, got {type(modifier).__name__}")
            modifier = Computed(modifier)
        self._modifiers.append(modifier)
        return self

    def extend(self, other: RollSet) -> RollSet:
        """Merge another roll set into this one.

        Groups with the same side count are concatenated (this set's
        rolls first) and the other set's modifiers run after this set's.
        The other set is left empty.

        Returns:
            This roll set, for chaining.
        """
        if other is self:
            raise ValueError("Cannot extend a roll set with itself")
        for sides, rolls in other._groups.items():
            self._groups.setdefault(sides, []).extend(rolls)
        self._modifiers.extend(other._modifiers)
        other._groups = {}
        other._modifiers = []
        return self

    def copy(self) -> RollSet:
        """Independent copy: new Roll objects, same modifier chain."""
        duplicate = RollSet()
        duplicate._groups = {
            sides: [replace(roll) for roll in rolls] for sides, rolls in self._groups.items()
        }
        duplicate._modifiers = list(self._modifiers)
        return duplicate

    def preview(self) -> RollSet:
        """Copy of this set with the chain's visibility changes applied."""
        duplicate = self.copy()
        _run_chain(duplicate._groups, duplicate._modifiers)
        return duplicate

    def peek(self) -> int:
        """Evaluate the chain without disturbing this set.

        Returns:
            The first scalar a modifier produced, or the sum of visible
            rolls if none did.
        """
        duplicate = self.copy()
        result = _run_chain(duplicate._groups, duplicate._modifiers)
        if result is None:
            result = _visible_sum(duplicate._groups)
        return result

    def apply(self) -> int:
        """Evaluate the chain against this set's own rolls.

        Visibility changes made by modifiers stick.

        Returns:
            The first scalar a modifier produced.

        Raises:
            UnresolvedRollSet: If no modifier produced a scalar. The
                exception carries this set so the caller can attach more
                modifiers or fall back to ``total()``.
        """
        result = _run_chain(self._groups, self._modifiers)
        if result is None:
            raise UnresolvedRollSet(self)
        return result

    def total(self) -> int:
        """Final value of this set; visible sum when nothing resolves it."""
        return self.peek()

    def describe(self) -> str:
        """Human-readable breakdown, e.g. ``d20[~3, 17] + 5``.

        Hidden rolls are prefixed with ``~``.
        """
        parts = []
        for sides, rolls in self._groups.items():
            faces = ", ".join(f"~{roll.raw}" if roll.hidden else str(roll.raw) for roll in rolls)
            parts.append(f"d{sides}[{faces}]")
        text = " + ".join(parts) if parts else "0"
        for modifier in self._modifiers:
            text += f" {modifier.describe()}"
        return text

    def __len__(self) -> int:
        return sum(len(rolls) for rolls in self._groups.values())

    def __iter__(self) -> Iterator[Roll]:
        for rolls in self._groups.values():
            yield from rolls

    def __repr__(self) -> str:
        return f"RollSet({self.describe()})"

    # Arithmetic operators fold into a trailing arithmetic modifier so
    # that `D20 + 5 + 2` counts both terms.

    def _push_arithmetic(self, step: Arithmetic) -> RollSet:
        if self._modifiers and isinstance(self._modifiers[-1], (Arithmetic, Expression)):
            self._modifiers[-1] = Expression.of(self._modifiers[-1], step)
        else:
            self._modifiers.append(step)
        return self

    def __add__(self, other: int | RollSet) -> RollSet:
        if isinstance(other, RollSet):
            return self.extend(other)
        if isinstance(other, int):
            return self._push_arithmetic(Add(other))
        return NotImplemented

    def __sub__(self, other: int) -> RollSet:
        if isinstance(other, int):
            return self._push_arithmetic(Sub(other))
        return NotImplemented

    def __mul__(self, other: int) -> RollSet:
        if isinstance(other, int):
            return self._push_arithmetic(Mul(other))
        return NotImplemented

    def __floordiv__(self, other: int) -> RollSet:
        if isinstance(other, int):
            return self._push_arithmetic(Div(other))
        return NotImplemented
