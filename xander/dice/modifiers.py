"""Modifiers: operations on dice rolls once the faces are known.

A modifier receives every die group of a roll set as ``(sides, rolls)``
pairs and either:
- returns a scalar, which ends evaluation (arithmetic), or
- returns None after changing which rolls are hidden (advantage).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, ClassVar

from xander.exceptions import DivisionByZero

if TYPE_CHECKING:
    from xander.dice.die import Die
    from xander.dice.rolls import Roll

RollView = list[tuple[int, list["Roll"]]]


def visible_subtotal(groups: Iterable[tuple[int, list[Roll]]]) -> int:
    """Sum the visible value of every roll in every group."""
    return sum(roll.value for _, rolls in groups for roll in rolls)


class Modifier(ABC):
    """An operation applied to a roll set's grouped rolls.

    Attributes:
        id: Name of this operation.
        symbol: Operator symbol, for arithmetic modifiers only.
    """

    id: ClassVar[str] = "MODIFIER"
    symbol: ClassVar[str | None] = None

    @property
    def is_arithmetic(self) -> bool:
        return self.symbol is not None

    @abstractmethod
    def apply(self, groups: RollView) -> int | None:
        """Run this modifier.

        Args:
            groups: ``(sides, rolls)`` pairs; the roll lists may be
                mutated in place.

        Returns:
            A final value, or None to let evaluation continue.
        """

    def describe(self) -> str:
        return self.id


class Arithmetic(Modifier):
    """Combine the visible subtotal with a constant.

    Attributes:
        operand: The constant on the right-hand side.
    """

    def __init__(self, operand: int) -> None:
        if isinstance(operand, bool) or not isinstance(operand, int):
            raise TypeError(f"Arithmetic operand must be an int, got {operand!r}")
        self.operand = operand

    @abstractmethod
    def combine(self, subtotal: int) -> int:
        """Apply this operation to a running value."""

    def apply(self, groups: RollView) -> int:
        return self.combine(visible_subtotal(groups))

    def describe(self) -> str:
        return f"{self.symbol} {self.operand}"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.operand == other.operand

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.operand))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.operand})"


class Add(Arithmetic):
    id = "OPERATIONS::ADD"
    symbol = "+"

    def combine(self, subtotal: int) -> int:
        return subtotal + self.operand


class Sub(Arithmetic):
    id = "OPERATIONS::SUB"
    symbol = "-"

    def combine(self, subtotal: int) -> int:
        return subtotal - self.operand


class Mul(Arithmetic):
    id = "OPERATIONS::MUL"
    symbol = "*"

    def combine(self, subtotal: int) -> int:
        return subtotal * self.operand


class Div(Arithmetic):
    """Floor division, matching ability modifier rounding (-7 / 2 -> -4).

    Raises:
        DivisionByZero: If built with a zero divisor.
    """

    id = "OPERATIONS::DIV"
    symbol = "//"

    def __init__(self, operand: int) -> None:
        super().__init__(operand)
        if operand == 0:
            raise DivisionByZero()

    def combine(self, subtotal: int) -> int:
        return subtotal // self.operand


class Expression(Modifier):
    """Several arithmetic steps evaluated left to right.

    Built by the roll set operators so that ``D20 + 5 + 2`` keeps both
    terms instead of stopping at the first scalar.
    """

    id = "OPERATIONS::EXPRESSION"
    symbol = "()"

    def __init__(self, steps: Iterable[Arithmetic]) -> None:
        self.steps = tuple(steps)
        if not self.steps:
            raise ValueError("An expression needs at least one step")

    @classmethod
    def of(cls, *parts: Arithmetic | Expression) -> Expression:
        """Flatten arithmetic modifiers and expressions into one expression."""
        steps: list[Arithmetic] = []
        for part in parts:
            if isinstance(part, Expression):
                steps.extend(part.steps)
            else:
                steps.append(part)
        return cls(steps)

    def apply(self, groups: RollView) -> int:
        value = visible_subtotal(groups)
        for step in self.steps:
            value = step.combine(value)
        return value

    def describe(self) -> str:
        return " ".join(step.describe() for step in self.steps)

    def __repr__(self) -> str:
        return f"Expression({list(self.steps)!r})"


class Computed(Modifier):
    """Scalar modifier backed by a function of the visible subtotal.

    Example:
        >>> D20(1).then(lambda subtotal: max(subtotal, 10))
    """

    id = "OPERATIONS::COMPUTED"

    def __init__(self, func: Callable[[int], int], name: str | None = None) -> None:
        self.func = func
        self.name = name or getattr(func, "__name__", "computed")

    def apply(self, groups: RollView) -> int:
        return int(self.func(visible_subtotal(groups)))

    def describe(self) -> str:
        return f"-> {self.name}"


class _KeepOne(Modifier):
    """Narrow the groups of one die down to a single visible roll.

    Every group rolled on ``die`` is hidden, then the single best roll of
    that group by raw face is shown again; ties go to the earliest roll.
    Groups of every other die are hidden entirely.
    """

    pick: ClassVar[Callable]

    def __init__(self, die: Die) -> None:
        self.die = die

    def apply(self, groups: RollView) -> None:
        for sides, rolls in groups:
            for roll in rolls:
                roll.hide()
            if sides == self.die.sides and rolls:
                type(self).pick(rolls, key=lambda roll: roll.raw).show()
        return None

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.die == other.die

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.die))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.die})"


class Advantage(_KeepOne):
    """Keep the highest roll of a die."""

    id = "5E::ADVANTAGE"
    pick = max

    def describe(self) -> str:
        return f"(advantage on d{self.die.sides})"


class Disadvantage(_KeepOne):
    """Keep the lowest roll of a die."""

    id = "5E::DISADVANTAGE"
    pick = min

    def describe(self) -> str:
        return f"(disadvantage on d{self.die.sides})"
