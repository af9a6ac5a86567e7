"""Proficiency categories and proficiency types.

A proficiency binds an entity (a skill, an ability) within a category
(checks, saves) to a proficiency type, which scales the creature's base
proficiency bonus. Types cover the exotic cases: half proficiency (Jack
of All Trades) and expertise (Rogue, Bard).

Example:
    >>> Checks(STEALTH).expertise()
    >>> Saves(DEXTERITY)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from xander.identity import DEFAULT_NAMESPACE, Identity, Namespace

if TYPE_CHECKING:
    from xander.creature.creature import Creature


class ProficiencyType(Identity, ABC):
    """How a proficiency scales the base proficiency bonus."""

    kind = "PROFICIENCY_TYPE"
    label = ""

    def __init__(self, namespace: Namespace = DEFAULT_NAMESPACE) -> None:
        self.id = namespace.tag(self.kind, self.label)

    @abstractmethod
    def bonus(self, creature: Creature, base_bonus: int) -> int:
        """Modify the base proficiency bonus in some manner."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.id!r})"


class Full(ProficiencyType):
    label = "FULL"

    def bonus(self, creature: Creature, base_bonus: int) -> int:
        return base_bonus


class Half(ProficiencyType):
    """Half proficiency, rounded down (toward negative infinity)."""

    label = "HALF"

    def bonus(self, creature: Creature, base_bonus: int) -> int:
        return base_bonus // 2


class Expertise(ProficiencyType):
    """Double proficiency."""

    label = "EXPERTISE"

    def bonus(self, creature: Creature, base_bonus: int) -> int:
        return base_bonus * 2


class CustomProficiencyType(ProficiencyType):
    """Proficiency type backed by an arbitrary pure function.

    Args:
        id: Unique identity for this type.
        func: ``(creature, base_bonus) -> bonus``.

    Example:
        >>> flat = CustomProficiencyType("HOMEBREW::FLAT_THREE", lambda c, b: 3)
    """

    def __init__(self, id: str, func: Callable[[Creature, int], int]) -> None:
        self.id = id
        self.func = func

    def bonus(self, creature: Creature, base_bonus: int) -> int:
        return self.func(creature, base_bonus)


FULL = Full()
HALF = Half()
EXPERTISE = Expertise()


@dataclass(frozen=True, eq=False)
class Category(Identity):
    """A category of proficiencies, e.g. checks or saving throws.

    Calling a category binds an entity into a Proficiency.
    """

    id: str
    name: str

    def __call__(self, entity: Identity, type: ProficiencyType = FULL) -> Proficiency:
        return Proficiency(category=self, entity=entity, type=type)

    def __str__(self) -> str:
        return self.name


def declare_categories(namespace: Namespace) -> tuple[Category, Category]:
    """Build the checks and saves categories for a namespace."""
    return (
        Category(id=namespace.tag("PROFICIENCY", "CHECKS"), name="Checks"),
        Category(id=namespace.tag("PROFICIENCY", "SAVES"), name="Saves"),
    )


@dataclass(frozen=True)
class Proficiency:
    """An entity within a category, with the type of proficiency held.

    Attributes:
        category: Checks, Saves, ...
        entity: The skill or ability.
        type: How the bonus is scaled (full by default).
    """

    category: Category
    entity: Identity
    type: ProficiencyType = FULL

    def full(self) -> Proficiency:
        return replace(self, type=FULL)

    def half(self) -> Proficiency:
        return replace(self, type=HALF)

    def expertise(self) -> Proficiency:
        return replace(self, type=EXPERTISE)

    def with_type(self, type: ProficiencyType) -> Proficiency:
        return replace(self, type=type)


Checks, Saves = declare_categories(DEFAULT_NAMESPACE)
