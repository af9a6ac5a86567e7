"""Per-creature proficiency table.

Maps category id -> entity id -> proficiency type. Absence of an entry
means "not proficient", which callers treat as a zero bonus.
"""

from collections.abc import Iterator

from xander.identity import Identity
from xander.rules.proficiency import FULL, Category, Proficiency, ProficiencyType


class Proficiencies:
    """Proficiencies held by one creature.

    Example:
        >>> profs = Proficiencies()
        >>> profs.insert(Checks(PERSUASION)).insert(Checks(STEALTH).expertise())
        >>> profs.has(Checks(STEALTH))
        Expertise('5E::PROFICIENCY_TYPE::EXPERTISE')
    """

    def __init__(self) -> None:
        self._table: dict[str, dict[str, ProficiencyType]] = {}

    def insert(
        self,
        proficiency: Proficiency | Category,
        entity: Identity | str | None = None,
        type: ProficiencyType = FULL,
    ) -> "Proficiencies":
        """Register a proficiency, replacing any type already held for it.

        Accepts either a bound ``Proficiency`` or a category, an entity (or
        entity id) and a type.

        Returns:
            This table, for chaining.
        """
        if isinstance(proficiency, Proficiency):
            type = proficiency.type
        category_id, entity_id = _key(proficiency, entity, "insert")
        self._table.setdefault(category_id, {})[entity_id] = type
        return self

    def has(
        self,
        proficiency: Proficiency | Category,
        entity: Identity | str | None = None,
    ) -> ProficiencyType | None:
        """Look up the type held for a category/entity pair.

        Accepts a bound ``Proficiency`` (whose own type is ignored) or a
        category and an entity (or entity id).

        Returns:
            The registered type, or None if not proficient.
        """
        category_id, entity_id = _key(proficiency, entity, "has")
        return self._table.get(category_id, {}).get(entity_id)

    def remove(
        self,
        proficiency: Proficiency | Category,
        entity: Identity | str | None = None,
    ) -> ProficiencyType | None:
        """Forget a proficiency; returns the type that was held, if any."""
        category_id, entity_id = _key(proficiency, entity, "remove")
        category = self._table.get(category_id)
        if category is None:
            return None
        removed = category.pop(entity_id, None)
        if not category:
            del self._table[category_id]
        return removed

    def __contains__(self, proficiency: object) -> bool:
        return isinstance(proficiency, Proficiency) and self.has(proficiency) is not None

    def __len__(self) -> int:
        return sum(len(entities) for entities in self._table.values())

    def __iter__(self) -> Iterator[tuple[str, str, ProficiencyType]]:
        """Yield (category id, entity id, type) triples."""
        for category_id, entities in self._table.items():
            for entity_id, prof_type in entities.items():
                yield category_id, entity_id, prof_type

    def __repr__(self) -> str:
        return f"Proficiencies({len(self)} entries)"


def _key(
    proficiency: Proficiency | Category,
    entity: Identity | str | None,
    operation: str,
) -> tuple[str, str]:
    """(category id, entity id) for either calling form."""
    if isinstance(proficiency, Proficiency):
        return proficiency.category.id, proficiency.entity.id
    if entity is None:
        raise TypeError(f"{operation} needs an entity when given a category")
    return proficiency.id, entity if isinstance(entity, str) else entity.id
