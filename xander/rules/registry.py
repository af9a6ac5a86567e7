"""Registry of rule entities.

The declaration tables (abilities, skills, categories, proficiency types)
are processed once per namespace into a Rules bundle whose registry
supports lookup by identity or by name.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TypeVar

from xander.exceptions import DuplicateIdentity
from xander.identity import Identity, Namespace
from xander.rules.abilities import Ability, declare_abilities
from xander.rules.proficiency import (
    Category,
    Expertise,
    Full,
    Half,
    ProficiencyType,
    declare_categories,
)
from xander.rules.skills import Skill, declare_skills, normalize_skill_key

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Identity)


class Registry:
    """Rule entities keyed by identity, in registration order."""

    def __init__(self) -> None:
        self._entries: dict[str, Identity] = {}

    def register(self, entity: E) -> E:
        """Add an entity.

        Raises:
            DuplicateIdentity: If another entity already has this id.
        """
        if entity.id in self._entries:
            raise DuplicateIdentity(entity.id)
        self._entries[entity.id] = entity
        return entity

    def get(self, identity: str, default: Identity | None = None) -> Identity | None:
        return self._entries.get(identity, default)

    def by_kind(self, kind: type[E]) -> list[E]:
        """All registered entities of one class."""
        return [entity for entity in self._entries.values() if isinstance(entity, kind)]

    def lookup(self, name: str) -> Identity:
        """Find an entity by id, key, display name or abbreviation.

        Matching ignores case and treats spaces/hyphens as underscores.

        Raises:
            KeyError: If nothing matches.
        """
        if name in self._entries:
            return self._entries[name]
        wanted = normalize_skill_key(name)
        for entity in self._entries.values():
            candidates = (
                getattr(entity, "key", None),
                getattr(entity, "name", None),
                getattr(entity, "abbreviation", None),
            )
            if any(c is not None and normalize_skill_key(c) == wanted for c in candidates):
                return entity
        raise KeyError(f"No rule entity named '{name}'")

    def __getitem__(self, identity: str) -> Identity:
        return self._entries[identity]

    def __contains__(self, identity: object) -> bool:
        if isinstance(identity, Identity):
            identity = identity.id
        return identity in self._entries

    def __iter__(self) -> Iterator[Identity]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


@dataclass
class Rules:
    """All entities declared for one namespace."""

    namespace: Namespace
    checks: Category
    saves: Category
    full: ProficiencyType
    half: ProficiencyType
    expertise: ProficiencyType
    registry: Registry = field(default_factory=Registry)

    @property
    def abilities(self) -> list[Ability]:
        return self.registry.by_kind(Ability)

    @property
    def skills(self) -> list[Skill]:
        return self.registry.by_kind(Skill)

    def ability(self, key: str) -> Ability:
        entity = self.registry.lookup(key)
        if not isinstance(entity, Ability):
            raise KeyError(f"'{key}' is not an ability")
        return entity

    def skill(self, key: str) -> Skill:
        entity = self.registry.lookup(key)
        if not isinstance(entity, Skill):
            raise KeyError(f"'{key}' is not a skill")
        return entity

    def metric(self, key: str) -> Ability | Skill:
        """An ability or skill that can be checked."""
        entity = self.registry.lookup(key)
        if not isinstance(entity, (Ability, Skill)):
            raise KeyError(f"'{key}' is not an ability or skill")
        return entity


def build_rules(namespace: Namespace) -> Rules:
    """Process the declaration tables into a Rules bundle for `namespace`."""
    checks, saves = declare_categories(namespace)
    rules = Rules(
        namespace=namespace,
        checks=checks,
        saves=saves,
        full=Full(namespace),
        half=Half(namespace),
        expertise=Expertise(namespace),
    )
    for entity in (checks, saves, rules.full, rules.half, rules.expertise):
        rules.registry.register(entity)

    abilities = {ability.key: rules.registry.register(ability) for ability in declare_abilities(namespace)}
    for skill in declare_skills(namespace, abilities):
        rules.registry.register(skill)

    logger.debug(f"Declared {len(rules.registry)} rule entities in namespace {namespace.name}")
    return rules
