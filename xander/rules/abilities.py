"""Ability declarations.

Source: SRD 5.1 (pg. 76). An ability is also its own check metric: an
ability check rolls against the ability itself.
"""

from dataclasses import dataclass

from xander.identity import Identity, Namespace

# (key, display name, abbreviation)
ABILITY_TABLE: tuple[tuple[str, str, str], ...] = (
    ("strength", "Strength", "STR"),
    ("dexterity", "Dexterity", "DEX"),
    ("constitution", "Constitution", "CON"),
    ("intelligence", "Intelligence", "INT"),
    ("wisdom", "Wisdom", "WIS"),
    ("charisma", "Charisma", "CHA"),
)


@dataclass(frozen=True, eq=False)
class Ability(Identity):
    """One of the six abilities.

    Attributes:
        id: Namespaced identity, e.g. "5E::ABILITY::DEXTERITY".
        key: Lowercase lookup key, e.g. "dexterity".
        name: Display name.
        abbreviation: Three-letter short name.
    """

    id: str
    key: str
    name: str
    abbreviation: str

    @property
    def base(self) -> "Ability":
        """The ability an ability check rolls against: itself."""
        return self

    def __str__(self) -> str:
        return self.name


def declare_abilities(namespace: Namespace) -> tuple[Ability, ...]:
    """Build the six abilities for a namespace."""
    return tuple(
        Ability(
            id=namespace.tag("ABILITY", key),
            key=key,
            name=name,
            abbreviation=abbreviation,
        )
        for key, name, abbreviation in ABILITY_TABLE
    )
