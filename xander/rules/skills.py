"""Skill-to-ability mappings for skill checks.

Maps each SRD skill to its governing ability. Skill descriptors are built
from this table once per rule set.
"""

from dataclasses import dataclass

from xander.identity import Identity, Namespace
from xander.rules.abilities import Ability

# Keys are lowercase skill keys, values are ability keys
SKILL_ABILITIES: dict[str, str] = {
    # Strength-based skills
    "athletics": "strength",
    # Dexterity-based skills
    "acrobatics": "dexterity",
    "sleight_of_hand": "dexterity",
    "stealth": "dexterity",
    # Intelligence-based skills
    "arcana": "intelligence",
    "history": "intelligence",
    "investigation": "intelligence",
    "nature": "intelligence",
    "religion": "intelligence",
    # Wisdom-based skills
    "animal_handling": "wisdom",
    "insight": "wisdom",
    "medicine": "wisdom",
    "perception": "wisdom",
    "survival": "wisdom",
    # Charisma-based skills
    "deception": "charisma",
    "intimidation": "charisma",
    "performance": "charisma",
    "persuasion": "charisma",
}


@dataclass(frozen=True, eq=False)
class Skill(Identity):
    """A skill, checked against its base ability.

    Attributes:
        id: Namespaced identity, e.g. "5E::SKILL::STEALTH".
        key: Lowercase lookup key, e.g. "stealth".
        name: Display name.
        base: The governing ability.
    """

    id: str
    key: str
    name: str
    base: Ability

    def __str__(self) -> str:
        return self.name


def normalize_skill_key(name: str) -> str:
    """Normalize a skill name: lowercase, spaces/hyphens to underscores.

    Examples:
        >>> normalize_skill_key("Sleight of Hand")
        'sleight_of_hand'
    """
    return name.strip().lower().replace(" ", "_").replace("-", "_")


def get_ability_for_skill(skill_key: str) -> str:
    """Get the governing ability key for a skill.

    Raises:
        KeyError: If the skill is not declared.

    Examples:
        >>> get_ability_for_skill("stealth")
        'dexterity'
        >>> get_ability_for_skill("Animal Handling")
        'wisdom'
    """
    normalized = normalize_skill_key(skill_key)
    if normalized not in SKILL_ABILITIES:
        raise KeyError(f"Unknown skill: '{skill_key}'")
    return SKILL_ABILITIES[normalized]


def get_skills_for_ability(ability_key: str) -> list[str]:
    """Get all skills governed by a specific ability.

    Examples:
        >>> "persuasion" in get_skills_for_ability("charisma")
        True
    """
    normalized = ability_key.lower()
    return [skill for skill, ability in SKILL_ABILITIES.items() if ability == normalized]


def declare_skills(namespace: Namespace, abilities: dict[str, Ability]) -> tuple[Skill, ...]:
    """Build the skills for a namespace.

    Args:
        namespace: Namespace minting the skill identities.
        abilities: Already-declared abilities, by key.
    """
    return tuple(
        Skill(
            id=namespace.tag("SKILL", key),
            key=key,
            name=key.replace("_", " ").title().replace(" Of ", " of "),
            base=abilities[ability_key],
        )
        for key, ability_key in SKILL_ABILITIES.items()
    )
