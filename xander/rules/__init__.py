"""Rule entity declarations.

Abilities, skills, proficiency categories and proficiency types for the
default "5E" namespace. Use ``build_rules`` for another namespace.

Usage:
    >>> from xander.rules import DEXTERITY, STEALTH, Checks
    >>> STEALTH.base is DEXTERITY
    True
    >>> Checks(STEALTH).expertise()
"""

from xander.identity import DEFAULT_NAMESPACE, Identity, Namespace
from xander.rules.abilities import ABILITY_TABLE, Ability
from xander.rules.proficiency import (
    EXPERTISE,
    FULL,
    HALF,
    Category,
    Checks,
    CustomProficiencyType,
    Expertise,
    Full,
    Half,
    Proficiency,
    ProficiencyType,
    Saves,
)
from xander.rules.registry import Registry, Rules, build_rules
from xander.rules.skills import (
    SKILL_ABILITIES,
    Skill,
    get_ability_for_skill,
    get_skills_for_ability,
)

RULES = build_rules(DEFAULT_NAMESPACE)

# Abilities
STRENGTH = RULES.ability("strength")
DEXTERITY = RULES.ability("dexterity")
CONSTITUTION = RULES.ability("constitution")
INTELLIGENCE = RULES.ability("intelligence")
WISDOM = RULES.ability("wisdom")
CHARISMA = RULES.ability("charisma")

# Skills
ATHLETICS = RULES.skill("athletics")
ACROBATICS = RULES.skill("acrobatics")
SLEIGHT_OF_HAND = RULES.skill("sleight_of_hand")
STEALTH = RULES.skill("stealth")
ARCANA = RULES.skill("arcana")
HISTORY = RULES.skill("history")
INVESTIGATION = RULES.skill("investigation")
NATURE = RULES.skill("nature")
RELIGION = RULES.skill("religion")
ANIMAL_HANDLING = RULES.skill("animal_handling")
INSIGHT = RULES.skill("insight")
MEDICINE = RULES.skill("medicine")
PERCEPTION = RULES.skill("perception")
SURVIVAL = RULES.skill("survival")
DECEPTION = RULES.skill("deception")
INTIMIDATION = RULES.skill("intimidation")
PERFORMANCE = RULES.skill("performance")
PERSUASION = RULES.skill("persuasion")

__all__ = [
    # Identity
    "Identity",
    "Namespace",
    "DEFAULT_NAMESPACE",
    # Declarations
    "Ability",
    "Skill",
    "ABILITY_TABLE",
    "SKILL_ABILITIES",
    "get_ability_for_skill",
    "get_skills_for_ability",
    # Proficiency
    "Category",
    "Checks",
    "Saves",
    "Proficiency",
    "ProficiencyType",
    "Full",
    "Half",
    "Expertise",
    "CustomProficiencyType",
    "FULL",
    "HALF",
    "EXPERTISE",
    # Registry
    "Registry",
    "Rules",
    "build_rules",
    "RULES",
    # Abilities
    "STRENGTH",
    "DEXTERITY",
    "CONSTITUTION",
    "INTELLIGENCE",
    "WISDOM",
    "CHARISMA",
    # Skills
    "ATHLETICS",
    "ACROBATICS",
    "SLEIGHT_OF_HAND",
    "STEALTH",
    "ARCANA",
    "HISTORY",
    "INVESTIGATION",
    "NATURE",
    "RELIGION",
    "ANIMAL_HANDLING",
    "INSIGHT",
    "MEDICINE",
    "PERCEPTION",
    "SURVIVAL",
    "DECEPTION",
    "INTIMIDATION",
    "PERFORMANCE",
    "PERSUASION",
]
