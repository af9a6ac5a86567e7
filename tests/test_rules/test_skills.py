"""Tests for skill-to-ability mappings."""

import pytest

from xander.rules import (
    ANIMAL_HANDLING,
    ATHLETICS,
    CHARISMA,
    DEXTERITY,
    SKILL_ABILITIES,
    SLEIGHT_OF_HAND,
    STEALTH,
    STRENGTH,
    WISDOM,
    get_ability_for_skill,
    get_skills_for_ability,
)
from xander.rules.skills import normalize_skill_key


class TestSkillAbilities:
    """Tests for the SKILL_ABILITIES table."""

    def test_all_srd_skills_declared(self):
        """There are 18 skills in the SRD."""
        assert len(SKILL_ABILITIES) == 18

    def test_no_constitution_skills(self):
        assert "constitution" not in SKILL_ABILITIES.values()


class TestGetAbilityForSkill:
    """Tests for get_ability_for_skill function."""

    def test_stealth_is_dexterity(self):
        assert get_ability_for_skill("stealth") == "dexterity"

    def test_normalizes_display_names(self):
        """Test lookup with display formatting."""
        assert get_ability_for_skill("Animal Handling") == "wisdom"
        assert get_ability_for_skill("sleight-of-hand") == "dexterity"

    def test_unknown_skill_raises(self):
        with pytest.raises(KeyError):
            get_ability_for_skill("basket_weaving")


class TestGetSkillsForAbility:
    """Tests for get_skills_for_ability function."""

    def test_strength_skills(self):
        assert get_skills_for_ability("strength") == ["athletics"]

    def test_charisma_skills(self):
        assert set(get_skills_for_ability("CHARISMA")) == {
            "deception",
            "intimidation",
            "performance",
            "persuasion",
        }

    def test_constitution_has_none(self):
        assert get_skills_for_ability("constitution") == []


class TestSkillDescriptors:
    """Tests for declared skill entities."""

    def test_skill_bases(self):
        assert STEALTH.base == DEXTERITY
        assert ATHLETICS.base == STRENGTH
        assert ANIMAL_HANDLING.base == WISDOM

    def test_display_names(self):
        assert SLEIGHT_OF_HAND.name == "Sleight of Hand"
        assert ANIMAL_HANDLING.name == "Animal Handling"

    def test_ability_is_its_own_base(self):
        assert CHARISMA.base is CHARISMA

    def test_normalize_skill_key(self):
        assert normalize_skill_key("  Sleight of Hand ") == "sleight_of_hand"
