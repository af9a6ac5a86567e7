"""Core test fixtures for rules engine tests."""

from unittest.mock import patch

import pytest

from xander.creature import Creature
from xander.rules import (
    CHARISMA,
    CONSTITUTION,
    DEXTERITY,
    INTELLIGENCE,
    STRENGTH,
    WISDOM,
)


@pytest.fixture
def fixed_d20():
    """Make every die roll come up 10."""
    with patch("xander.dice.die.random.randint", return_value=10) as mock_randint:
        yield mock_randint


@pytest.fixture
def rogue() -> Creature:
    """A dexterous creature with no proficiencies yet."""
    return Creature(
        {
            STRENGTH: 8,
            DEXTERITY: 20,
            CONSTITUTION: 10,
            INTELLIGENCE: 12,
            WISDOM: 17,
            CHARISMA: 13,
        },
        proficiency_bonus=2,
        name="Rogue",
    )
