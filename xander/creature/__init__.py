"""Creatures and their proficiencies."""

from xander.creature.creature import Creature
from xander.creature.proficiencies import Proficiencies

__all__ = ["Creature", "Proficiencies"]
