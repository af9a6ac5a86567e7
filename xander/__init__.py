"""Xander - a 5th edition tabletop rules engine.

Dice pools with modifier chains, proficiencies, and ability/skill
checks and saving throws.

Usage:
    >>> from xander.dice import D20, D6
    >>> (D20 + 5).total()
    >>> from xander.rules import DEXTERITY, STEALTH
    >>> from xander.creature import Creature
    >>> rogue = Creature({DEXTERITY: 18})
    >>> rogue.check(STEALTH).total()
"""

__version__ = "0.1.0"
