"""Creatures: ability scores plus proficiencies.

Checks and saving throws are composed here:

    d20 (x2 with advantage/disadvantage)
      + ability modifier of the metric's base ability
      + proficiency bonus scaled by the proficiency type held, if any
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from xander.config import get_settings
from xander.creature.proficiencies import Proficiencies
from xander.dice.checks import ability_modifier
from xander.dice.die import D20
from xander.dice.roller import roll_with_advantage
from xander.dice.rolls import RollSet
from xander.dice.types import AdvantageType
from xander.exceptions import MissingAbilityScore
from xander.rules import RULES, Ability, Rules, Skill
from xander.rules.proficiency import Category, Proficiency, ProficiencyType

logger = logging.getLogger(__name__)


class Creature:
    """Anything that rolls checks: a character, a monster.

    Args:
        scores: Ability scores keyed by Ability or ability id.
        proficiencies: Proficiency table (empty by default).
        proficiency_bonus: Base proficiency bonus; defaults to
            ``settings.proficiency_bonus``.
        rules: The rule set whose Checks/Saves categories are consulted.
        name: Display name.

    Example:
        >>> rogue = Creature({DEXTERITY: 20})
        >>> rogue.proficiencies.insert(Checks(STEALTH).expertise())
        >>> rogue.check(STEALTH, AdvantageType.ADVANTAGE).total()
    """

    def __init__(
        self,
        scores: Mapping[Ability | str, int] | None = None,
        proficiencies: Proficiencies | None = None,
        proficiency_bonus: int | None = None,
        rules: Rules | None = None,
        name: str = "",
    ) -> None:
        self.name = name
        self.rules = rules or RULES
        self.proficiencies = proficiencies if proficiencies is not None else Proficiencies()
        if proficiency_bonus is None:
            proficiency_bonus = get_settings().proficiency_bonus
        self.proficiency_bonus = proficiency_bonus
        self._scores: dict[str, int] = {}
        for ability, score in (scores or {}).items():
            self.set_score(ability, score)

    @property
    def stats(self) -> dict[str, int]:
        """Copy of the ability scores, keyed by ability id."""
        return dict(self._scores)

    def set_score(self, ability: Ability | str, score: int) -> None:
        self._scores[_ability_id(ability)] = score

    def score(self, ability: Ability | str) -> int | None:
        """Recorded score for an ability, or None."""
        return self._scores.get(_ability_id(ability))

    def modifier(self, ability: Ability | str) -> int | None:
        """Ability modifier, or None when no score is recorded."""
        score = self.score(ability)
        return None if score is None else ability_modifier(score)

    def proficient(self, proficiency: Proficiency) -> ProficiencyType | None:
        """Proficiency type held for a category/entity pair, if any."""
        return self.proficiencies.has(proficiency)

    def proficiency_for(self, category: Category, entity: Ability | Skill) -> int:
        """Scaled proficiency bonus for an entity; 0 when not proficient."""
        prof_type = self.proficient(category(entity))
        if prof_type is None:
            return 0
        return prof_type.bonus(self, self.proficiency_bonus)

    def check(
        self,
        metric: Ability | Skill,
        advantage: AdvantageType = AdvantageType.NORMAL,
    ) -> RollSet:
        """Roll an ability or skill check.

        Args:
            metric: Ability or skill being checked.
            advantage: Roll two d20s and keep the higher/lower.

        Returns:
            RollSet ready for ``total()``/``apply()``.

        Raises:
            MissingAbilityScore: If the metric's base ability has no score.
        """
        bonus = self.proficiency_for(self.rules.checks, metric)
        return self._compose(metric, bonus, advantage, "check")

    def save(
        self,
        ability: Ability,
        advantage: AdvantageType = AdvantageType.NORMAL,
    ) -> RollSet:
        """Roll a saving throw.

        Includes the ability modifier, as the tabletop rules do.

        Raises:
            MissingAbilityScore: If the ability has no score.
        """
        bonus = self.proficiency_for(self.rules.saves, ability)
        return self._compose(ability, bonus, advantage, "save")

    def _compose(
        self,
        metric: Ability | Skill,
        proficiency_bonus: int,
        advantage: AdvantageType,
        kind: str,
    ) -> RollSet:
        base = metric.base
        modifier = self.modifier(base)
        if modifier is None:
            raise MissingAbilityScore(base.id)

        rolls = roll_with_advantage(D20, advantage) + modifier + proficiency_bonus
        logger.info(
            f"{self.name or 'Creature'} {kind} {metric.name}: "
            f"d20 ({advantage.value}) {modifier:+d} ability {proficiency_bonus:+d} proficiency"
        )
        return rolls

    def __repr__(self) -> str:
        return f"Creature(name={self.name!r}, scores={self._scores!r}, proficiencies={self.proficiencies!r})"


def _ability_id(ability: Ability | str) -> str:
    return ability.id if isinstance(ability, Ability) else ability
