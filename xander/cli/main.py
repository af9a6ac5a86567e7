"""Main CLI application for the rules engine."""

from typing import Optional

import typer

from xander.cli.display import (
    display_check_result,
    display_error,
    display_info,
    display_roll,
    display_skill_table,
)
from xander.config import get_settings
from xander.creature import Creature
from xander.dice import AdvantageType, RollSet, resolve_check, roll
from xander.exceptions import UnresolvedRollSet, XanderError
from xander.identity import DEFAULT_NAMESPACE, Namespace
from xander.logging_config import setup_logging
from xander.rules import RULES, Rules, build_rules
from xander.rules.proficiency import Category

app = typer.Typer(
    name="xander",
    help="5th edition dice, checks and saving throws",
    add_completion=False,
)


def _rules() -> Rules:
    """Rule set for the configured namespace."""
    namespace = get_settings().namespace
    if namespace == DEFAULT_NAMESPACE.name:
        return RULES
    return build_rules(Namespace(namespace))


def _settle(rolls: RollSet) -> int:
    """Resolve a roll set, falling back to the visible sum."""
    try:
        return rolls.apply()
    except UnresolvedRollSet as exc:
        return exc.rolls.total()


def _advantage(advantage: bool, disadvantage: bool) -> AdvantageType:
    if advantage and disadvantage:
        # Advantage and disadvantage cancel out
        return AdvantageType.NORMAL
    if advantage:
        return AdvantageType.ADVANTAGE
    if disadvantage:
        return AdvantageType.DISADVANTAGE
    return AdvantageType.NORMAL


def _build_creature(
    rules: Rules,
    category: Category,
    scores: list[str],
    proficient: list[str],
    expertise: list[str],
    half: list[str],
    bonus: Optional[int],
) -> Creature:
    """Build a creature from ABILITY=SCORE pairs and proficiency names."""
    creature = Creature(proficiency_bonus=bonus, rules=rules)
    for pair in scores:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Expected ABILITY=SCORE, got '{pair}'")
        creature.set_score(rules.ability(key), int(value))

    for names, prof_type in ((proficient, rules.full), (half, rules.half), (expertise, rules.expertise)):
        for name in names:
            creature.proficiencies.insert(category(rules.metric(name), prof_type))
    return creature


def _fail(error: Exception) -> None:
    message = error.args[0] if isinstance(error, KeyError) and error.args else str(error)
    display_error(message)
    raise typer.Exit(1)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Xander - roll dice, checks and saving throws.

    Use 'xander roll 2d20kh1+5' for dice, 'xander check stealth -s dex=18'
    for checks.
    """
    settings = get_settings()
    setup_logging("DEBUG" if verbose or settings.debug else settings.log_level)


@app.command("roll")
def roll_command(
    notation: str = typer.Argument(..., help="Dice notation, e.g. 2d6+3 or 2d20kh1"),
    times: int = typer.Option(1, "--times", "-n", min=1, help="Number of times to roll"),
) -> None:
    """Roll dice notation."""
    for _ in range(times):
        try:
            rolls = roll(notation)
        except (ValueError, XanderError) as e:
            _fail(e)
        display_roll(notation, rolls, _settle(rolls))


@app.command()
def check(
    metric: str = typer.Argument(..., help="Skill or ability to check, e.g. stealth"),
    score: Optional[list[str]] = typer.Option(None, "--score", "-s", help="Ability score, ABILITY=N"),
    proficient: Optional[list[str]] = typer.Option(None, "--proficient", "-p", help="Proficient skill/ability"),
    expertise: Optional[list[str]] = typer.Option(None, "--expertise", "-e", help="Skill/ability with expertise"),
    half: Optional[list[str]] = typer.Option(None, "--half", help="Skill/ability with half proficiency"),
    advantage: bool = typer.Option(False, "--advantage", "-a", help="Roll with advantage"),
    disadvantage: bool = typer.Option(False, "--disadvantage", "-d", help="Roll with disadvantage"),
    dc: Optional[int] = typer.Option(None, "--dc", help="Difficulty Class to check against"),
    bonus: Optional[int] = typer.Option(None, "--bonus", "-b", help="Base proficiency bonus"),
) -> None:
    """Roll an ability or skill check."""
    rules = _rules()
    try:
        creature = _build_creature(
            rules, rules.checks, score or [], proficient or [], expertise or [], half or [], bonus
        )
        target = rules.metric(metric)
        rolls = creature.check(target, _advantage(advantage, disadvantage))
    except (KeyError, ValueError, XanderError) as e:
        _fail(e)

    _report(f"{target.name} check", rolls, dc)


@app.command()
def save(
    ability: str = typer.Argument(..., help="Ability to save with, e.g. dex"),
    score: Optional[list[str]] = typer.Option(None, "--score", "-s", help="Ability score, ABILITY=N"),
    proficient: Optional[list[str]] = typer.Option(None, "--proficient", "-p", help="Proficient saving throw"),
    advantage: bool = typer.Option(False, "--advantage", "-a", help="Roll with advantage"),
    disadvantage: bool = typer.Option(False, "--disadvantage", "-d", help="Roll with disadvantage"),
    dc: Optional[int] = typer.Option(None, "--dc", help="Difficulty Class to save against"),
    bonus: Optional[int] = typer.Option(None, "--bonus", "-b", help="Base proficiency bonus"),
) -> None:
    """Roll a saving throw."""
    rules = _rules()
    try:
        creature = _build_creature(rules, rules.saves, score or [], proficient or [], [], [], bonus)
        target = rules.ability(ability)
        rolls = creature.save(target, _advantage(advantage, disadvantage))
    except (KeyError, ValueError, XanderError) as e:
        _fail(e)

    _report(f"{target.name} save", rolls, dc)


@app.command()
def skills() -> None:
    """List skills and their base abilities."""
    rules = _rules()
    display_skill_table(rules)
    display_info(f"Namespace: {rules.namespace.name}")


def _report(label: str, rolls: RollSet, dc: Optional[int]) -> None:
    if dc is None:
        display_roll(label, rolls, _settle(rolls))
    else:
        display_check_result(label, resolve_check(rolls, dc))


if __name__ == "__main__":
    app()
