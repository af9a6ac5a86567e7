"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from xander.dice.rolls import RollSet
from xander.dice.types import CheckResult
from xander.rules.registry import Rules


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def display_roll(label: str, rolls: RollSet, total: int) -> None:
    """Display a roll breakdown and its total.

    Dropped dice are shown struck through.

    Args:
        label: What was rolled (notation, skill name, ...).
        rolls: The evaluated roll set.
        total: Final value.
    """
    parts = []
    for sides, group in rolls.groups.items():
        faces = ", ".join(
            f"[strike dim]{roll.raw}[/strike dim]" if roll.hidden else str(roll.raw)
            for roll in group
        )
        parts.append(f"d{sides}({faces})")
    breakdown = " + ".join(parts) if parts else "0"
    for modifier in rolls.modifiers:
        breakdown += f" {modifier.describe()}"

    console.print(f"[bold cyan]{label}[/bold cyan]: {breakdown} = [bold]{total}[/bold]")


def display_check_result(label: str, result: CheckResult) -> None:
    """Display a check or saving throw against a DC.

    Args:
        label: What was checked.
        result: Resolved check.
    """
    display_roll(label, result.rolls, result.total)

    if result.is_natural_twenty:
        console.print("[bold green]Natural 20![/bold green]")
    elif result.is_natural_one:
        console.print("[bold red]Natural 1![/bold red]")

    if result.success:
        console.print(f"[green]Success[/green] vs DC {result.dc} (margin {result.margin:+d})")
    else:
        console.print(f"[red]Failure[/red] vs DC {result.dc} (margin {result.margin:+d})")


def display_skill_table(rules: Rules) -> None:
    """Display skills grouped by their base ability.

    Args:
        rules: Rule set to list.
    """
    table = Table(title="Skills", box=box.ROUNDED)
    table.add_column("Skill", style="cyan")
    table.add_column("Ability", style="yellow")
    table.add_column("Identity", style="dim")

    for skill in sorted(rules.skills, key=lambda s: (s.base.name, s.name)):
        table.add_row(skill.name, skill.base.abbreviation, skill.id)

    console.print(Panel(table, border_style="dim"))
