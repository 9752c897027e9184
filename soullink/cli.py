"""ABOUTME: CLI entry point for soullink commands.
ABOUTME: Provides combos, battle, types, and matchup commands via Typer."""

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from soullink.config import RunConfig, load_run_config
from soullink.logs import init_logging
from soullink.matchup import (
    analyze_matchup,
    rate_against_types,
    resolve_effectiveness,
    resolve_pokemon_effectiveness,
)
from soullink.settings import settings
from soullink.team import (
    ConfigurationError,
    PlayerSide,
    Pokemon,
    eligible_pairs,
    search_combinations,
    side_members,
)
from soullink.utils.type_chart import TYPES, is_known_type, normalize_types

app = typer.Typer(
    name="soullink",
    help="Soul-link team builder and type matchup tool.",
    no_args_is_help=True,
)

console = Console()


def _format_types(types: frozenset[str] | tuple[str, ...]) -> str:
    """Format types in chart order for display."""
    ordered = [t for t in TYPES if t in types]
    return ", ".join(t.title() for t in ordered) if ordered else "-"


def _format_pokemon(pokemon: Pokemon) -> str:
    """Format a Pokemon as 'Name (Type/Type)'."""
    types = "/".join(t.title() for t in pokemon.types) or "???"
    return f"{pokemon.name} ({types})"


def _warn_unknown_types(type_names: list[str]) -> None:
    """Print a warning for every type that is not on the chart."""
    for type_name in type_names:
        if not is_known_type(type_name):
            console.print(f"[yellow]Warning:[/] Unknown type '{escape(type_name)}' is ignored")


def _load_run(run_file: Path | None) -> RunConfig:
    """Load a run file, exiting with code 1 if it is missing or invalid."""
    try:
        return load_run_config(run_file)
    except FileNotFoundError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        console.print(f"[red]Invalid run file:[/] {escape(str(e))}")
        raise typer.Exit(1) from None


@app.callback()
def main(
    log_config: Path = typer.Option(
        None, "--log-config", help="Logging configuration yaml (defaults to configs/logging.yml)"
    ),
) -> None:
    """Initialize logging before running a command."""
    config_path = log_config or settings.logging_config_path
    if config_path.exists():
        init_logging(config_path)


@app.command()
def combos(
    run_file: Path = typer.Argument(None, help="Run file with pairs and constraints (defaults to configs/run.yml)"),
    max_results: int = typer.Option(
        settings.MAX_COMBINATIONS, "--max", "-n", help="Maximum number of teams to generate"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
) -> None:
    """Generate every legal team for the alive pairs of a run."""
    run = _load_run(run_file)

    constraints = run.constraints
    pool = eligible_pairs(run.get_pairs(), constraints.allow_custom_pokemon)

    if verbose:
        console.print(
            f"[blue]{len(pool)} eligible pairs, team size {constraints.team_size}, "
            f"{len(constraints.required_pair_ids)} required[/]"
        )

    try:
        combinations = search_combinations(pool, constraints, max_results=max_results)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None

    if not combinations:
        console.print("[yellow]No valid team combinations found.[/] Try relaxing the constraints.")
        return

    for number, combination in enumerate(combinations, start=1):
        table = Table(title=f"Team {number}")
        table.add_column("Pair")
        table.add_column("Player 1")
        table.add_column("Player 2")
        for pair in combination:
            marker = " *" if pair.id in constraints.required_pair_ids else ""
            table.add_row(f"{pair.id}{marker}", _format_pokemon(pair.player1), _format_pokemon(pair.player2))
        console.print(table)

    console.print(f"[green]Generated {len(combinations)} team combinations.[/]")


@app.command()
def battle(
    run_file: Path = typer.Argument(..., help="Run file with pairs and constraints"),
    opponent: list[str] = typer.Option(..., "--opponent", "-o", help="Type of the opponent (repeat for dual types)"),
    pair_ids: list[str] = typer.Option(None, "--pair", "-p", help="Pair on the team (defaults to all alive pairs)"),
    side: int = typer.Option(None, "--side", "-s", min=1, max=2, help="Player side (defaults to the run's side)"),
) -> None:
    """Rate one player's half of a team against an opponent."""
    run = _load_run(run_file)
    _warn_unknown_types(opponent)

    try:
        team = [run.get_pair(pair_id) for pair_id in pair_ids] if pair_ids else eligible_pairs(run.get_pairs())
    except KeyError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None

    player_side = PlayerSide(side) if side is not None else run.player_side

    table = Table(title=f"Player {player_side.value} vs {'/'.join(t.title() for t in normalize_types(opponent))}")
    table.add_column("Pokemon")
    table.add_column("Offense")
    table.add_column("Defense")
    table.add_column("Per type")
    for pokemon in side_members(team, player_side):
        summary = analyze_matchup(pokemon.types, opponent)
        ratings = rate_against_types(resolve_pokemon_effectiveness(pokemon), opponent)
        table.add_row(
            _format_pokemon(pokemon),
            summary.offense_label,
            summary.defense_label,
            ", ".join(f"{t.title()}: {rating.value}" for t, rating in ratings.items()),
        )
    console.print(table)


@app.command()
def types(
    type1: str = typer.Argument(..., help="Primary type"),
    type2: str = typer.Argument(None, help="Secondary type"),
) -> None:
    """Show weaknesses, resistances, and immunities of a type combination."""
    type_names = [t for t in (type1, type2) if t]
    _warn_unknown_types(type_names)

    result = resolve_effectiveness(type_names)

    table = Table(title="/".join(t.title() for t in normalize_types(type_names)))
    table.add_column("Category")
    table.add_column("Types")
    table.add_row("4x weak", _format_types(result.double_weaknesses))
    table.add_row("Weak", _format_types(result.weaknesses - result.double_weaknesses))
    table.add_row("Immune", _format_types(result.immunities))
    table.add_row("¼x resist", _format_types(result.double_resistances))
    table.add_row("Resist", _format_types(result.resistances - result.double_resistances))
    console.print(table)


@app.command()
def matchup(
    mine: list[str] = typer.Option(..., "--mine", "-m", help="Type of my Pokemon (repeat for dual types)"),
    opponent: list[str] = typer.Option(..., "--opponent", "-o", help="Type of the opponent (repeat for dual types)"),
) -> None:
    """Show offense and defense labels for my Pokemon against an opponent."""
    _warn_unknown_types([*mine, *opponent])

    summary = analyze_matchup(mine, opponent)
    console.print(f"Offense: [bold]{summary.offense_label}[/] ({summary.offense_multiplier:g}x)")
    console.print(f"Defense: [bold]{summary.defense_label}[/] ({summary.defense_multiplier:g}x)")

    ratings = rate_against_types(resolve_effectiveness(mine), opponent)
    for type_name, rating in ratings.items():
        console.print(f"  vs {type_name.title()}: {rating.value}")


if __name__ == "__main__":
    app()
