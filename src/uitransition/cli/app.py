"""
Transition CLI: validate scenario files, run them, and inspect the state graph.

Scenarios are YAML files holding a transition configuration and a timeline of
updates. Runs use the in-memory host and print the observed callback trace.
"""

from __future__ import annotations

import typer
from rich.console import Console

from uitransition.cli.formatters import build_scenarios_table, build_states_table, build_trace_table
from uitransition.cli.load_helpers import load_or_exit
from uitransition.core.errors import TransitionError
from uitransition.io.loaders import load_scenario, load_scenarios
from uitransition.services.scenario_runner import run_scenario
from uitransition.utils.logging import configure_logging

app = typer.Typer(help="Transition CLI: validate scenario files, run them, and inspect the state graph.")
console = Console()


@app.command()
def validate(
    path: str = typer.Argument(..., help="Scenario file or folder of scenario files"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Validate scenario files."""
    scenarios = load_or_exit(load_scenarios, path, console=console, verbose_errors=verbose)
    if not scenarios:
        console.print(f"[yellow]No scenarios found[/yellow] in {path}")
        raise typer.Exit(code=1)

    console.print(build_scenarios_table(scenarios))
    console.print(f"[green]OK[/green] Loaded {len(scenarios)} scenario(s)")


@app.command()
def run(
    path: str = typer.Argument(..., help="Scenario file"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Run a scenario and print its callback trace."""
    configure_logging(verbose)
    scenario = load_or_exit(load_scenario, path, console=console, verbose_errors=verbose)

    try:
        result = run_scenario(scenario)
    except TransitionError as err:
        console.print(f"[red]Transition failed:[/red] {err}")
        raise typer.Exit(code=1)

    if as_json:
        console.print_json(data=result.model_dump(mode="json"))
        return

    console.print(build_trace_table(result))
    console.print(
        f"Final state: [bold]{result.final_state.value}[/bold], "
        f"hint: {result.final_hint or '-'}, mounted: {'yes' if result.mounted else 'no'}"
    )
    if result.stylesheet:
        console.print("\n[bold]Styles[/bold]:")
        console.print(result.stylesheet.strip(), markup=False)


@app.command()
def states() -> None:
    """Show the transition states and their allowed edges."""
    console.print(build_states_table())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
