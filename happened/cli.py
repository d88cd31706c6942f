#!/usr/bin/env python3
"""
happened CLI - judge recorded call counts against expectations

Usage:
    happened check <count> <expectation> [OPTIONS]
    happened verify <checks.yaml> [OPTIONS]
    happened --version
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .assertions import AssertionEngine
from .checks import load_suite, run_suite
from .errors import InvalidArgumentError
from .expectations import parse_phrase

app = typer.Typer(
    name="happened",
    help="Judge recorded call counts against repeat expectations",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"happened v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
):
    """
    Judge recorded call counts against repeat expectations.
    """
    pass


@app.command()
def check(
    count: int = typer.Argument(..., help="Observed number of calls"),
    expectation: str = typer.Argument(
        ..., help="Expectation phrase, e.g. 'never' or 'at least twice'"
    ),
    call: str = typer.Option(
        "the call", "--call", "-c",
        help="Description of the call, used in the verdict"
    ),
):
    """
    Judge a single call count against an expectation phrase.

    Exits 0 when the count satisfies the expectation, 1 when it does
    not, and 2 when the expectation or count is invalid.
    """
    try:
        parsed = parse_phrase(expectation)
        result = AssertionEngine().judge(count, parsed)
    except InvalidArgumentError as e:
        console.print(f"[red]❌ Invalid input:[/red] {e}")
        raise typer.Exit(code=2)

    if result.passed:
        console.print(f"[green]✅ {call} happened {result.expected}[/green] (count: {count})")
        raise typer.Exit(code=0)

    console.print(f"[red]❌ {call}:[/red] {result.message}")
    raise typer.Exit(code=1)


@app.command()
def verify(
    checks_file: Path = typer.Argument(
        ...,
        help="Path to the check YAML file",
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    output: str = typer.Option(
        "text", "--output", "-o",
        help="Output format: text or json"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only show failures and final status"
    ),
):
    """
    Validate and run a check file.

    Every check's recorded count is judged against its expectation.
    Exits 1 if the file is invalid or any check fails.
    """
    suite, validation = load_suite(checks_file)

    if not validation.is_valid:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)

    run = run_suite(suite)

    if output == "json":
        console.print_json(data=run.to_dict())
    else:
        table = Table(title=suite.name)
        table.add_column("ID", style="cyan")
        table.add_column("Call")
        table.add_column("Expected", style="magenta")
        table.add_column("Actual", justify="right")
        table.add_column("Status")

        for outcome in run.outcomes:
            if quiet and outcome.result.passed:
                continue
            status = "[green]passed[/green]" if outcome.result.passed else "[red]failed[/red]"
            table.add_row(
                outcome.check.id,
                outcome.check.call_description,
                outcome.result.expected,
                str(outcome.result.actual),
                status,
            )

        if table.rows:
            console.print(table)

        total = len(run.outcomes)
        if run.passed:
            console.print(f"[green]✅ {total}/{total} checks passed[/green]")
        else:
            console.print(f"[red]❌ {run.failed_count}/{total} checks failed[/red]")

    raise typer.Exit(code=0 if run.passed else 1)


@app.command()
def info():
    """
    Show information about happened.
    """
    console.print(f"""
[bold]happened[/bold] v{__version__}

Repeat expectations and call-count assertions for test doubles

[bold]Expectation phrases:[/bold]
  never
  exactly once | exactly twice | exactly N times
  at least once | at least twice | at least N times
  no more than once | no more than twice | no more than N times

[bold]Quick Start:[/bold]
  happened check 3 "at least twice"
  happened verify checks/gateway.yaml
""")


if __name__ == "__main__":
    app()
