"""Demo CLI commands.

This module provides the commands that drive a walkthrough:
- run: Execute a demo script interactively
- list: Show the available scripts
- show: Print a script's plan without executing it

Operator-facing text goes through the Presenter; diagnostics for
fatal errors are printed in red and turn into a non-zero exit code.
"""

import dataclasses
import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from mydiff_demo.config import DemoSettings
from mydiff_demo.exceptions import FixtureNotFoundError, InputClosedError
from mydiff_demo.presenter import Presenter
from mydiff_demo.runner import CommandRunner
from mydiff_demo.scripts import SCRIPTS, get_script
from mydiff_demo.sequencer import StepSequencer
from mydiff_demo.types import DemoScript, DsnSchemaMode

console = Console()


def configure_logging(verbose: bool) -> None:
    """Log to stderr, DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def load_settings(**overrides: object) -> DemoSettings:
    """Build settings from the environment plus explicit CLI overrides.

    Raises:
        typer.Exit: If the resulting configuration is invalid
    """
    try:
        return DemoSettings(**{k: v for k, v in overrides.items() if v is not None})
    except ValidationError as e:
        console.print("[red]Invalid configuration:[/red]")
        console.print(str(e), markup=False, highlight=False)
        raise typer.Exit(2)


def resolve_script(name: str, schema_mode: Optional[str]) -> DemoScript:
    """Look up a script and apply an optional DSN schema mode override."""
    try:
        script = get_script(name)
    except KeyError as e:
        raise typer.BadParameter(e.args[0], param_hint="SCRIPT")

    if schema_mode is not None:
        try:
            mode = DsnSchemaMode(schema_mode.lower())
        except ValueError:
            raise typer.BadParameter(
                f"Unknown schema mode: {schema_mode}. Available: omit, embed",
                param_hint="--schema-mode",
            )
        script = dataclasses.replace(script, schema_mode=mode)
    return script


def run(
    script: str = typer.Argument("walkthrough", help="Demo script to run"),
    server1: Optional[str] = typer.Option(
        None, "--server1", help="Source server as host:port"
    ),
    server2: Optional[str] = typer.Option(
        None, "--server2", help="Target server as host:port"
    ),
    schema: Optional[str] = typer.Option(
        None, "--schema", help="Schema name to compare"
    ),
    sql_dir: Optional[Path] = typer.Option(
        None, "--sql-dir", help="Directory containing the SQL fixtures"
    ),
    schema_mode: Optional[str] = typer.Option(
        None,
        "--schema-mode",
        help="Include the schema in server DSNs: omit or embed (default: per script)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Run an interactive demo script.

    Press Enter at each pause to continue.

    Examples:
        mydiff-demo run
        mydiff-demo run employees --schema employees
        mydiff-demo run --server1 db1:3306 --server2 db2:3306
    """
    configure_logging(verbose)
    demo_script = resolve_script(script, schema_mode)
    settings = load_settings(
        server1=server1, server2=server2, schema_name=schema, sql_dir=sql_dir
    )

    presenter = Presenter()
    runner = CommandRunner(settings, presenter, schema_mode=demo_script.schema_mode)
    sequencer = StepSequencer(presenter, runner, settings)

    presenter.banner()
    try:
        sequencer.run(demo_script)
    except FixtureNotFoundError as e:
        presenter.error(str(e))
        raise typer.Exit(1)
    except (InputClosedError, KeyboardInterrupt):
        console.print("\n[yellow]Demo interrupted[/yellow]")
        raise typer.Exit(1)

    console.print()
    console.rule("[bold green]Demo Complete[/bold green]")
    console.print()


def list_scripts() -> None:
    """List the available demo scripts."""
    table = Table(title="Demo scripts")
    table.add_column("Name", style="cyan")
    table.add_column("Steps", justify="right")
    table.add_column("Schema in DSN")
    table.add_column("Description")

    for demo_script in SCRIPTS.values():
        table.add_row(
            demo_script.name,
            str(len(demo_script.steps)),
            demo_script.schema_mode.value,
            demo_script.description,
        )

    console.print(table)


def show(
    script: str = typer.Argument("walkthrough", help="Demo script to show"),
    server1: Optional[str] = typer.Option(None, "--server1", help="Source server as host:port"),
    server2: Optional[str] = typer.Option(None, "--server2", help="Target server as host:port"),
    schema: Optional[str] = typer.Option(None, "--schema", help="Schema name to compare"),
    sql_dir: Optional[Path] = typer.Option(
        None, "--sql-dir", help="Directory containing the SQL fixtures"
    ),
    schema_mode: Optional[str] = typer.Option(
        None, "--schema-mode", help="Include the schema in server DSNs: omit or embed"
    ),
) -> None:
    """Print the steps and commands of a script without running them."""
    demo_script = resolve_script(script, schema_mode)
    settings = load_settings(
        server1=server1, server2=server2, schema_name=schema, sql_dir=sql_dir
    )

    presenter = Presenter(console=console)
    runner = CommandRunner(settings, presenter, schema_mode=demo_script.schema_mode)
    sequencer = StepSequencer(presenter, runner, settings)

    console.rule(f"[bold]{demo_script.name}[/bold]")
    for line in sequencer.describe(demo_script):
        console.print(line, markup=False, highlight=False, soft_wrap=True)
