"""Commands managing the two local MySQL servers used by the demo."""

from pathlib import Path
from typing import Optional

import typer
from python_on_whales import DockerClient
from rich.console import Console

from mydiff_demo.config import DemoSettings

servers_app = typer.Typer(help="Start and stop the demo's MySQL servers")

console = Console()


def _docker(compose_file: Optional[Path]) -> DockerClient:
    """Build a compose-aware docker client, exiting if the file is missing."""
    compose_file = compose_file or DemoSettings().compose_file
    if not compose_file.exists():
        console.print(f"[red]Compose file not found: {compose_file}[/red]")
        console.print("[yellow]Run from the project root or pass --compose-file[/yellow]")
        raise typer.Exit(1)
    return DockerClient(compose_files=[compose_file])


@servers_app.command("up")
def up(
    compose_file: Optional[Path] = typer.Option(
        None, "--compose-file", "-f", help="docker-compose file with both servers"
    ),
) -> None:
    """Start both servers and wait until they are healthy."""
    docker = _docker(compose_file)

    console.print("Starting MySQL servers...")
    docker.compose.up(detach=True, wait=True)

    containers = docker.compose.ps()
    running = sum(1 for c in containers if c.state.running)
    console.print(f"[green]Servers up ({running}/{len(containers)} containers running)[/green]")


@servers_app.command("down")
def down(
    compose_file: Optional[Path] = typer.Option(
        None, "--compose-file", "-f", help="docker-compose file with both servers"
    ),
) -> None:
    """Stop and remove both servers."""
    docker = _docker(compose_file)

    console.print("Stopping MySQL servers...")
    docker.compose.down()
    console.print("[green]Servers stopped[/green]")
