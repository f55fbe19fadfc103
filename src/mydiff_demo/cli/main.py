"""mydiff demo CLI - interactive walkthrough of the mydiff schema diff tool."""

import typer

from mydiff_demo.cli.demo import list_scripts, run, show
from mydiff_demo.cli.servers import servers_app

app = typer.Typer(
    name="mydiff-demo",
    help="Interactive walkthrough of the mydiff schema diff tool",
    no_args_is_help=True,
)

app.command("run")(run)
app.command("list")(list_scripts)
app.command("show")(show)
app.add_typer(servers_app, name="servers")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
