"""Main entry point for the taskrecur CLI."""

import typer

from taskrecur import __version__
from taskrecur.commands import config
from taskrecur.commands.describe_command import describe_command
from taskrecur.commands.next_command import next_command
from taskrecur.commands.presets_command import presets_command
from taskrecur.commands.validate_command import validate_command
from taskrecur.utils.typer_helpers import SuggestingGroup
from taskrecur.utils.ui.console import get_console

app = typer.Typer(
    name="taskrecur",
    cls=SuggestingGroup,
    help="Compute, describe and validate recurring task dates",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(config.app, name="config", help="Configuration management")

# Add top-level commands
app.command("next")(next_command)
app.command("describe")(describe_command)
app.command("validate")(validate_command)
app.command("presets")(presets_command)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]taskrecur[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
