"""Typer group that proposes close command names when one is mistyped."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from taskrecur.utils.ui.console import get_console

MAX_SUGGESTIONS = 3
SIMILARITY_CUTOFF = 0.6


def suggest_commands(attempted: str, available: list[str]) -> list[str]:
    """Known command names resembling ``attempted``, best match first."""
    return get_close_matches(
        attempted, available, n=MAX_SUGGESTIONS, cutoff=SIMILARITY_CUTOFF
    )


class SuggestingGroup(TyperGroup):
    """Group that answers ``taskrecur nxt`` with "Did you mean this? next".

    Unknown names with no close match fall through to click's usage error.
    """

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            suggestions = suggest_commands(args[0], list(self.commands)) if args else []
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{args[0]}" for "{ctx.info_name}"'
            )
            console.print()
            heading = "Did you mean this?" if len(suggestions) == 1 else "Did you mean one of these?"
            console.print(f"[yellow]{heading}[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            raise typer.Exit(1) from e
