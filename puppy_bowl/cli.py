"""Main CLI application for Puppy Bowl."""

import asyncio
from pathlib import Path
from typing import Awaitable, Callable, Optional, TypeVar
import httpx
import typer
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from puppy_bowl.app import PuppyBowlApp
from puppy_bowl.config import Config, ConfigManager
from puppy_bowl.io.csv_export import RosterExporter
from puppy_bowl.models.player import STATUS_CHOICES
from puppy_bowl.services.api import PuppyBowlAPIClient
from puppy_bowl.views.form import NewPlayerForm
from puppy_bowl.views.renderer import PlayerRenderer
from puppy_bowl.views.screen import Screen
from puppy_bowl.views.surface import ConsoleSurface, Surface

app = typer.Typer(
    name="puppy-bowl",
    help="Puppy Bowl roster client",
    add_completion=False
)
console = Console()

T = TypeVar("T")


class PuppyBowlCLI:
    """Main CLI application class."""

    def __init__(
        self,
        config: Config,
        surface: Optional[Surface] = None,
        verbose: bool = False,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.config = config
        self.surface = surface or ConsoleSurface(console)
        self.verbose = verbose
        self.transport = transport

    def make_client(self) -> PuppyBowlAPIClient:
        return PuppyBowlAPIClient(self.config, transport=self.transport, verbose=self.verbose)

    def run_with_renderer(self, action: Callable[[PlayerRenderer], Awaitable[T]]) -> T:
        """Run one renderer action against a fresh client."""
        async def _run():
            async with self.make_client() as client:
                return await action(PlayerRenderer(client, self.surface))

        return asyncio.run(_run())

    def show_menu(self, screen: Optional[Screen]) -> str:
        """Show the actions of the current screen and get the user's choice."""
        actions = screen.actions if screen else []

        menu_table = Table(show_header=False, box=None, padding=(0, 2))
        menu_table.add_column("Option", style="bold cyan")
        menu_table.add_column("Description")

        for number, action in enumerate(actions, start=1):
            menu_table.add_row(str(number), f"{action.label} (#{action.player_id})")
        menu_table.add_row("a", "Add a new player")
        menu_table.add_row("r", "Refresh roster")
        menu_table.add_row("q", "Quit")

        console.print(menu_table)

        choices = [str(number) for number in range(1, len(actions) + 1)] + ["a", "r", "q"]
        return Prompt.ask("\nSelect an option", choices=choices)

    def prompt_new_player(self, form: NewPlayerForm) -> None:
        """Collect new player inputs, pre-filled from a previous failed attempt."""
        console.print("\n[bold blue]🐾 Add new players here[/bold blue]")
        form.fill(
            name=Prompt.ask("Player Name", default=form.values["name"] or None),
            imageUrl=Prompt.ask("Image URL", default=form.values["imageUrl"] or None),
            breed=Prompt.ask("Breed (optional)", default=form.values["breed"] or None),
            status=Prompt.ask("Status", choices=list(STATUS_CHOICES), default=form.values["status"])
        )

    async def run_async(self) -> None:
        """Start the app and loop over user actions until quit."""
        async with self.make_client() as client:
            puppy_app = PuppyBowlApp(client, self.surface)
            await puppy_app.start()
            renderer = puppy_app.renderer

            while True:
                choice = self.show_menu(renderer.screen)

                if choice == "q":
                    console.print("[blue]👋 Goodbye![/blue]")
                    break
                elif choice == "a":
                    self.prompt_new_player(renderer.form)
                    await renderer.form.submit()
                elif choice == "r":
                    await renderer.refresh()
                else:
                    action = renderer.screen.actions[int(choice) - 1]
                    await action.invoke()

    def run(self) -> None:
        """Run the interactive roster app."""
        try:
            asyncio.run(self.run_async())
        except KeyboardInterrupt:
            console.print("\n[yellow]❌ Interrupted by user[/yellow]")


def _cli(ctx: typer.Context) -> PuppyBowlCLI:
    return ctx.obj


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    cohort: Optional[str] = typer.Option(None, "--cohort", "-c", help="Cohort name used in the API URL"),
    api_root: Optional[str] = typer.Option(None, "--api-root", help="API root URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output")
) -> None:
    """Browse and manage the Puppy Bowl roster."""
    config_manager = ConfigManager()
    config = config_manager.load_config()

    if cohort:
        config.cohort_name = cohort
        saved = config_manager.load_file_config()
        saved.cohort_name = cohort
        config_manager.save_config(saved)
    if api_root:
        config.api_root = api_root

    if verbose:
        console.print(f"[blue]Using API at {config.base_url}[/blue]")

    ctx.obj = PuppyBowlCLI(config, surface=ConsoleSurface(console, clear=False), verbose=verbose)

    # If a subcommand is invoked, don't run the interactive mode
    if ctx.invoked_subcommand is not None:
        return

    cli = _cli(ctx)
    cli.surface = ConsoleSurface(console)
    cli.run()


@app.command("players")
def list_players(ctx: typer.Context) -> None:
    """Show every player on the roster."""
    _cli(ctx).run_with_renderer(lambda renderer: renderer.refresh())


@app.command("show")
def show_player(
    ctx: typer.Context,
    player_id: int = typer.Argument(..., help="Player ID")
) -> None:
    """Show one player's details."""
    async def _show(renderer: PlayerRenderer):
        player = await renderer.client.get_player(player_id)
        if player is not None:
            renderer.show_detail(player)
        return player

    if _cli(ctx).run_with_renderer(_show) is None:
        console.print(f"[red]❌ Player #{player_id} not found[/red]")
        raise typer.Exit(1)


@app.command("add")
def add_player(
    ctx: typer.Context,
    name: str = typer.Option("", "--name", "-n", help="Player name"),
    image_url: str = typer.Option("", "--image-url", "-i", help="Player image URL"),
    breed: str = typer.Option("", "--breed", "-b", help="Breed (defaults to Unknown)"),
    status: str = typer.Option(STATUS_CHOICES[0], "--status", "-s", help="field or bench")
) -> None:
    """Add a player to the roster."""
    async def _add(renderer: PlayerRenderer):
        form = renderer.show_create_form()
        form.fill(name=name, imageUrl=image_url, breed=breed, status=status)
        return await form.submit()

    if _cli(ctx).run_with_renderer(_add) is None:
        raise typer.Exit(1)


@app.command("remove")
def remove_player(
    ctx: typer.Context,
    player_id: int = typer.Argument(..., help="Player ID")
) -> None:
    """Remove a player from the roster."""
    if not _cli(ctx).run_with_renderer(lambda renderer: renderer.remove_player(player_id)):
        console.print(f"[red]❌ Could not remove player #{player_id}[/red]")
        raise typer.Exit(1)


@app.command("export")
def export_roster(
    ctx: typer.Context,
    output: Optional[Path] = typer.Option(None, "--output", "-o", dir_okay=False, help="CSV output path")
) -> None:
    """Export the roster to CSV."""
    cli = _cli(ctx)
    players = cli.run_with_renderer(lambda renderer: renderer.client.list_players())

    try:
        RosterExporter.export_roster(players, cli.config.cohort_name, output)
    except ValueError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
