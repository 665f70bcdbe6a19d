"""Presentation surfaces the renderer draws onto."""

from typing import TYPE_CHECKING, Optional, Protocol
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.style import Style
from rich.table import Table
from rich.text import Text

from puppy_bowl.views.screen import PlayerCard, Screen, ViewState

if TYPE_CHECKING:
    from puppy_bowl.views.form import NewPlayerForm


class Surface(Protocol):
    """A mount point that is fully replaced on each view transition."""

    def replace(self, screen: Screen) -> None:
        ...

    def notify(self, message: str, error: bool = False) -> None:
        ...

    def show_form(self, form: "NewPlayerForm") -> None:
        ...


class ConsoleSurface:
    """Draws screens onto a rich console."""

    TITLES = {
        ViewState.LIST: "🐶 All Players",
        ViewState.DETAIL: "🐶 Player Details",
    }

    def __init__(self, console: Optional[Console] = None, clear: bool = True):
        self.console = console or Console()
        self.clear = clear
        self.screen: Optional[Screen] = None

    def _render_card(self, card: PlayerCard) -> Panel:
        body = Text()
        for line in card.lines:
            body.append(line + "\n")
        if card.image_url:
            body.append(card.image_url, style=Style(link=card.image_url, dim=True))
        buttons = Text(" ".join(f"[{action.label}]" for action in card.actions), style="cyan")
        return Panel(
            Group(body, buttons),
            title=Text(card.title, style="bold green"),
            border_style="green",
            expand=False
        )

    def replace(self, screen: Screen) -> None:
        """Clear the console region and draw the screen from scratch."""
        self.screen = screen
        if self.clear:
            self.console.clear()
        self.console.print(Rule(self.TITLES[screen.state]))
        if screen.message:
            self.console.print(f"[yellow]{escape(screen.message)}[/yellow]")
        for card in screen.cards:
            self.console.print(self._render_card(card))

    def notify(self, message: str, error: bool = False) -> None:
        if error:
            self.console.print(f"[red]❌ {escape(message)}[/red]")
        else:
            self.console.print(f"[green]✅ {escape(message)}[/green]")

    def show_form(self, form: "NewPlayerForm") -> None:
        table = Table(show_header=False, box=None, padding=(0, 2))
        table.add_column("Field", style="bold cyan")
        table.add_column("Value")
        for spec in form.FIELDS:
            label = spec.label + (" *" if spec.required else "")
            table.add_row(label, escape(str(form.values.get(spec.name) or "")))
        self.console.print(Panel(table, title="Add new players here", border_style="blue", expand=False))


class MemorySurface:
    """Keeps every screen and message in memory instead of drawing them."""

    def __init__(self):
        self.screens: list[Screen] = []
        self.messages: list[tuple[str, bool]] = []
        self.forms: list["NewPlayerForm"] = []

    @property
    def screen(self) -> Optional[Screen]:
        return self.screens[-1] if self.screens else None

    def replace(self, screen: Screen) -> None:
        self.screens.append(screen)

    def notify(self, message: str, error: bool = False) -> None:
        self.messages.append((message, error))

    def show_form(self, form: "NewPlayerForm") -> None:
        self.forms.append(form)
