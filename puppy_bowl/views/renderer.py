"""List and detail views for the roster."""

from typing import Optional, Sequence
from rich.console import Console

from puppy_bowl.models.player import Player
from puppy_bowl.services.api import PuppyBowlAPIClient
from puppy_bowl.views.form import NewPlayerForm
from puppy_bowl.views.screen import ActionKind, CardAction, PlayerCard, Screen, ViewState
from puppy_bowl.views.surface import Surface

console = Console(stderr=True)

EMPTY_ROSTER_MESSAGE = "No players on the roster."


class PlayerRenderer:
    """Draws players onto a surface and wires card actions back to the API.

    The surface is always replaced wholesale. Actions that mutate the roster
    re-fetch the full list before redrawing, so what is shown always comes
    from the last successful fetch.
    """

    def __init__(
        self,
        client: PuppyBowlAPIClient,
        surface: Surface,
        form_surface: Optional[Surface] = None
    ):
        self.client = client
        self.surface = surface
        self.form_surface = form_surface or surface
        self.state = ViewState.LIST
        self.screen: Optional[Screen] = None
        self.form: Optional[NewPlayerForm] = None

    def _list_card(self, player: Player) -> PlayerCard:
        card = PlayerCard(
            player=player,
            title=player.name,
            lines=[f"ID: {player.id}", f"Status: {player.status}"],
            image_url=player.display_image
        )
        card.actions = [
            CardAction(label="See details", kind=ActionKind.VIEW_DETAIL, player_id=player.id,
                       handler=lambda: self.view_detail(player)),
            CardAction(label="Remove from roster", kind=ActionKind.REMOVE, player_id=player.id,
                       handler=lambda: self.remove_player(player.id)),
        ]
        return card

    def _detail_card(self, player: Player) -> PlayerCard:
        card = PlayerCard(
            player=player,
            title=player.name,
            lines=[
                f"ID: {player.id}",
                f"Breed: {player.display_breed}",
                f"Team: {player.display_team}",
            ],
            image_url=player.display_image
        )
        card.actions = [
            CardAction(label="Back to all players", kind=ActionKind.BACK, player_id=player.id,
                       handler=self.back_to_list),
        ]
        return card

    def _replace(self, screen: Screen) -> None:
        self.screen = screen
        self.state = screen.state
        self.surface.replace(screen)

    def show_list(self, players: Sequence[Player]) -> Screen:
        """Replace the surface with one card per player."""
        cards = [self._list_card(player) for player in players]
        screen = Screen(
            state=ViewState.LIST,
            cards=cards,
            message=None if cards else EMPTY_ROSTER_MESSAGE
        )
        self._replace(screen)
        return screen

    def show_detail(self, player: Player) -> Screen:
        """Replace the surface with a single detailed card."""
        screen = Screen(state=ViewState.DETAIL, cards=[self._detail_card(player)])
        self._replace(screen)
        return screen

    def show_create_form(self) -> NewPlayerForm:
        """Install the new-player form on the form surface."""
        self.form = NewPlayerForm(self)
        self.form_surface.show_form(self.form)
        return self.form

    async def refresh(self) -> Screen:
        """Re-fetch the roster and redraw the list."""
        players = await self.client.list_players()
        return self.show_list(players)

    async def view_detail(self, player: Player) -> Screen:
        """Switch to the detail view using the in-memory record."""
        return self.show_detail(player)

    async def remove_player(self, player_id: int) -> bool:
        """Delete a player; on success re-fetch and redraw the list."""
        removed = await self.client.delete_player(player_id)
        if not removed:
            console.print(f"[yellow]Player #{player_id} was not removed; keeping current list[/yellow]")
            return False

        await self.refresh()
        return True

    async def back_to_list(self) -> Screen:
        """Leave the detail view by re-fetching the full list."""
        return await self.refresh()
