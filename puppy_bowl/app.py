"""Application controller wiring the client to the views."""

from typing import Optional

from puppy_bowl.models.player import Player
from puppy_bowl.services.api import PuppyBowlAPIClient
from puppy_bowl.views.renderer import PlayerRenderer
from puppy_bowl.views.surface import Surface


class PuppyBowlApp:
    """Starts the roster app: first fetch, first render, form install."""

    def __init__(
        self,
        client: PuppyBowlAPIClient,
        surface: Surface,
        form_surface: Optional[Surface] = None
    ):
        self.client = client
        self.renderer = PlayerRenderer(client, surface, form_surface)

    async def start(self) -> list[Player]:
        players = await self.client.list_players()
        self.renderer.show_list(players)
        self.renderer.show_create_form()
        return players
