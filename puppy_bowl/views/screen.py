"""View models placed on a presentation surface."""

from enum import Enum
from typing import Awaitable, Callable, Optional
from pydantic import BaseModel, Field

from puppy_bowl.models.player import Player


class ViewState(str, Enum):
    LIST = "list"
    DETAIL = "detail"


class ActionKind(str, Enum):
    VIEW_DETAIL = "view_detail"
    REMOVE = "remove"
    BACK = "back"


class CardAction(BaseModel):
    """A button on a card, bound to one player."""

    label: str
    kind: ActionKind
    player_id: int
    handler: Callable[[], Awaitable[object]]

    async def invoke(self):
        return await self.handler()


class PlayerCard(BaseModel):
    """One player's card: a title, text lines and its actions."""

    player: Player
    title: str
    lines: list[str]
    image_url: str = ""
    actions: list[CardAction] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join([self.title, *self.lines])

    def action(self, kind: ActionKind) -> Optional[CardAction]:
        """Find the card's action of the given kind."""
        for action in self.actions:
            if action.kind == kind:
                return action
        return None


class Screen(BaseModel):
    """Everything shown on the presentation surface at one time."""

    state: ViewState
    cards: list[PlayerCard] = Field(default_factory=list)
    message: Optional[str] = None

    @property
    def actions(self) -> list[CardAction]:
        return [action for card in self.cards for action in card.actions]
