"""Player data models."""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

PlayerStatus = Literal["field", "bench"]

STATUS_CHOICES: tuple[str, ...] = ("field", "bench")
UNKNOWN_BREED = "Unknown"
UNASSIGNED_TEAM = "Unassigned"


class Team(BaseModel):
    """Team a player can be assigned to."""

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    name: str


class Player(BaseModel):
    """Roster player as returned by the Puppy Bowl API."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: int
    name: str = ""
    image_url: Optional[str] = Field(None, alias="imageUrl")
    breed: Optional[str] = None
    status: Optional[str] = None
    team: Optional[Team] = None

    @classmethod
    def from_api_response(cls, data: dict) -> "Player":
        """Create Player from API response."""
        return cls.model_validate(data)

    @property
    def display_breed(self) -> str:
        """Get display-friendly breed."""
        return self.breed or UNKNOWN_BREED

    @property
    def display_team(self) -> str:
        """Get display-friendly team name."""
        return self.team.name if self.team else UNASSIGNED_TEAM

    @property
    def display_image(self) -> str:
        return self.image_url or ""


class PlayerInput(BaseModel):
    """Candidate player sent to the API on creation."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    image_url: str = Field("", alias="imageUrl")
    breed: str = UNKNOWN_BREED
    status: PlayerStatus = "field"

    def to_payload(self) -> dict:
        """Serialize with the API's field names."""
        return self.model_dump(by_alias=True)
