"""New player form."""

from typing import TYPE_CHECKING, Optional
from pydantic import BaseModel, ConfigDict

from puppy_bowl.models.player import STATUS_CHOICES, UNKNOWN_BREED, Player, PlayerInput

if TYPE_CHECKING:
    from puppy_bowl.views.renderer import PlayerRenderer

MISSING_FIELDS_MESSAGE = "Please fill in all required fields."
CREATE_FAILED_MESSAGE = "Failed to add new player. Please try again."


class FieldSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    label: str
    required: bool = False


class NewPlayerForm:
    """Data-entry surface for adding a player.

    Values stay in the form until a submission succeeds, so a failed
    submission can be retried without retyping.
    """

    FIELDS = (
        FieldSpec(name="name", label="Player Name", required=True),
        FieldSpec(name="imageUrl", label="Image URL", required=True),
        FieldSpec(name="breed", label="Breed"),
        FieldSpec(name="status", label="Status"),
    )

    def __init__(self, renderer: "PlayerRenderer"):
        self.renderer = renderer
        self.values: dict[str, str] = {}
        self.reset()

    def reset(self) -> None:
        """Clear all inputs back to their defaults."""
        self.values = {"name": "", "imageUrl": "", "breed": "", "status": STATUS_CHOICES[0]}

    def fill(self, **values: Optional[str]) -> None:
        """Set input values; unknown field names are rejected."""
        known = {spec.name for spec in self.FIELDS}
        for key, value in values.items():
            if key not in known:
                raise KeyError(f"Unknown form field: {key}")
            self.values[key] = value or ""

    def missing_fields(self) -> list[str]:
        return [
            spec.name for spec in self.FIELDS
            if spec.required and not self.values.get(spec.name, "").strip()
        ]

    def build_candidate(self) -> PlayerInput:
        status = self.values.get("status") or STATUS_CHOICES[0]
        if status not in STATUS_CHOICES:
            raise ValueError(f"Status must be one of {', '.join(STATUS_CHOICES)}, got {status!r}")
        return PlayerInput(
            name=self.values["name"].strip(),
            image_url=self.values["imageUrl"].strip(),
            breed=self.values.get("breed", "").strip() or UNKNOWN_BREED,
            status=status
        )

    async def submit(self) -> Optional[Player]:
        """Validate, create the player, then refresh the roster view."""
        surface = self.renderer.form_surface

        if self.missing_fields():
            surface.notify(MISSING_FIELDS_MESSAGE, error=True)
            return None

        try:
            candidate = self.build_candidate()
        except ValueError as e:
            surface.notify(str(e), error=True)
            return None

        added = await self.renderer.client.create_player(candidate)
        if added is None:
            surface.notify(CREATE_FAILED_MESSAGE, error=True)
            return None

        await self.renderer.refresh()
        self.reset()
        surface.show_form(self)
        surface.notify(f'Player "{added.name}" added successfully!')
        return added
