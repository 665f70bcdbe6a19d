"""Tests for data models."""

import pytest
from pydantic import ValidationError

from puppy_bowl.models.player import Player, PlayerInput
from puppy_bowl.models.result import ApiResult, FailureReason


class TestPlayer:
    """Test Player model."""

    def test_from_api_response(self):
        """Test Player creation from API response."""
        data = {
            "id": 4521,
            "name": "Crumpet",
            "breed": "American Staffordshire Terrier",
            "status": "field",
            "imageUrl": "https://img.test/crumpet.jpg",
            "createdAt": "2024-10-01T00:00:00.000Z",
            "teamId": 12,
            "cohortId": 300,
            "team": {"id": 12, "name": "Ruff", "score": 0},
        }

        player = Player.from_api_response(data)

        assert player.id == 4521
        assert player.image_url == "https://img.test/crumpet.jpg"
        assert player.team.name == "Ruff"
        assert player.display_team == "Ruff"
        assert player.model_extra["teamId"] == 12

    def test_stub_record(self):
        """Only the id is required on records coming back from the API."""
        player = Player.from_api_response({"id": 1, "name": "Rex", "status": "field"})

        assert player.image_url is None
        assert player.display_image == ""
        assert player.display_breed == "Unknown"
        assert player.display_team == "Unassigned"

    def test_missing_id_rejected(self):
        with pytest.raises(ValidationError):
            Player.from_api_response({"name": "Rex"})

    def test_empty_breed_falls_back(self):
        assert Player(id=1, breed="").display_breed == "Unknown"


class TestPlayerInput:
    """Test PlayerInput model."""

    def test_defaults_and_payload(self):
        candidate = PlayerInput(name="Scout", image_url="u")

        assert candidate.to_payload() == {
            "name": "Scout", "imageUrl": "u", "breed": "Unknown", "status": "field"
        }

    def test_accepts_wire_names(self):
        candidate = PlayerInput(name="Scout", imageUrl="u", status="bench")

        assert candidate.image_url == "u"
        assert candidate.status == "bench"

    def test_status_restricted(self):
        with pytest.raises(ValidationError):
            PlayerInput(name="Scout", image_url="u", status="kennel")


class TestApiResult:
    """Test ApiResult."""

    def test_success_unwraps_value(self):
        assert ApiResult.success([1, 2]).unwrap_or([]) == [1, 2]

    def test_failure_unwraps_default(self):
        result = ApiResult.failure(FailureReason.HTTP_STATUS, "HTTP 500", status_code=500)

        assert result.ok is False
        assert result.unwrap_or(None) is None
        assert result.reason == FailureReason.HTTP_STATUS
