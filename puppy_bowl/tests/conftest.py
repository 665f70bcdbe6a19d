"""Shared fixtures for the roster client tests."""

import pytest

from puppy_bowl.config import Config
from puppy_bowl.services.api import PuppyBowlAPIClient
from puppy_bowl.tests.fakes import FakeRosterAPI
from puppy_bowl.views.surface import MemorySurface


@pytest.fixture
def config():
    return Config(api_root="https://test.local/api", cohort_name="test-cohort")


@pytest.fixture
def sample_players():
    return [
        {
            "id": 1,
            "name": "Rex",
            "breed": "Boxer",
            "status": "field",
            "imageUrl": "https://img.test/rex.png",
            "team": {"id": 7, "name": "Ruff"},
        },
        {
            "id": 2,
            "name": "Bella",
            "breed": None,
            "status": "bench",
            "imageUrl": "https://img.test/bella.png",
            "team": None,
        },
    ]


@pytest.fixture
def fake_api(sample_players):
    return FakeRosterAPI(sample_players)


@pytest.fixture
def client(config, fake_api):
    return PuppyBowlAPIClient(config, transport=fake_api.transport, retry_backoff=0)


@pytest.fixture
def surface():
    return MemorySurface()
