"""Test configuration and fixtures for the workout generator API."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from src.domains.generator.schemas import WorkoutProfile
from src.main import create_app


@pytest.fixture(scope="function")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client for a fresh application."""
    app = create_app()

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def profile_payload() -> dict[str, Any]:
    """Raw form submission for a valid profile."""
    return {
        "name": "Ana Souza",
        "age": 30,
        "weight": 62.5,
        "height": 165,
        "goal": "muscle_gain",
        "level": "intermediate",
        "time_available": "45",
        "days_per_week": "4 dias",
        "equipment": ["Halteres", "Peso corporal"],
        "limitations": "Dor leve no joelho esquerdo",
    }


@pytest.fixture
def sample_profile(profile_payload: dict[str, Any]) -> WorkoutProfile:
    """Validated profile built from the sample payload."""
    return WorkoutProfile(**profile_payload)


@pytest.fixture
def make_profile(profile_payload: dict[str, Any]):
    """Build profiles that bypass validation, as a caller skipping the form would."""

    def _make(**overrides: Any) -> WorkoutProfile:
        return WorkoutProfile.model_construct(**{**profile_payload, **overrides})

    return _make
