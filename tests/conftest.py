"""
Pytest fixtures for progression engine tests.
"""

import pytest

from engine.core.progression_service import ProgressionService
from engine.settings import Settings
from tests.fakes import (
    BENCH_PRESS_ID,
    DUMBBELL_CURL_ID,
    FakeExercisesRepository,
    FakeProgressionSchemeRepository,
    FakeWorkoutLogRepository,
)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with defaults only, ignoring any local .env file."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture
def exercises_repo() -> FakeExercisesRepository:
    """Exercise catalog with a barbell (20 / 2.5) and a dumbbell (2.5 / 1) exercise."""
    return FakeExercisesRepository()


@pytest.fixture
def scheme_repo() -> FakeProgressionSchemeRepository:
    return FakeProgressionSchemeRepository()


@pytest.fixture
def log_repo() -> FakeWorkoutLogRepository:
    return FakeWorkoutLogRepository()


@pytest.fixture
def service(exercises_repo, scheme_repo, log_repo, test_settings) -> ProgressionService:
    """ProgressionService wired to empty fakes."""
    return ProgressionService(
        exercises_repo=exercises_repo,
        scheme_repo=scheme_repo,
        log_repo=log_repo,
        settings=test_settings,
    )
