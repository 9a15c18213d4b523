"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutLogRepository, create_test_logs

    repo = FakeWorkoutLogRepository()
    repo.seed_logs(create_test_logs(1, [[(8, 77.5)] * 3]))
"""
from typing import Optional

from domain.models import ProgressionParameters

from tests.fakes.exercises_repository import (
    BENCH_PRESS_ID,
    DUMBBELL_CURL_ID,
    FakeExercisesRepository,
)
from tests.fakes.progression_repository import (
    FakeProgressionSchemeRepository,
    FakeWorkoutLogRepository,
    create_test_logs,
)


# =============================================================================
# Factory Functions
# =============================================================================


def create_scheme_repo(
    exercise_id: int = 1,
    parameters: Optional[ProgressionParameters] = None,
) -> FakeProgressionSchemeRepository:
    """
    Create a FakeProgressionSchemeRepository, optionally with one scheme.

    Args:
        exercise_id: Exercise the scheme is configured for
        parameters: Scheme to configure, or None for an empty repository

    Returns:
        Pre-populated FakeProgressionSchemeRepository
    """
    repo = FakeProgressionSchemeRepository()
    if parameters is not None:
        repo.seed_scheme(exercise_id, parameters)
    return repo


__all__ = [
    # Seeded IDs
    "BENCH_PRESS_ID",
    "DUMBBELL_CURL_ID",
    # Fakes
    "FakeExercisesRepository",
    "FakeProgressionSchemeRepository",
    "FakeWorkoutLogRepository",
    # Factories
    "create_scheme_repo",
    "create_test_logs",
]
