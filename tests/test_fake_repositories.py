"""
Unit tests for fake repository implementations.

These tests verify that fake repositories:
- Correctly implement Protocol interfaces
- Support seeding and reset for test isolation
- Return expected values for all operations
"""
import pytest
from datetime import datetime

from domain.models import ExerciseLog, ExerciseProfile, ExerciseSet, STSParameters

# All tests in this module are pure logic tests - mark as unit
pytestmark = pytest.mark.unit


# =============================================================================
# Import Tests
# =============================================================================


class TestFakeImports:
    """Test that all fake repositories can be imported."""

    def test_import_fakes(self):
        from tests.fakes import (
            FakeExercisesRepository,
            FakeProgressionSchemeRepository,
            FakeWorkoutLogRepository,
        )
        assert all([
            FakeExercisesRepository,
            FakeProgressionSchemeRepository,
            FakeWorkoutLogRepository,
        ])

    def test_import_factory_functions(self):
        from tests.fakes import create_scheme_repo, create_test_logs
        assert all([create_scheme_repo, create_test_logs])


# =============================================================================
# FakeExercisesRepository Tests
# =============================================================================


class TestFakeExercisesRepository:
    """Tests for FakeExercisesRepository."""

    def test_default_exercises(self):
        from tests.fakes import BENCH_PRESS_ID, DUMBBELL_CURL_ID, FakeExercisesRepository

        repo = FakeExercisesRepository()

        assert repo.get_exercise(BENCH_PRESS_ID).increment_size == 2.5
        assert repo.get_exercise(DUMBBELL_CURL_ID).increment_size == 1.0
        assert repo.get_exercise(999) is None

    def test_custom_exercises(self):
        from tests.fakes import FakeExercisesRepository

        repo = FakeExercisesRepository([
            ExerciseProfile(id=10, name="Deadlift", starting_weight=60, increment_size=5),
        ])

        assert repo.get_exercise(10).name == "Deadlift"
        assert repo.get_exercise(1) is None

    def test_seed_and_reset(self):
        from tests.fakes import FakeExercisesRepository

        repo = FakeExercisesRepository([])
        repo.seed([ExerciseProfile(id=3, starting_weight=10, increment_size=1)])
        assert repo.get_exercise(3) is not None

        repo.reset()
        assert repo.get_exercise(3) is None


# =============================================================================
# FakeProgressionSchemeRepository Tests
# =============================================================================


class TestFakeProgressionSchemeRepository:
    """Tests for FakeProgressionSchemeRepository."""

    def test_unconfigured_returns_none(self):
        from tests.fakes import FakeProgressionSchemeRepository

        assert FakeProgressionSchemeRepository().get_configured_scheme(1) is None

    def test_seed_and_reset(self):
        from tests.fakes import FakeProgressionSchemeRepository

        repo = FakeProgressionSchemeRepository()
        repo.seed_scheme(1, STSParameters(max_sets=5))
        assert repo.get_configured_scheme(1).max_sets == 5

        repo.reset()
        assert repo.get_configured_scheme(1) is None

    def test_create_scheme_repo(self):
        from tests.fakes import create_scheme_repo

        assert create_scheme_repo().get_configured_scheme(1) is None
        repo = create_scheme_repo(4, STSParameters())
        assert repo.get_configured_scheme(4).scheme == "STS"


# =============================================================================
# FakeWorkoutLogRepository Tests
# =============================================================================


class TestFakeWorkoutLogRepository:
    """Tests for FakeWorkoutLogRepository."""

    def test_logs_grouped_by_exercise(self):
        from tests.fakes import FakeWorkoutLogRepository, create_test_logs

        repo = FakeWorkoutLogRepository()
        repo.seed_logs(create_test_logs(1, [[(8, 50)], [(8, 52.5)]]))
        repo.seed_logs(create_test_logs(2, [[(10, 8)]], first_id=10))

        assert len(repo.get_completed_logs(1)) == 2
        assert len(repo.get_completed_logs(2)) == 1
        assert repo.get_completed_logs(3) == []

    def test_incomplete_logs_filtered(self):
        from tests.fakes import FakeWorkoutLogRepository

        repo = FakeWorkoutLogRepository()
        repo.seed_logs([
            ExerciseLog(
                id=1,
                exercise_id=1,
                date=datetime(2024, 1, 1),
                sets=[ExerciseSet(reps=3, weight=50)],
                is_complete=False,
            ),
        ])

        assert repo.get_completed_logs(1) == []

    def test_records_calls(self):
        from tests.fakes import FakeWorkoutLogRepository

        repo = FakeWorkoutLogRepository()
        repo.get_completed_logs(1)
        repo.get_completed_logs(2)
        assert repo.calls == [1, 2]

        repo.reset()
        assert repo.calls == []

    def test_create_test_logs(self):
        from tests.fakes import create_test_logs

        logs = create_test_logs(1, [[(8, 50)] * 3, [(8, 52.5)] * 3], first_id=5)

        assert [log.id for log in logs] == [5, 6]
        assert logs[1].date > logs[0].date
        assert len(logs[0].sets) == 3
        assert logs[1].sets[0].weight == 52.5


# =============================================================================
# Protocol Compliance Tests
# =============================================================================


class TestProtocolCompliance:
    """Verify fakes have all methods defined by Protocols."""

    @pytest.mark.parametrize(
        "fake_name, protocol_name",
        [
            ("FakeExercisesRepository", "ExercisesRepository"),
            ("FakeProgressionSchemeRepository", "ProgressionSchemeRepository"),
            ("FakeWorkoutLogRepository", "WorkoutLogRepository"),
        ],
    )
    def test_fake_has_all_protocol_methods(self, fake_name, protocol_name):
        import application.ports as ports
        import tests.fakes as fakes

        protocol = getattr(ports, protocol_name)
        fake = getattr(fakes, fake_name)
        methods = [
            name for name, value in vars(protocol).items()
            if callable(value) and not name.startswith("_")
        ]

        assert methods
        for method in methods:
            assert hasattr(fake, method), f"{fake_name} missing {method}"
