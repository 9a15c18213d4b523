"""
Progression Repository Interfaces (Ports).

This module defines the abstract interfaces the progression engine uses to
read a lifter's configured scheme and their logged history. Writing either
is the surrounding application's concern.
"""
from typing import Protocol, Optional, List

from domain.models import ExerciseLog, ProgressionParameters


class ProgressionSchemeRepository(Protocol):
    """
    Abstract interface for reading configured progression schemes.

    A scheme is configured per exercise when a workout day is created and is
    only edited between sessions.
    """

    def get_configured_scheme(self, exercise_id: int) -> Optional[ProgressionParameters]:
        """
        Get the progression parameters configured for an exercise.

        Args:
            exercise_id: The exercise ID

        Returns:
            The configured parameters, or None if the exercise has none
        """
        ...


class WorkoutLogRepository(Protocol):
    """
    Abstract interface for reading logged exercise sessions.

    Implementations should read with at least read-committed isolation so
    that a log being written is not seen half-complete.
    """

    def get_completed_logs(self, exercise_id: int) -> List[ExerciseLog]:
        """
        Get every completed log for an exercise.

        Order is not guaranteed; callers sort by (date, id).

        Args:
            exercise_id: The exercise ID

        Returns:
            List of completed ExerciseLog entries, possibly empty
        """
        ...
