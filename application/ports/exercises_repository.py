"""
Exercises Repository Interface (Port).

This module defines the abstract interface for reading exercise equipment
metadata from the exercise catalog. The catalog owns the data; the
progression engine only reads it.
"""
from typing import Protocol, Optional

from domain.models import ExerciseProfile


class ExercisesRepository(Protocol):
    """
    Abstract interface for reading exercise metadata.

    Used by the ProgressionService to look up the starting weight and
    increment size of the exercise being prescribed.
    """

    def get_exercise(self, exercise_id: int) -> Optional[ExerciseProfile]:
        """
        Get an exercise's equipment profile by ID.

        Args:
            exercise_id: The exercise ID

        Returns:
            ExerciseProfile or None if not found
        """
        ...
