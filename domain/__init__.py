"""
Domain layer for the progression engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).
"""

from domain.models import (
    ExerciseLog,
    ExerciseProfile,
    ExerciseSet,
    ProgressionParameters,
    ProgressionSuggestion,
)

__all__ = [
    "ExerciseLog",
    "ExerciseProfile",
    "ExerciseSet",
    "ProgressionParameters",
    "ProgressionSuggestion",
]
