"""
Domain models for the progression engine.

This package contains pure domain models that are independent of
infrastructure concerns (database, API, external services).

These models represent the core business concepts:
- ExerciseSet: One logged set (reps x weight)
- ExerciseProfile: Per-exercise equipment metadata (starting weight, increment)
- ExerciseLog: One logged session of an exercise
- ProgressionParameters: Tagged union of the four scheme configurations
- ProgressionSuggestion: The next prescription produced by the engine

Usage:
    >>> from domain.models import ExerciseSet, STSParameters

    >>> sets = [ExerciseSet(reps=8, weight=77.5)] * 3
    >>> params = STSParameters(min_sets=3, max_sets=5, min_reps=5, max_reps=8)

    >>> # Serialize to the camelCase wire shape
    >>> params.model_dump(by_alias=True)["minSets"]
    3
"""

from domain.models.equipment import PREDEFINED_EQUIPMENT, profile_for_equipment
from domain.models.exercise import (
    KG_TO_LB,
    LB_TO_KG,
    ExerciseLog,
    ExerciseProfile,
    ExerciseSet,
)
from domain.models.progression import (
    DEFAULT_PARAMETERS,
    DoubleProgressionParameters,
    ProgressionParameters,
    ProgressionSchemeName,
    ProgressionSuggestion,
    RepRange,
    RPTIndividualParameters,
    RPTTopSetParameters,
    STSParameters,
)

__all__ = [
    # Exercise data
    "ExerciseSet",
    "ExerciseProfile",
    "ExerciseLog",
    "KG_TO_LB",
    "LB_TO_KG",
    # Equipment presets
    "PREDEFINED_EQUIPMENT",
    "profile_for_equipment",
    # Progression configuration
    "ProgressionParameters",
    "ProgressionSchemeName",
    "STSParameters",
    "DoubleProgressionParameters",
    "RPTTopSetParameters",
    "RPTIndividualParameters",
    "RepRange",
    "DEFAULT_PARAMETERS",
    # Output
    "ProgressionSuggestion",
]
