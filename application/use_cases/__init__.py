"""
Application Use Cases for the progression engine.

Use cases orchestrate domain logic and coordinate between ports. The only
one owned here is save-time validation of progression configuration; the
suggestion flow itself lives in engine.core.progression_service.

Usage:
    from application.use_cases import ValidateProgressionUseCase

    result = ValidateProgressionUseCase().execute(
        {"scheme": "STS", "minSets": 3, "maxSets": 5, "minReps": 5, "maxReps": 8,
         "restBetweenSets": 90, "restBetweenExercises": 180}
    )
"""

from application.use_cases.validate_progression import (
    ValidateProgressionResult,
    ValidateProgressionUseCase,
    validate_progression_parameters,
)

__all__ = [
    "ValidateProgressionUseCase",
    "ValidateProgressionResult",
    "validate_progression_parameters",
]
