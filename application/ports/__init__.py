"""
Repository Interfaces (Ports) for the progression engine.

This package defines abstract interfaces that decouple the engine from
infrastructure (database, external services). Implementations are provided
by the surrounding application.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the engine needs)
- Adapters: Concrete implementations outside this package (how it's provided)

Usage:
    from application.ports import ExercisesRepository, WorkoutLogRepository

    class ProgressionService:
        def __init__(self, exercises_repo: ExercisesRepository, ...):
            self._exercises_repo = exercises_repo
"""

# Exercise catalog
from application.ports.exercises_repository import ExercisesRepository

# Configured schemes and logged history
from application.ports.progression_repository import (
    ProgressionSchemeRepository,
    WorkoutLogRepository,
)

__all__ = [
    # Exercise catalog
    "ExercisesRepository",
    # Progression
    "ProgressionSchemeRepository",
    "WorkoutLogRepository",
]
