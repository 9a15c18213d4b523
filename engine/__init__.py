"""
Progression engine.

Estimates one-rep maxes from logged sets and computes the next training
prescription for an exercise's configured progression scheme.

Usage:
    from engine import ProgressionService, calculate_1rm

    service = ProgressionService(exercises_repo, scheme_repo, log_repo)
    suggestion = service.compute_suggestion(exercise_id=1)
"""

from engine.core.one_rm import calculate_1rm
from engine.core.progression_service import ProgressionService

__all__ = [
    "ProgressionService",
    "calculate_1rm",
]
