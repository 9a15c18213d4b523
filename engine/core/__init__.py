"""
Core progression logic.

Contains:
- one_rm: 1RM formula library and weight rounding
- progression_schemes: STS, Double Progression and the two RPT schemes
- progression_service: suggestion selection over the repository ports
"""

from engine.core.one_rm import (
    calculate_1rm,
    calculate_1rm_for,
    round_half_away,
    round_to_increment,
    weight_for_1rm,
)
from engine.core.progression_schemes import (
    DoubleProgression,
    ProgressionScheme,
    RPTIndividualProgression,
    RPTTopSetProgression,
    STSProgression,
    build_scheme,
    get_next_suggestion,
)
from engine.core.progression_service import (
    ExerciseHistoryResponse,
    ProgressionService,
    SessionWith1RM,
    last_performed_log,
    order_completed_logs,
    select_last_completed_log,
)

__all__ = [
    # Formula library
    "calculate_1rm",
    "calculate_1rm_for",
    "round_half_away",
    "round_to_increment",
    "weight_for_1rm",
    # Schemes
    "ProgressionScheme",
    "STSProgression",
    "DoubleProgression",
    "RPTTopSetProgression",
    "RPTIndividualProgression",
    "build_scheme",
    "get_next_suggestion",
    # Service
    "ProgressionService",
    "ExerciseHistoryResponse",
    "SessionWith1RM",
    "order_completed_logs",
    "last_performed_log",
    "select_last_completed_log",
]
