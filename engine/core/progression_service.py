"""
Progression Service for exercise suggestions.

This module bridges an exercise, its logged history and its configured
progression scheme to the next prescription:
- 1RM estimation from logged sets
- Next-session suggestion for the configured scheme
- Exercise history enriched with estimated 1RM

The service is a pure function of what its repositories return. It holds
no mutable state, so one instance can serve concurrent requests.
"""
from typing import Optional, List, Sequence, Union
from dataclasses import dataclass, field
import logging

from application.exceptions import ExerciseNotFoundError, NoQualifyingCandidateError
from application.ports import (
    ExercisesRepository,
    ProgressionSchemeRepository,
    WorkoutLogRepository,
)
from domain.models import (
    DEFAULT_PARAMETERS,
    ExerciseLog,
    ExerciseProfile,
    ExerciseSet,
    ProgressionParameters,
    ProgressionSchemeName,
    ProgressionSuggestion,
)
from engine.core.one_rm import calculate_1rm, calculate_1rm_for, round_to_increment
from engine.core.progression_schemes import (
    RPTIndividualProgression,
    RPTTopSetProgression,
    STSProgression,
    build_scheme,
)
from engine.settings import Settings, get_settings

logger = logging.getLogger(__name__)

SuggestionResult = Union[ProgressionSuggestion, List[ProgressionSuggestion]]


# =============================================================================
# History ordering
# =============================================================================


def order_completed_logs(logs: Sequence[ExerciseLog]) -> List[ExerciseLog]:
    """
    Completed logs, oldest first.

    Sorted by date with the log id breaking ties, so two logs on the same
    timestamp always come out in the order they were written.
    """
    completed = [log for log in logs if log.is_complete]
    return sorted(completed, key=lambda log: (log.date, log.id))


def select_last_completed_log(logs: Sequence[ExerciseLog]) -> Optional[ExerciseLog]:
    """The most recent completed log, or None without history."""
    ordered = order_completed_logs(logs)
    return ordered[-1] if ordered else None


def last_performed_log(history: Sequence[ExerciseLog]) -> Optional[ExerciseLog]:
    """
    The most recent log with at least one set, from oldest-first history.

    Completed logs without sets (a skipped exercise) carry no performance
    and are passed over.
    """
    for log in reversed(history):
        if log.sets:
            return log
    return None


# =============================================================================
# Response DTOs
# =============================================================================


@dataclass
class SessionWith1RM:
    """A logged session with its estimated 1RM."""
    log_id: int
    workout_date: str
    sets: List[ExerciseSet] = field(default_factory=list)
    extra_set_reps: Optional[int] = None
    estimated_1rm: Optional[float] = None
    session_max_weight: Optional[float] = None
    session_total_volume: Optional[float] = None


@dataclass
class ExerciseHistoryResponse:
    """Logged history of one exercise, newest session first."""
    exercise_id: int
    exercise_name: str
    sessions: List[SessionWith1RM]
    total_sessions: int
    all_time_best_1rm: Optional[float] = None
    all_time_max_weight: Optional[float] = None


# =============================================================================
# Progression Service
# =============================================================================


class ProgressionService:
    """
    Service selecting the next prescription for an exercise.

    Resolves the configured scheme, derives the last known value and
    failure information from the most recent completed logs, and asks the
    scheme for its suggestion. An STS scheme that cannot find a qualifying
    candidate is recovered here with a fallback prescription so that a
    workout can always start.
    """

    def __init__(
        self,
        exercises_repo: ExercisesRepository,
        scheme_repo: ProgressionSchemeRepository,
        log_repo: WorkoutLogRepository,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the progression service.

        Args:
            exercises_repo: Repository for exercise equipment metadata
            scheme_repo: Repository for configured progression schemes
            log_repo: Repository for logged sessions
            settings: Engine settings, defaults to get_settings()
        """
        self._exercises_repo = exercises_repo
        self._scheme_repo = scheme_repo
        self._log_repo = log_repo
        self._settings = settings or get_settings()

    def estimate_1rm(
        self,
        sets: Sequence[ExerciseSet],
        extra_set_reps: Optional[int] = None,
    ) -> float:
        """
        Estimate a 1RM from logged sets.

        Args:
            sets: Sets in the order they were performed
            extra_set_reps: Reps of an optional bonus set taken to failure

        Returns:
            Estimated 1RM, 0 for no sets
        """
        return calculate_1rm(sets, extra_set_reps)

    def get_scheme_parameters(self, exercise_id: int) -> ProgressionParameters:
        """Configured parameters for an exercise, STS defaults when none are set."""
        params = self._scheme_repo.get_configured_scheme(exercise_id)
        if params is None:
            logger.info(f"No scheme configured for exercise {exercise_id}, using STS defaults")
            return DEFAULT_PARAMETERS[ProgressionSchemeName.STS]
        return params

    def compute_suggestion(self, exercise_id: int) -> SuggestionResult:
        """
        Compute the next prescription for an exercise.

        STS returns its ordered candidate list (smallest progress first) and
        Double Progression returns [repeat, advance]. The RPT schemes return
        a single suggestion carrying per-set weights and rep targets.

        Args:
            exercise_id: Exercise ID

        Returns:
            ProgressionSuggestion or ordered list of them

        Raises:
            ExerciseNotFoundError: If the exercise is not in the catalog
        """
        exercise = self._exercises_repo.get_exercise(exercise_id)
        if exercise is None:
            logger.warning(f"Exercise not found: {exercise_id}")
            raise ExerciseNotFoundError(exercise_id)

        params = self.get_scheme_parameters(exercise_id)
        history = order_completed_logs(self._log_repo.get_completed_logs(exercise_id))
        scheme = build_scheme(params, self._settings)
        scheme_name = ProgressionSchemeName(params.scheme)

        if scheme_name is ProgressionSchemeName.STS:
            return self._suggest_sts(scheme, exercise, history)

        last_weight = self._last_weight(scheme_name, exercise, history)
        failure_info = None
        if isinstance(scheme, RPTTopSetProgression):
            failure_info = self._consecutive_top_set_failures(scheme, history)
        elif isinstance(scheme, RPTIndividualProgression):
            failure_info = self._failed_sets(scheme, history)

        suggestions = scheme.get_next_suggestion(
            last_weight, exercise.increment_size, failure_info
        )
        logger.debug(
            f"{scheme_name.value} suggestion for exercise {exercise_id}: "
            f"last weight {last_weight}, failures {failure_info}"
        )

        if scheme_name is ProgressionSchemeName.DOUBLE_PROGRESSION:
            return suggestions
        return suggestions[0]

    # -------------------------------------------------------------------------
    # STS
    # -------------------------------------------------------------------------

    def last_known_1rm(
        self,
        scheme: STSProgression,
        exercise: ExerciseProfile,
        history: Sequence[ExerciseLog],
    ) -> float:
        """
        1RM the next STS session has to beat.

        Taken from the most recent completed log with sets. Without usable
        history the starting weight is converted to the 1RM of performing
        it for the scheme's minimum sets and reps.
        """
        last = last_performed_log(history)
        if last is not None:
            one_rm = calculate_1rm(last.sets, last.extra_set_reps)
            if one_rm > 0:
                return one_rm
        return calculate_1rm_for(exercise.starting_weight, scheme.min_reps, scheme.min_sets)

    def _suggest_sts(
        self,
        scheme: STSProgression,
        exercise: ExerciseProfile,
        history: Sequence[ExerciseLog],
    ) -> List[ProgressionSuggestion]:
        last_1rm = self.last_known_1rm(scheme, exercise, history)
        increment = exercise.increment_size

        try:
            return scheme.get_next_suggestion(last_1rm, increment)
        except NoQualifyingCandidateError:
            logger.warning(
                f"No STS candidate exceeds 1RM {last_1rm} (increment {increment}), "
                "accepting equal progress"
            )

        try:
            return scheme.get_next_suggestion(last_1rm, increment, allow_equal=True)
        except NoQualifyingCandidateError:
            logger.warning(
                f"No STS candidate matches 1RM {last_1rm}, "
                f"falling back to starting weight {exercise.starting_weight}"
            )

        return [self.default_prescription(scheme, exercise)]

    def default_prescription(
        self,
        scheme: STSProgression,
        exercise: ExerciseProfile,
    ) -> ProgressionSuggestion:
        """Minimum sets and reps at the starting weight."""
        weight = round_to_increment(exercise.starting_weight, exercise.increment_size)
        return ProgressionSuggestion(
            sets=scheme.min_sets,
            reps=scheme.min_reps,
            weight=weight,
            calculated_1rm=calculate_1rm_for(weight, scheme.min_reps, scheme.min_sets),
        )

    # -------------------------------------------------------------------------
    # Weight-based schemes
    # -------------------------------------------------------------------------

    def _last_weight(
        self,
        scheme_name: ProgressionSchemeName,
        exercise: ExerciseProfile,
        history: Sequence[ExerciseLog],
    ) -> float:
        """
        Raw weight last used, or the starting weight without history.

        RPT Top-Set reads the top (first) set; the other schemes read the
        heaviest set of the session. Logs without sets are skipped.
        """
        last = last_performed_log(history)
        if last is None:
            return exercise.starting_weight

        if scheme_name is ProgressionSchemeName.RPT_TOP_SET:
            return last.top_set.weight
        return last.heaviest_weight

    def _consecutive_top_set_failures(
        self,
        scheme: RPTTopSetProgression,
        history: Sequence[ExerciseLog],
    ) -> int:
        """
        Most recent sessions in a row whose top set missed the rep range.

        Logs without sets are neither failures nor successes.
        """
        failures = 0
        for log in reversed(history):
            top = log.top_set
            if top is None:
                continue
            if top.reps >= scheme.min_reps:
                break
            failures += 1
        return failures

    def _failed_sets(
        self,
        scheme: RPTIndividualProgression,
        history: Sequence[ExerciseLog],
    ) -> List[bool]:
        """Per-set flags: did that set fall short of its own rep window last time."""
        last = last_performed_log(history)
        if last is None:
            return [False] * scheme.sets

        sets = last.sets
        return [
            index < len(sets) and sets[index].reps < config.min
            for index, config in enumerate(scheme.set_configs)
        ]

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def get_exercise_history(
        self,
        exercise_id: int,
        *,
        limit: int = 20,
        offset: int = 0,
    ) -> Optional[ExerciseHistoryResponse]:
        """
        Get exercise history with 1RM calculations.

        Args:
            exercise_id: Exercise ID
            limit: Maximum sessions to return
            offset: Pagination offset

        Returns:
            ExerciseHistoryResponse or None if exercise not found
        """
        exercise = self._exercises_repo.get_exercise(exercise_id)
        if exercise is None:
            logger.warning(f"Exercise not found: {exercise_id}")
            return None

        history = list(reversed(order_completed_logs(
            self._log_repo.get_completed_logs(exercise_id)
        )))

        # All-time bests cover every session, not just the returned page
        all_time_best_1rm = 0.0
        all_time_max_weight = 0.0
        sessions: List[SessionWith1RM] = []
        for index, log in enumerate(history):
            estimated = calculate_1rm(log.sets, log.extra_set_reps)
            max_weight = log.heaviest_weight
            all_time_best_1rm = max(all_time_best_1rm, estimated)
            all_time_max_weight = max(all_time_max_weight, max_weight)

            if not offset <= index < offset + limit:
                continue

            volume = sum(s.weight * s.reps for s in log.sets)
            sessions.append(SessionWith1RM(
                log_id=log.id,
                workout_date=log.date.isoformat(),
                sets=list(log.sets),
                extra_set_reps=log.extra_set_reps,
                estimated_1rm=estimated if estimated > 0 else None,
                session_max_weight=max_weight if max_weight > 0 else None,
                session_total_volume=round(volume, 1) if volume > 0 else None,
            ))

        return ExerciseHistoryResponse(
            exercise_id=exercise_id,
            exercise_name=exercise.name,
            sessions=sessions,
            total_sessions=len(history),
            all_time_best_1rm=all_time_best_1rm if all_time_best_1rm > 0 else None,
            all_time_max_weight=all_time_max_weight if all_time_max_weight > 0 else None,
        )
