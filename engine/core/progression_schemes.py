"""
Progression schemes.

Each scheme turns the last known performance for an exercise into the next
prescription. All four share one capability:

    get_next_suggestion(last_known_value, increment_size, failure_info=None)
        -> List[ProgressionSuggestion]

The list is never empty and index 0 is the canonical pick. What
`last_known_value` means depends on the scheme:

- STS: the last estimated 1RM
- Double Progression: the last working weight
- RPT Top-Set / RPT Individual: the last top-set weight

Schemes are plain dataclasses built from their ProgressionParameters by
`build_scheme()`, which dispatches on the parameters' `scheme` tag.
Degenerate parameters (min above max, list lengths not matching `sets`)
are clamped with a warning rather than rejected; rejecting them is the
save-time validator's job.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Protocol, Sequence, Tuple, Union

from application.exceptions import NoQualifyingCandidateError
from domain.models import (
    DoubleProgressionParameters,
    ExerciseSet,
    ProgressionParameters,
    ProgressionSchemeName,
    ProgressionSuggestion,
    RepRange,
    RPTIndividualParameters,
    RPTTopSetParameters,
    STSParameters,
)
from engine.core.one_rm import (
    calculate_1rm,
    calculate_1rm_for,
    round_half_away,
    round_to_increment,
    weight_for_1rm,
)
from engine.settings import Settings, get_settings

logger = logging.getLogger(__name__)

FailureInfo = Union[int, Sequence[bool], None]

DEFAULT_REP_RANGE = RepRange(min=6, max=8)


class ProgressionScheme(Protocol):
    """Capability shared by every progression scheme."""

    def get_next_suggestion(
        self,
        last_known_value: float,
        increment_size: float,
        failure_info: FailureInfo = None,
    ) -> List[ProgressionSuggestion]:
        ...


def _ordered(low: int, high: int, label: str) -> Tuple[int, int]:
    if low > high:
        logger.warning(f"Clamping {label}: min {low} > max {high}, swapping")
        return high, low
    return low, high


def _fit_length(values: list, length: int, filler, label: str) -> list:
    """Pad with the last value (or `filler`) and truncate to `length`."""
    if len(values) == length:
        return list(values)
    logger.warning(f"Clamping {label}: got {len(values)} entries, expected {length}")
    pad = values[-1] if values else filler
    return (list(values) + [pad] * length)[:length]


def _discounted(weight: float, percent: float) -> float:
    return weight * (100 - percent) / 100


# =============================================================================
# STS
# =============================================================================


@dataclass
class STSProgression:
    """
    Straight sets with a set bonus.

    For every (sets, reps) combination in range the 1RM formula is solved
    for weight, that weight is snapped to the increment grid (and the
    neighbouring `search_window` increments on each side are tried too),
    and the 1RM at the snapped weight is recomputed. Only combinations
    whose recomputed 1RM beats the last one survive; the smallest
    improvements come first.
    """

    min_sets: int = 3
    max_sets: int = 5
    min_reps: int = 5
    max_reps: int = 8
    max_suggestions: int = 10
    search_window: int = 2
    epsilon: float = 1e-6

    def __post_init__(self):
        self.min_sets = max(self.min_sets, 1)
        self.max_sets = max(self.max_sets, 1)
        self.min_reps = max(self.min_reps, 1)
        self.max_reps = max(self.max_reps, 1)
        self.min_sets, self.max_sets = _ordered(self.min_sets, self.max_sets, "STS sets")
        self.min_reps, self.max_reps = _ordered(self.min_reps, self.max_reps, "STS reps")

    @classmethod
    def from_parameters(
        cls, params: STSParameters, settings: Optional[Settings] = None
    ) -> "STSProgression":
        settings = settings or get_settings()
        return cls(
            min_sets=params.min_sets,
            max_sets=params.max_sets,
            min_reps=params.min_reps,
            max_reps=params.max_reps,
            max_suggestions=settings.sts_max_suggestions,
            search_window=settings.sts_search_window,
            epsilon=settings.progression_epsilon,
        )

    def calculate_1rm(
        self, sets: Sequence[ExerciseSet], extra_set_reps: Optional[int] = None
    ) -> float:
        return calculate_1rm(sets, extra_set_reps)

    def _progresses(self, one_rm: float, last_1rm: float, allow_equal: bool) -> bool:
        if allow_equal:
            return one_rm >= last_1rm - self.epsilon
        return one_rm > last_1rm + self.epsilon

    def candidates(
        self,
        last_1rm: float,
        increment_size: float,
        *,
        allow_equal: bool = False,
    ) -> List[ProgressionSuggestion]:
        """
        Every qualifying prescription, smallest improvement first.

        Ties on the 1RM are broken by fewer sets, then fewer reps, then
        lighter weight, so the order is fully deterministic.
        """
        seen = set()
        found: List[ProgressionSuggestion] = []

        for sets in range(self.min_sets, self.max_sets + 1):
            for reps in range(self.min_reps, self.max_reps + 1):
                base_weight = weight_for_1rm(last_1rm, reps, sets)
                for offset in range(-self.search_window, self.search_window + 1):
                    weight = round_to_increment(
                        base_weight + offset * increment_size, increment_size
                    )
                    if (sets, reps, weight) in seen:
                        continue
                    seen.add((sets, reps, weight))

                    one_rm = calculate_1rm_for(weight, reps, sets)
                    if self._progresses(one_rm, last_1rm, allow_equal):
                        found.append(
                            ProgressionSuggestion(
                                sets=sets,
                                reps=reps,
                                weight=weight,
                                calculated_1rm=one_rm,
                            )
                        )

        found.sort(key=lambda s: (s.calculated_1rm, s.sets, s.reps, s.weight))
        return found

    def get_next_suggestion(
        self,
        last_known_value: float,
        increment_size: float,
        failure_info: FailureInfo = None,
        *,
        allow_equal: bool = False,
    ) -> List[ProgressionSuggestion]:
        """
        Next STS prescriptions for a lifter whose last 1RM was `last_known_value`.

        Args:
            last_known_value: Last estimated 1RM
            increment_size: Smallest loadable weight step
            failure_info: Unused by STS
            allow_equal: Accept candidates that only match the last 1RM

        Returns:
            Up to `max_suggestions` prescriptions, smallest progress first

        Raises:
            NoQualifyingCandidateError: If no combination qualifies
        """
        found = self.candidates(last_known_value, increment_size, allow_equal=allow_equal)
        if not found:
            raise NoQualifyingCandidateError(last_known_value, increment_size)

        logger.debug(
            f"STS: {len(found)} candidates above 1RM {last_known_value}, "
            f"returning {min(len(found), self.max_suggestions)}"
        )
        return found[: self.max_suggestions]


# =============================================================================
# Double Progression
# =============================================================================


@dataclass
class DoubleProgression:
    """
    Fill the rep range at a fixed weight, then add one increment.

    Returns [repeat, advance]. The order is relied on by callers: index 0
    keeps the weight, index 1 adds an increment.
    """

    target_sets: int = 3
    min_reps: int = 8
    max_reps: int = 12

    def __post_init__(self):
        self.target_sets = max(self.target_sets, 1)
        self.min_reps, self.max_reps = _ordered(
            max(self.min_reps, 1), max(self.max_reps, 1), "Double Progression reps"
        )

    @classmethod
    def from_parameters(
        cls, params: DoubleProgressionParameters, settings: Optional[Settings] = None
    ) -> "DoubleProgression":
        return cls(
            target_sets=params.target_sets,
            min_reps=params.min_reps,
            max_reps=params.max_reps,
        )

    def _suggestion(self, weight: float) -> ProgressionSuggestion:
        return ProgressionSuggestion(
            sets=self.target_sets,
            reps=self.min_reps,
            weight=weight,
            calculated_1rm=calculate_1rm_for(weight, self.min_reps, self.target_sets),
        )

    def get_next_suggestion(
        self,
        last_known_value: float,
        increment_size: float,
        failure_info: FailureInfo = None,
    ) -> List[ProgressionSuggestion]:
        if not last_known_value or last_known_value <= 0:
            return [self._suggestion(increment_size)]

        repeat = round_to_increment(last_known_value, increment_size)
        advance = round_to_increment(repeat + increment_size, increment_size)
        return [self._suggestion(repeat), self._suggestion(advance)]


# =============================================================================
# Reverse Pyramid
# =============================================================================


@dataclass
class RPTTopSetProgression:
    """
    Reverse pyramid where back-off sets are a fixed percentage of the top set.

    `failure_info` is the number of consecutive sessions in which the top
    set missed its rep range. Once it reaches `failure_threshold` the top
    set is discounted before the back-off sets are derived.
    """

    sets: int = 3
    min_reps: int = 6
    max_reps: int = 8
    drop_percentages: List[float] = field(default_factory=lambda: [0.0, 10.0, 10.0])
    failure_threshold: int = 2
    failure_discount_percent: float = 10.0

    def __post_init__(self):
        self.sets = max(self.sets, 1)
        self.min_reps, self.max_reps = _ordered(
            max(self.min_reps, 1), max(self.max_reps, 1), "RPT Top-Set reps"
        )
        drops = _fit_length(list(self.drop_percentages), self.sets, 0.0, "dropPercentages")
        self.drop_percentages = [min(max(float(d), 0.0), 100.0) for d in drops]

    @classmethod
    def from_parameters(
        cls, params: RPTTopSetParameters, settings: Optional[Settings] = None
    ) -> "RPTTopSetProgression":
        settings = settings or get_settings()
        return cls(
            sets=params.sets,
            min_reps=params.min_reps,
            max_reps=params.max_reps,
            drop_percentages=list(params.drop_percentages),
            failure_threshold=settings.rpt_failure_threshold,
            failure_discount_percent=settings.rpt_failure_discount_percent,
        )

    def top_set_weight(
        self, last_top_set: float, increment_size: float, consecutive_failures: int
    ) -> float:
        """Top-set weight for the next session, on the increment grid."""
        if last_top_set <= 0:
            return increment_size
        weight = last_top_set
        if consecutive_failures >= self.failure_threshold:
            weight = _discounted(weight, self.failure_discount_percent)
            logger.debug(
                f"RPT Top-Set: {consecutive_failures} consecutive failures, "
                f"top set {last_top_set} -> {weight}"
            )
        return round_to_increment(weight, increment_size)

    def get_next_suggestion(
        self,
        last_known_value: float,
        increment_size: float,
        failure_info: FailureInfo = None,
    ) -> List[ProgressionSuggestion]:
        failures = failure_info if isinstance(failure_info, int) else 0
        top = self.top_set_weight(last_known_value, increment_size, failures)
        set_weights = [
            round_to_increment(round_half_away(_discounted(top, drop)), increment_size)
            for drop in self.drop_percentages
        ]
        rep_range = RepRange(min=self.min_reps, max=self.max_reps)
        return [
            ProgressionSuggestion(
                sets=self.sets,
                reps=self.min_reps,
                weight=top,
                calculated_1rm=calculate_1rm_for(top, self.min_reps, 1),
                set_weights=set_weights,
                rep_targets=[rep_range] * self.sets,
            )
        ]


@dataclass
class RPTIndividualProgression:
    """
    Reverse pyramid where each set has its own rep window and failure flag.

    `failure_info` holds one flag per set. A flagged set is discounted on
    its own; the other sets keep the base weight.

    The discounted weight is snapped to the increment grid like every other
    prescribed weight, so the cut is exactly 10% only when 90% of the base
    lands on the grid. At 80 with a 2.5 increment, 72 snaps to 72.5.
    """

    sets: int = 3
    set_configs: List[RepRange] = field(
        default_factory=lambda: [RepRange(min=6, max=8)] * 3
    )
    failure_discount_percent: float = 10.0

    def __post_init__(self):
        self.sets = max(self.sets, 1)
        configs = _fit_length(list(self.set_configs), self.sets, DEFAULT_REP_RANGE, "setConfigs")
        self.set_configs = [
            RepRange(min=c.min, max=c.max) if c.min <= c.max else RepRange(min=c.max, max=c.min)
            for c in configs
        ]

    @classmethod
    def from_parameters(
        cls, params: RPTIndividualParameters, settings: Optional[Settings] = None
    ) -> "RPTIndividualProgression":
        settings = settings or get_settings()
        return cls(
            sets=params.sets,
            set_configs=list(params.set_configs),
            failure_discount_percent=settings.rpt_failure_discount_percent,
        )

    def _flags(self, failure_info: FailureInfo) -> List[bool]:
        if failure_info is None or isinstance(failure_info, int):
            return [False] * self.sets
        flags = [bool(f) for f in failure_info][: self.sets]
        return flags + [False] * (self.sets - len(flags))

    def get_next_suggestion(
        self,
        last_known_value: float,
        increment_size: float,
        failure_info: FailureInfo = None,
    ) -> List[ProgressionSuggestion]:
        base = last_known_value if last_known_value > 0 else increment_size
        set_weights = []
        for failed in self._flags(failure_info):
            weight = _discounted(base, self.failure_discount_percent) if failed else base
            set_weights.append(round_to_increment(round_half_away(weight), increment_size))

        heaviest = max(set_weights)
        return [
            ProgressionSuggestion(
                sets=self.sets,
                reps=self.set_configs[0].min,
                weight=heaviest,
                calculated_1rm=calculate_1rm_for(heaviest, self.set_configs[0].min, 1),
                set_weights=set_weights,
                rep_targets=list(self.set_configs),
            )
        ]


# =============================================================================
# Dispatch
# =============================================================================


_BUILDERS: Dict[ProgressionSchemeName, Callable] = {
    ProgressionSchemeName.STS: STSProgression.from_parameters,
    ProgressionSchemeName.DOUBLE_PROGRESSION: DoubleProgression.from_parameters,
    ProgressionSchemeName.RPT_TOP_SET: RPTTopSetProgression.from_parameters,
    ProgressionSchemeName.RPT_INDIVIDUAL: RPTIndividualProgression.from_parameters,
}


def build_scheme(
    parameters: ProgressionParameters,
    settings: Optional[Settings] = None,
) -> ProgressionScheme:
    """
    Instantiate the scheme matching the parameters' `scheme` tag.

    Args:
        parameters: Configured progression parameters
        settings: Engine settings, defaults to get_settings()

    Returns:
        The matching progression scheme
    """
    builder = _BUILDERS[ProgressionSchemeName(parameters.scheme)]
    return builder(parameters, settings)


def get_next_suggestion(
    parameters: ProgressionParameters,
    last_known_value: float,
    increment_size: float,
    failure_info: FailureInfo = None,
    settings: Optional[Settings] = None,
) -> List[ProgressionSuggestion]:
    """Build the scheme for `parameters` and ask it for the next prescription."""
    scheme = build_scheme(parameters, settings)
    return scheme.get_next_suggestion(last_known_value, increment_size, failure_info)
