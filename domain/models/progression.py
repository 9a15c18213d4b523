"""
Progression scheme parameters and the suggestion value object.

ProgressionParameters is a discriminated union over the four supported
schemes, tagged by `scheme`. Field-level bounds are enforced by pydantic;
cross-field consistency (min <= max, list lengths matching `sets`) is
reported by `consistency_issues()` so that the save-time validator can
reject bad input while the engine can still clamp a degenerate scheme.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ProgressionSchemeName(str, Enum):
    """Supported progression schemes."""

    STS = "STS"
    DOUBLE_PROGRESSION = "Double Progression"
    RPT_TOP_SET = "RPT Top-Set"
    RPT_INDIVIDUAL = "RPT Individual"


class RepRange(BaseModel):
    """Inclusive rep window for one set."""

    min: int = Field(..., ge=1)
    max: int = Field(..., ge=1)

    model_config = {"frozen": True}


class _SchemeParameters(BaseModel):
    """Fields shared by every scheme."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    rest_between_sets: int = Field(
        default=90, ge=0, alias="restBetweenSets", description="Seconds"
    )
    rest_between_exercises: int = Field(
        default=180, ge=0, alias="restBetweenExercises", description="Seconds"
    )

    def consistency_issues(self) -> List[str]:
        """Cross-field problems that make this configuration unusable."""
        return []


class STSParameters(_SchemeParameters):
    """Straight sets with a set-count bonus in the 1RM estimate."""

    scheme: Literal["STS"] = "STS"
    min_sets: int = Field(default=3, ge=1, alias="minSets")
    max_sets: int = Field(default=3, ge=1, alias="maxSets")
    min_reps: int = Field(default=6, ge=1, alias="minReps")
    max_reps: int = Field(default=8, ge=1, alias="maxReps")

    def consistency_issues(self) -> List[str]:
        issues = []
        if self.min_sets > self.max_sets:
            issues.append(f"minSets ({self.min_sets}) exceeds maxSets ({self.max_sets})")
        if self.min_reps > self.max_reps:
            issues.append(f"minReps ({self.min_reps}) exceeds maxReps ({self.max_reps})")
        return issues


class DoubleProgressionParameters(_SchemeParameters):
    """Progress reps through a range, then add weight."""

    scheme: Literal["Double Progression"] = "Double Progression"
    target_sets: int = Field(default=3, ge=1, alias="targetSets")
    min_reps: int = Field(default=8, ge=1, alias="minReps")
    max_reps: int = Field(default=12, ge=1, alias="maxReps")

    def consistency_issues(self) -> List[str]:
        if self.min_reps > self.max_reps:
            return [f"minReps ({self.min_reps}) exceeds maxReps ({self.max_reps})"]
        return []


class RPTTopSetParameters(_SchemeParameters):
    """Reverse pyramid with back-off sets derived from the top set."""

    scheme: Literal["RPT Top-Set"] = "RPT Top-Set"
    sets: int = Field(default=3, ge=1)
    min_reps: int = Field(default=6, ge=1, alias="minReps")
    max_reps: int = Field(default=8, ge=1, alias="maxReps")
    drop_percentages: List[float] = Field(
        default_factory=lambda: [0.0, 10.0, 10.0],
        alias="dropPercentages",
        description="Reduction from the top set for each position, first is 0",
    )

    def consistency_issues(self) -> List[str]:
        issues = []
        if self.min_reps > self.max_reps:
            issues.append(f"minReps ({self.min_reps}) exceeds maxReps ({self.max_reps})")
        if len(self.drop_percentages) != self.sets:
            issues.append(
                f"dropPercentages has {len(self.drop_percentages)} entries, expected {self.sets}"
            )
        for pct in self.drop_percentages:
            if not 0 <= pct < 100:
                issues.append(f"drop percentage {pct} outside [0, 100)")
        return issues


class RPTIndividualParameters(_SchemeParameters):
    """Reverse pyramid where each set has its own rep window."""

    scheme: Literal["RPT Individual"] = "RPT Individual"
    sets: int = Field(default=3, ge=1)
    set_configs: List[RepRange] = Field(
        default_factory=lambda: [
            RepRange(min=6, max=8),
            RepRange(min=7, max=9),
            RepRange(min=8, max=10),
        ],
        alias="setConfigs",
    )

    def consistency_issues(self) -> List[str]:
        issues = []
        if len(self.set_configs) != self.sets:
            issues.append(
                f"setConfigs has {len(self.set_configs)} entries, expected {self.sets}"
            )
        for index, config in enumerate(self.set_configs, start=1):
            if config.min > config.max:
                issues.append(f"set {index}: min ({config.min}) exceeds max ({config.max})")
        return issues


ProgressionParameters = Annotated[
    Union[
        STSParameters,
        DoubleProgressionParameters,
        RPTTopSetParameters,
        RPTIndividualParameters,
    ],
    Field(discriminator="scheme"),
]


# Defaults applied when an exercise has no configured scheme, or when a
# workout day is created without explicit parameters.
DEFAULT_PARAMETERS = {
    ProgressionSchemeName.STS: STSParameters(),
    ProgressionSchemeName.DOUBLE_PROGRESSION: DoubleProgressionParameters(),
    ProgressionSchemeName.RPT_TOP_SET: RPTTopSetParameters(),
    ProgressionSchemeName.RPT_INDIVIDUAL: RPTIndividualParameters(),
}


class ProgressionSuggestion(BaseModel):
    """
    Next prescription produced by a progression scheme.

    Produced fresh on every request and never persisted by the engine.
    Dump with `by_alias=True` for the camelCase wire names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=1)
    weight: float = Field(..., ge=0)
    calculated_1rm: Optional[float] = Field(default=None, alias="calculated1RM")
    set_weights: Optional[List[float]] = Field(default=None, alias="setWeights")
    rep_targets: Optional[List[RepRange]] = Field(default=None, alias="repTargets")
