"""
Exercise value objects consumed by the progression engine.

ExerciseSet is a single logged set, ExerciseProfile is the per-exercise
equipment metadata owned by the exercise catalog, and ExerciseLog is one
logged session of an exercise.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


# Conversion constants
KG_TO_LB = 2.20462
LB_TO_KG = 1 / KG_TO_LB

Units = Literal["kg", "lb"]


class ExerciseSet(BaseModel):
    """
    One completed set. Immutable once recorded.

    Examples:
        >>> ExerciseSet(reps=8, weight=77.5)
        ExerciseSet(reps=8, weight=77.5, timestamp=None)
    """

    reps: int = Field(..., gt=0, description="Repetitions performed")
    weight: float = Field(..., ge=0, description="Weight lifted")
    timestamp: Optional[str] = Field(
        default=None, description="ISO timestamp the set was logged at"
    )

    model_config = {"frozen": True}


class ExerciseProfile(BaseModel):
    """
    Per-exercise equipment metadata.

    `increment_size` is the smallest loadable jump (plate pair, dumbbell
    step). Every weight the engine prescribes sits on that grid.
    """

    id: Optional[int] = None
    name: str = ""
    equipment_name: str = ""
    starting_weight: float = Field(..., ge=0, description="First prescribed weight")
    increment_size: float = Field(..., gt=0, description="Smallest weight step")
    units: Units = "kg"
    is_archived: bool = False

    def to_units(self, units: Units) -> "ExerciseProfile":
        """
        Return a copy of this profile expressed in another unit.

        Args:
            units: Target unit ("kg" or "lb")

        Returns:
            ExerciseProfile with converted starting weight and increment
        """
        if units == self.units:
            return self
        factor = KG_TO_LB if units == "lb" else LB_TO_KG
        return self.model_copy(
            update={
                "starting_weight": round(self.starting_weight * factor, 2),
                "increment_size": round(self.increment_size * factor, 2),
                "units": units,
            }
        )

    model_config = {"frozen": True}


class ExerciseLog(BaseModel):
    """A logged session of one exercise, as returned by the log store."""

    id: int = Field(..., description="Log id, breaks ties between equal dates")
    exercise_id: int
    date: datetime
    sets: List[ExerciseSet] = Field(default_factory=list)
    extra_set_reps: Optional[int] = Field(
        default=None,
        ge=0,
        description="Reps of an optional bonus set taken to failure after the last set",
    )
    is_complete: bool = True

    @property
    def top_set(self) -> Optional[ExerciseSet]:
        """First set of the session, or None when nothing was logged."""
        return self.sets[0] if self.sets else None

    @property
    def heaviest_weight(self) -> float:
        """Heaviest weight across all sets, 0 for an empty log."""
        return max((s.weight for s in self.sets), default=0.0)

    model_config = {"frozen": True}
