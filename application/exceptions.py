"""
Application-layer exceptions.

These exceptions are used across the application and engine layers.
"""


class ConfigurationError(ValueError):
    """Malformed progression parameters.

    Raised by the save-time validator when a scheme is inconsistent, for
    example minSets greater than maxSets or a dropPercentages list whose
    length differs from the number of sets. The engine itself never raises
    this; it clamps degenerate input instead.
    """

    def __init__(self, message: str, issues=None):
        super().__init__(message)
        self.issues = list(issues or [])


class NoQualifyingCandidateError(Exception):
    """No STS candidate improves on the last estimated 1RM.

    Recovered by the ProgressionService, never surfaced to callers.
    """

    def __init__(self, last_1rm: float, increment_size: float):
        super().__init__(
            f"No STS candidate exceeds 1RM {last_1rm} with increment {increment_size}"
        )
        self.last_1rm = last_1rm
        self.increment_size = increment_size


class ExerciseNotFoundError(LookupError):
    """The requested exercise does not exist in the catalog."""

    def __init__(self, exercise_id):
        super().__init__(f"Exercise not found: {exercise_id}")
        self.exercise_id = exercise_id
