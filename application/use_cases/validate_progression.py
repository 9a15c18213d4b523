"""
Validate Progression Use Case.

Save-time validation of progression parameters. The engine assumes it is
given validated parameters; this is where malformed ones are rejected,
before a workout day is stored.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from application.exceptions import ConfigurationError
from domain.models import ProgressionParameters

logger = logging.getLogger(__name__)

_PARAMETERS_ADAPTER = TypeAdapter(ProgressionParameters)


def validate_progression_parameters(
    data: Union[Dict[str, Any], ProgressionParameters],
) -> ProgressionParameters:
    """
    Parse and check progression parameters.

    Accepts either the raw payload (camelCase or snake_case keys, tagged by
    `scheme`) or an already-built parameters model.

    Args:
        data: Parameters to validate

    Returns:
        The parsed parameters

    Raises:
        ConfigurationError: If a field is invalid or the fields disagree
            with each other (e.g. minSets > maxSets)
    """
    if not isinstance(data, BaseModel):
        try:
            params = _PARAMETERS_ADAPTER.validate_python(data)
        except ValidationError as exc:
            issues = [
                f"{'.'.join(str(p) for p in error['loc'])}: {error['msg']}"
                if error["loc"] else error["msg"]
                for error in exc.errors()
            ]
            raise ConfigurationError(
                f"Invalid progression parameters: {'; '.join(issues)}", issues
            ) from exc
    else:
        params = data

    issues = params.consistency_issues()
    if issues:
        raise ConfigurationError(
            f"Inconsistent {params.scheme} parameters: {'; '.join(issues)}", issues
        )
    return params


@dataclass
class ValidateProgressionResult:
    """Result of validating progression parameters."""
    success: bool
    parameters: Optional[ProgressionParameters] = None
    errors: List[str] = field(default_factory=list)


class ValidateProgressionUseCase:
    """
    Use case for validating a workout day's progression configuration.

    Validates every exercise's parameters and reports all problems at once
    so the caller can show them together.
    """

    def execute(self, data: Dict[str, Any]) -> ValidateProgressionResult:
        """
        Validate one exercise's parameters.

        Args:
            data: Raw parameters payload

        Returns:
            ValidateProgressionResult with parsed parameters or errors
        """
        try:
            params = validate_progression_parameters(data)
        except ConfigurationError as exc:
            return ValidateProgressionResult(success=False, errors=exc.issues)
        return ValidateProgressionResult(success=True, parameters=params)

    def execute_many(
        self,
        exercises: List[Dict[str, Any]],
    ) -> Dict[Union[int, str], ValidateProgressionResult]:
        """
        Validate the parameters of every exercise in a workout day.

        Entries that are not {"exerciseId": int, ...} mappings cannot be
        keyed by exercise; they are reported as failures under "#<index>",
        their position in the list.

        Args:
            exercises: List of {"exerciseId": int, "parameters": {...}}

        Returns:
            Results keyed by exercise ID
        """
        results: Dict[Union[int, str], ValidateProgressionResult] = {}
        for index, entry in enumerate(exercises):
            exercise_id = entry.get("exerciseId") if isinstance(entry, dict) else None
            if not isinstance(exercise_id, int) or isinstance(exercise_id, bool):
                logger.warning(f"Progression entry {index} has no usable exerciseId")
                results[f"#{index}"] = ValidateProgressionResult(
                    success=False,
                    errors=["exerciseId: an integer exercise ID is required"],
                )
                continue
            results[exercise_id] = self.execute(entry.get("parameters", {}))
        return results
