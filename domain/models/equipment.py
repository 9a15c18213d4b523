"""
Predefined equipment profiles.

Starting weight and increment for the equipment most exercises are created
with. Exercises copy these values when created; the engine only ever sees
the resulting ExerciseProfile.
"""

from typing import Dict, Optional

from domain.models.exercise import ExerciseProfile, Units


PREDEFINED_EQUIPMENT: Dict[str, Dict] = {
    "Barbell": {"starting_weight": 20.0, "increment_size": 2.5, "units": "kg"},
    "Dumbbell": {"starting_weight": 2.5, "increment_size": 1.0, "units": "kg"},
}


def profile_for_equipment(
    equipment_name: str,
    *,
    name: str = "",
    units: Optional[Units] = None,
) -> ExerciseProfile:
    """
    Build an ExerciseProfile from a predefined equipment entry.

    Args:
        equipment_name: Key in PREDEFINED_EQUIPMENT ("Barbell", "Dumbbell")
        name: Exercise name to attach
        units: Convert to this unit if it differs from the preset's

    Returns:
        ExerciseProfile for the equipment

    Raises:
        KeyError: If the equipment is not predefined
    """
    preset = PREDEFINED_EQUIPMENT[equipment_name]
    profile = ExerciseProfile(name=name, equipment_name=equipment_name, **preset)
    if units is not None:
        profile = profile.to_units(units)
    return profile
