"""
One-rep-max formula library.

Pure numeric functions, no dependencies on the rest of the engine.

The canonical estimate is the multiplicative set-bonus form

    1RM = W * (1 + 0.025 * R) * (1 + 0.025 * (S - 1))

where W and R are the weight and reps of the LAST set and S is the number
of sets performed. Earlier sets are ignored. Results are rounded to 2
decimal places, half away from zero.

Arithmetic is done in Decimal, built from the shortest decimal repr of each
input, so that 3 x 8 @ 77.50 gives exactly 97.65 rather than a binary
neighbour of it.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from domain.models import ExerciseSet

# Bonus per rep and per additional set
REP_BONUS = Decimal("0.025")
SET_BONUS = Decimal("0.025")


def _dec(value) -> Decimal:
    return Decimal(str(value))


def round_half_away(value: float, places: int = 2) -> float:
    """
    Round to a fixed number of decimals, ties away from zero.

    Python's round() uses banker's rounding, which would turn 0.125 into
    0.12; weights and 1RM values expect 0.13.

    Args:
        value: Number to round
        places: Decimal places to keep

    Returns:
        Rounded value
    """
    quantum = Decimal(1).scaleb(-places)
    return float(_dec(value).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_increment(weight: float, increment: float) -> float:
    """
    Round a weight to the nearest multiple of the increment.

    Halves round up, decided on the decimal values as written (0.15 on a
    0.1 grid gives 0.2), not on their binary approximations. The result is
    never negative.

    Args:
        weight: Raw weight
        increment: Plate/dumbbell step, must be positive

    Returns:
        Weight on the increment grid
    """
    if increment <= 0:
        return max(round_half_away(weight), 0.0)
    step = _dec(increment)
    steps = (_dec(weight) / step).to_integral_value(rounding=ROUND_HALF_UP)
    return float(max(steps, Decimal(0)) * step)


def set_bonus_factor(reps: int, sets: int) -> float:
    """Multiplier applied to the weight for `sets` x `reps`."""
    return (1 + 0.025 * reps) * (1 + 0.025 * (sets - 1))


def weight_for_1rm(one_rm: float, reps: int, sets: int) -> float:
    """
    Solve the 1RM formula for weight.

    Args:
        one_rm: Target 1RM
        reps: Reps per set
        sets: Number of sets

    Returns:
        Unrounded weight that reproduces `one_rm` exactly
    """
    return one_rm / set_bonus_factor(reps, sets)


def _estimate(weight: float, reps: int, sets: int) -> Decimal:
    return _dec(weight) * (1 + REP_BONUS * reps) * (1 + SET_BONUS * (sets - 1))


def _quantize(value: Decimal) -> Decimal:
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def calculate_1rm(
    sets: Sequence[ExerciseSet],
    extra_set_reps: Optional[int] = None,
) -> float:
    """
    Estimate the 1RM from a session's sets.

    With `extra_set_reps` (a bonus set taken to failure after the last
    planned set) the estimate is interpolated between the plain estimate
    and the estimate for one more full set, by the fraction of the last
    set's reps achieved in the bonus set.

    Args:
        sets: Sets in the order they were performed
        extra_set_reps: Reps achieved in the bonus set, if one was done

    Returns:
        Estimated 1RM rounded to 2 decimals, or 0 for no sets
    """
    if not sets:
        return 0.0

    last = sets[-1]
    weight, reps, count = last.weight, last.reps, len(sets)

    base = _quantize(_estimate(weight, reps, count))
    if extra_set_reps is None:
        return float(base)

    full = _estimate(weight, reps, count + 1)
    interpolated = base + (Decimal(extra_set_reps) / Decimal(reps)) * (full - base)
    return float(_quantize(interpolated))


def calculate_1rm_for(weight: float, reps: int, sets: int) -> float:
    """Estimate the 1RM of `sets` identical sets of `reps` at `weight`."""
    if sets <= 0 or reps <= 0:
        return 0.0
    return float(_quantize(_estimate(weight, reps, sets)))
