"""Half-up rounding, so 0.5 goes to 1 and 2.5 goes to 3 (round() would give 2)."""
import math


def round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_half_up_int(value: float) -> int:
    return int(math.floor(value + 0.5))
