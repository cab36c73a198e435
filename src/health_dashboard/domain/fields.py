"""Normalization of loosely-typed record fields."""

import math


def numeric(value: object, default: float = 0.0) -> float:
    """Return ``value`` as a float, or ``default`` when it can't be read as one.

    Store rows mix numbers, numeric strings and missing values for the same
    column, so every numeric field goes through here before aggregation.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, int | float):
        parsed = float(value)
    elif isinstance(value, str):
        try:
            parsed = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(parsed):
        return default
    return parsed


def whole_number(value: object, default: int = 0) -> int:
    """Return ``value`` normalized and truncated to an integer."""
    return int(numeric(value, default=float(default)))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded up."""
    return math.floor(value + 0.5)
