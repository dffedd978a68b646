"""
Numeric coercion helpers.

This module provides:
- is_number: Real-number check that refuses bools and numpy bools
- coerce_level: Clamp-then-floor used by the level and capacity setters
- floor_index: Floor used for recency-indexed reads

All functions accept Python and numpy scalars. Integers of any size are
handled without numpy, since they are always finite and already floored.
"""
from numbers import Integral, Real
import numpy as np

def is_number(x: object) -> bool:
    if isinstance(x, (bool, np.bool_)):
        return False
    return isinstance(x, (Real, np.number)) and not isinstance(x, np.complexfloating)

def coerce_level(x: Real, lo: int) -> int:
    """Clamp ``x`` to at least ``lo`` and truncate it to an int.

    Raises:
        ValueError: when ``x`` is NaN or infinite
    """
    if isinstance(x, (Integral, np.integer)):
        return max(int(x), lo)
    if not np.isfinite(x):
        raise ValueError(f"finite number expected, got {x!r}")
    return int(np.floor(max(x, lo)))

def floor_index(x: Real) -> int | None:
    """Floor a recency index; None for NaN/inf so reads stay absent."""
    if isinstance(x, (Integral, np.integer)):
        return int(x)
    if not np.isfinite(x): return None
    return int(np.floor(x))
