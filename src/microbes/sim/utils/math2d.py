from __future__ import annotations


def _wrap_clamp(value: float, modulus: float) -> float:
    # Negative values are squared before wrapping, so the result is always in [0, modulus).
    if value < 0:
        return (value * value) % modulus
    return value % modulus


def _clamp_value(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))
