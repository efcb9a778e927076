"""Floating point helpers shared across the renderer."""

EPSILON = 0.00001


def compare_doubles(x: float, y: float) -> bool:
    """Return True when two floats differ by less than EPSILON."""
    return abs(x - y) < EPSILON