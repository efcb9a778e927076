"""Intersections of rays with objects and choosing the visible hit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass(eq=False)
class Intersection:
    """A ray meeting an object at parameter t."""

    t: float
    obj: Any

    def __eq__(self, other):
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.t == other.t and self.obj is other.obj


def hit_index(intersections: Sequence[Intersection]) -> Optional[int]:
    """Index of the intersection with the lowest non-negative t, or None if there is none."""
    candidates = [(hit.t, index) for index, hit in enumerate(intersections) if hit.t >= 0]
    if not candidates:
        return None
    return min(candidates)[1]