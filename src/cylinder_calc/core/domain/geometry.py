"""Circle and cylinder formulas.

Plain functions over floats. The models in `models.py` call them once at
construction time and store the results.

Note:
- `PI` is the six-decimal constant 3.141592, not `math.pi`. Results are
  reproduced with that value on purpose.
"""

from __future__ import annotations

PI = 3.141592


def diameter(radius: float) -> float:
    return 2 * radius


def circumference(radius: float) -> float:
    return 2 * PI * radius


def area(radius: float) -> float:
    return radius**2 * PI


def volume(base_area: float, height: float) -> float:
    return base_area * height


def lateral_surface_area(base_circumference: float, height: float) -> float:
    """Curved side only, both ends excluded."""

    return base_circumference * height


def total_surface_area(base_area: float, lateral_area: float) -> float:
    """Both circular ends plus the curved side."""

    return (2 * base_area) + lateral_area
