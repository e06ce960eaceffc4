"""Calculation flow, without the console.

The CLI owns prompting and printing; this module only knows the order of the
steps and which value feeds the next one. Any `read(prompt) -> int` callable
works as the input side, which keeps the flow testable without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from cylinder_calc.core.domain.models import Circle, Cylinder, Dimensions
from cylinder_calc.core.logger import get_logger

RADIUS_PROMPT = "Provide the radius of the cylinder:"
HEIGHT_PROMPT = "Provide the height of the cylinder:"

log = get_logger(__name__)


@dataclass(frozen=True)
class CalculationResult:
    """Cylinder built from the dimensions, and the circle taken from it."""

    cylinder: Cylinder
    circle: Circle


def collect_dimensions(read: Callable[[str], int]) -> Dimensions:
    """Ask for the radius, then the height."""

    radius = read(RADIUS_PROMPT)
    height = read(HEIGHT_PROMPT)
    return Dimensions(radius=radius, height=height)


def calculate(dimensions: Dimensions) -> CalculationResult:
    cylinder = dimensions.into_cylinder()
    circle = cylinder.into_circle()
    log.debug(
        "radius=%s height=%s -> volume=%s lateral=%s total=%s",
        dimensions.radius,
        dimensions.height,
        cylinder.volume,
        cylinder.lateral_surface_area,
        cylinder.total_surface_area,
    )
    return CalculationResult(cylinder=cylinder, circle=circle)
