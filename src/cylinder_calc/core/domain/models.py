"""Domain models (Pydantic v2).

Rules:
- Every model is frozen. Derived attributes are computed once, while the model
  is validated, and never change afterwards.
- Derived attributes always come from the formulas in `geometry.py`; values
  passed in for them are ignored.
- Lengths are coerced to non-negative floats before anything is derived; a
  bad length fails with an error that names it.
- Conversions follow a fixed path: Dimensions -> Cylinder -> Circle.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationError, model_validator
from pydantic.config import ConfigDict

from cylinder_calc.core.domain import geometry

_LENGTH = TypeAdapter(Annotated[float, Field(ge=0)])


def _length(data: dict[str, Any], key: str) -> float:
    """Coerce `data[key]` to a non-negative float, naming `key` on failure."""

    try:
        return _LENGTH.validate_python(data.get(key))
    except ValidationError as exc:
        raise ValueError(f"{key}: {exc.errors()[0]['msg']}") from exc


class Circle(BaseModel):
    """A circle described by its radius.

    `Circle(radius=3)` is enough; diameter, circumference and area are filled
    in from the radius.
    """

    model_config = ConfigDict(frozen=True)

    radius: float = Field(
        ...,
        ge=0,
        description="Radius the circle was built from.",
    )
    diameter: float = Field(
        ...,
        description="2 * radius.",
    )
    circumference: float = Field(
        ...,
        description="2 * PI * radius.",
    )
    area: float = Field(
        ...,
        description="radius^2 * PI.",
    )

    @model_validator(mode="before")
    @classmethod
    def _derive(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        radius = _length(data, "radius")
        return {
            "radius": radius,
            "diameter": geometry.diameter(radius),
            "circumference": geometry.circumference(radius),
            "area": geometry.area(radius),
        }

    @classmethod
    def from_radius(cls, radius: float) -> "Circle":
        return cls(radius=radius)

    def format(self) -> str:
        return (
            "Circle:\n"
            f"    - Diameter: {self.diameter}\n"
            f"    - Circumference: {self.circumference}\n"
            f"    - Area: {self.area}\n"
        )


class Cylinder(BaseModel):
    """A right circular cylinder.

    Owns the `Circle` of its base; `into_circle()` hands out that same
    instance rather than building a new one.
    """

    model_config = ConfigDict(frozen=True)

    height: float = Field(
        ...,
        ge=0,
        description="Height the cylinder was built from.",
    )
    circle: Circle = Field(
        ...,
        description="Base circle, built from the radius.",
    )
    volume: float = Field(
        ...,
        description="Base area * height.",
    )
    lateral_surface_area: float = Field(
        ...,
        description="Base circumference * height.",
    )
    total_surface_area: float = Field(
        ...,
        description="2 * base area + lateral surface area.",
    )

    @model_validator(mode="before")
    @classmethod
    def _derive(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        height = _length(data, "height")
        circle = data.get("circle")
        if circle is None:
            circle = Circle.from_radius(_length(data, "radius"))
        elif not isinstance(circle, Circle):
            circle = Circle.model_validate(circle)
        lateral = geometry.lateral_surface_area(circle.circumference, height)
        return {
            "height": height,
            "circle": circle,
            "volume": geometry.volume(circle.area, height),
            "lateral_surface_area": lateral,
            "total_surface_area": geometry.total_surface_area(circle.area, lateral),
        }

    @classmethod
    def from_dimensions(cls, radius: float, height: float) -> "Cylinder":
        return cls(radius=radius, height=height)

    @property
    def radius(self) -> float:
        return self.circle.radius

    def into_circle(self) -> Circle:
        return self.circle

    def format(self) -> str:
        return (
            "Cylinder:\n"
            f"    - Volume: {self.volume}\n"
            f"    - Lateral surface area: {self.lateral_surface_area}\n"
            f"    - Total surface area: {self.total_surface_area}\n"
        )


class Dimensions(BaseModel):
    """Validated (radius, height) pair read from the user."""

    model_config = ConfigDict(frozen=True)

    radius: int = Field(
        ...,
        gt=0,
        strict=True,
        description="Cylinder radius, a positive integer.",
    )
    height: int = Field(
        ...,
        gt=0,
        strict=True,
        description="Cylinder height, a positive integer.",
    )

    def into_cylinder(self) -> Cylinder:
        return Cylinder.from_dimensions(self.radius, self.height)
