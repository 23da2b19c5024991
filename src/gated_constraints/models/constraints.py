"""
Constraint Models
=================

Value types returned by constraint queries, and the declarative schema
used to describe constraints in YAML/JSON definition files.

Runtime values:
    - MinMax: (minimum, maximum) acceleration bound pair

Definition schema (discriminated by ``type``):
    - max_velocity
    - centripetal_acceleration
    - max_acceleration
    - rectangular_region (wraps a nested constraint)
    - elliptical_region (wraps a nested constraint)

Example Definition File:
    name: warehouse_floor
    constraints:
      - type: max_velocity
        max_velocity: 4.0
      - type: rectangular_region
        name: loading_dock
        bottom_left: {x: 0.0, y: 0.0}
        top_right: {x: 10.0, y: 5.0}
        constraint:
          type: max_velocity
          max_velocity: 1.0
"""

from dataclasses import dataclass
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from gated_constraints.models.geometry import Translation2d


@dataclass(frozen=True, slots=True)
class MinMax:
    """
    Acceleration bound pair returned by constraint queries.

    The default pair is (-inf, +inf), meaning "impose no bound". Infinity
    is the identity element when several pairs are reduced together.

    Attributes:
        min_acceleration: Lowest allowed acceleration (m/s²)
        max_acceleration: Highest allowed acceleration (m/s²)
    """

    min_acceleration: float = float("-inf")
    max_acceleration: float = float("inf")

    @property
    def is_feasible(self) -> bool:
        """Whether the pair admits at least one acceleration."""
        return self.min_acceleration <= self.max_acceleration

    def __repr__(self) -> str:
        return f"MinMax(min={self.min_acceleration}, max={self.max_acceleration})"


# =============================================================================
# Definition Schema
# =============================================================================

class MaxVelocityDefinition(BaseModel):
    """Velocity cap applied everywhere."""

    type: Literal["max_velocity"] = "max_velocity"
    name: Optional[str] = Field(default=None, description="Optional lookup name")
    max_velocity: float = Field(
        ...,
        gt=0,
        description="Maximum velocity (m/s)",
    )


class CentripetalAccelerationDefinition(BaseModel):
    """Velocity cap derived from path curvature."""

    type: Literal["centripetal_acceleration"] = "centripetal_acceleration"
    name: Optional[str] = Field(default=None, description="Optional lookup name")
    max_centripetal_acceleration: float = Field(
        ...,
        gt=0,
        description="Maximum centripetal acceleration (m/s²)",
    )


class MaxAccelerationDefinition(BaseModel):
    """Symmetric acceleration bound applied everywhere."""

    type: Literal["max_acceleration"] = "max_acceleration"
    name: Optional[str] = Field(default=None, description="Optional lookup name")
    max_acceleration: float = Field(
        ...,
        gt=0,
        description="Maximum acceleration magnitude (m/s²)",
    )


class RectangularRegionDefinition(BaseModel):
    """
    Axis-aligned rectangle gating a nested constraint.

    Corners are taken literally; an inverted rectangle is not rejected.
    """

    type: Literal["rectangular_region"] = "rectangular_region"
    name: Optional[str] = Field(default=None, description="Optional lookup name")
    bottom_left: Translation2d = Field(
        ...,
        description="Bottom-left corner of the region (meters)",
    )
    top_right: Translation2d = Field(
        ...,
        description="Top-right corner of the region (meters)",
    )
    constraint: "ConstraintDefinition" = Field(
        ...,
        description="Constraint enforced inside the region",
    )


class EllipticalRegionDefinition(BaseModel):
    """Ellipse gating a nested constraint."""

    type: Literal["elliptical_region"] = "elliptical_region"
    name: Optional[str] = Field(default=None, description="Optional lookup name")
    center: Translation2d = Field(
        ...,
        description="Center of the ellipse (meters)",
    )
    x_width: float = Field(
        ...,
        gt=0,
        description="Full width along the ellipse's x axis (meters)",
    )
    y_width: float = Field(
        ...,
        gt=0,
        description="Full width along the ellipse's y axis (meters)",
    )
    rotation_degrees: float = Field(
        default=0.0,
        description="Rotation of the ellipse axes (degrees, counter-clockwise)",
    )
    constraint: "ConstraintDefinition" = Field(
        ...,
        description="Constraint enforced inside the region",
    )


ConstraintDefinition = Annotated[
    Union[
        MaxVelocityDefinition,
        CentripetalAccelerationDefinition,
        MaxAccelerationDefinition,
        RectangularRegionDefinition,
        EllipticalRegionDefinition,
    ],
    Field(discriminator="type"),
]

RectangularRegionDefinition.model_rebuild()
EllipticalRegionDefinition.model_rebuild()


class ConstraintDefinitionFile(BaseModel):
    """
    Complete constraint definition loaded from a YAML or JSON file.

    Attributes:
        name: Identifier for this constraint set
        constraints: Top-level constraints, combined by min/max reduction
    """

    name: str = Field(
        ...,
        description="Identifier for this constraint set",
    )

    constraints: List[ConstraintDefinition] = Field(
        default_factory=list,
        description="Top-level constraint definitions",
    )
