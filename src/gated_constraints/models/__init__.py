"""
Data Models
===========

Value types and definition schemas for gated_constraints.

This module re-exports all data models for convenient access.

Models:
    Geometry:
        - Translation2d, Rotation2d, Pose2d: Immutable pose geometry

    Constraints:
        - MinMax: Acceleration bound pair
        - ConstraintDefinition: Discriminated union of definition kinds
        - ConstraintDefinitionFile: Top-level definition document
"""

from gated_constraints.models.geometry import Pose2d, Rotation2d, Translation2d
from gated_constraints.models.constraints import (
    CentripetalAccelerationDefinition,
    ConstraintDefinition,
    ConstraintDefinitionFile,
    EllipticalRegionDefinition,
    MaxAccelerationDefinition,
    MaxVelocityDefinition,
    MinMax,
    RectangularRegionDefinition,
)

__all__ = [
    # Geometry
    "Translation2d",
    "Rotation2d",
    "Pose2d",
    # Constraints
    "MinMax",
    "ConstraintDefinition",
    "ConstraintDefinitionFile",
    "MaxVelocityDefinition",
    "CentripetalAccelerationDefinition",
    "MaxAccelerationDefinition",
    "RectangularRegionDefinition",
    "EllipticalRegionDefinition",
]
