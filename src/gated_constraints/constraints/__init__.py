"""
Constraints Module
==================

Velocity and acceleration constraints for moving agents.

This module provides:
    - TrajectoryConstraint: Protocol every constraint implements
    - Region gates: rectangular and elliptical
    - Limits: max velocity, centripetal acceleration, max acceleration
    - ConstraintSet: min/max reduction over many constraints
    - ConstraintManager: building constraints from definition files

No trajectory generation, only per-pose constraint queries.
"""

from gated_constraints.constraints.base import TrajectoryConstraint
from gated_constraints.constraints.region import (
    EllipticalRegionConstraint,
    RectangularRegionConstraint,
)
from gated_constraints.constraints.limits import (
    CentripetalAccelerationConstraint,
    MaxAccelerationConstraint,
    MaxVelocityConstraint,
)
from gated_constraints.constraints.aggregate import ConstraintSet
from gated_constraints.constraints.loader import ConstraintManager, build_constraint

__all__ = [
    # Protocol
    "TrajectoryConstraint",
    # Region gates
    "RectangularRegionConstraint",
    "EllipticalRegionConstraint",
    # Limits
    "MaxVelocityConstraint",
    "CentripetalAccelerationConstraint",
    "MaxAccelerationConstraint",
    # Composition
    "ConstraintSet",
    "ConstraintManager",
    "build_constraint",
]
