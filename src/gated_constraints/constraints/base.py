"""
Trajectory Constraint Protocol
==============================

The capability every constraint variant implements.

A constraint bounds the feasible velocity and acceleration of a moving
agent at a given pose, path curvature and current velocity. Variants
include plain limits, curvature-derived limits, region gates that wrap
another constraint, and sets that combine many constraints.

Design Rules:
    - Queries are pure: no side effects, no mutable state
    - Queries never raise
    - "No restriction" is expressed as +inf velocity and MinMax() accelerations
"""

from typing import Protocol, runtime_checkable

from gated_constraints.models.constraints import MinMax
from gated_constraints.models.geometry import Pose2d


@runtime_checkable
class TrajectoryConstraint(Protocol):
    """
    Protocol for velocity/acceleration constraints.

    This interface is implemented by:
        - MaxVelocityConstraint, CentripetalAccelerationConstraint,
          MaxAccelerationConstraint
        - RectangularRegionConstraint, EllipticalRegionConstraint
        - ConstraintSet
    """

    def max_velocity(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> float:
        """
        Maximum velocity allowed at a point along the path.

        Args:
            pose: Pose of the agent (meters, radians)
            curvature: Path curvature at the pose (rad/m)
            velocity: Current velocity (m/s)

        Returns:
            Maximum velocity in m/s, or +inf for no restriction
        """
        ...

    def min_max_acceleration(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> MinMax:
        """
        Acceleration bounds at a point along the path.

        Args:
            pose: Pose of the agent (meters, radians)
            curvature: Path curvature at the pose (rad/m)
            velocity: Current velocity (m/s)

        Returns:
            MinMax bound pair, MinMax() for no restriction
        """
        ...
