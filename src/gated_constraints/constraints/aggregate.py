"""
Constraint Aggregation
======================

Combines several constraints into one by min/max reduction.

Reduction Rules:
    max_velocity     = min(member max velocities)
    min_acceleration = max(member minimum accelerations)
    max_acceleration = min(member maximum accelerations)

Infinity is the identity element, so unrestricted members (including
region gates queried outside their region) never tighten the result,
and an empty set imposes no restriction at all.
"""

import logging
from typing import Iterable, Tuple

from gated_constraints.constraints.base import TrajectoryConstraint
from gated_constraints.models.constraints import MinMax
from gated_constraints.models.geometry import Pose2d


logger = logging.getLogger(__name__)


class ConstraintSet:
    """
    Immutable collection of constraints queried as a single constraint.

    Attributes:
        constraints: Member constraints, in insertion order
    """

    def __init__(self, constraints: Iterable[TrajectoryConstraint] = ()) -> None:
        self.constraints: Tuple[TrajectoryConstraint, ...] = tuple(constraints)

    def __len__(self) -> int:
        return len(self.constraints)

    def __iter__(self):
        return iter(self.constraints)

    def add(self, constraint: TrajectoryConstraint) -> "ConstraintSet":
        """Return a new set with the constraint appended."""
        return ConstraintSet(self.constraints + (constraint,))

    def max_velocity(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> float:
        return min(
            (c.max_velocity(pose, curvature, velocity) for c in self.constraints),
            default=float("inf"),
        )

    def min_max_acceleration(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> MinMax:
        result = MinMax()
        for constraint in self.constraints:
            bounds = constraint.min_max_acceleration(pose, curvature, velocity)
            result = MinMax(
                max(result.min_acceleration, bounds.min_acceleration),
                min(result.max_acceleration, bounds.max_acceleration),
            )

        if not result.is_feasible:
            logger.debug(
                f"Infeasible acceleration bounds at ({pose.x:.3f}, {pose.y:.3f}): {result}"
            )
        return result
