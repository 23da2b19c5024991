"""
Region Constraints
==================

Wrappers that enforce a constraint only while the agent is inside a region.

Outside the region a gate imposes no restriction: max velocity is +inf and
the acceleration bounds are (-inf, +inf). Inside, the wrapped constraint's
answer is returned unchanged. Gates satisfy TrajectoryConstraint themselves,
so they nest.

Only the pose translation is consulted; heading is ignored.

Example:
    from gated_constraints.constraints import (
        MaxVelocityConstraint,
        RectangularRegionConstraint,
    )
    from gated_constraints.models import Translation2d

    slow_zone = RectangularRegionConstraint(
        bottom_left=Translation2d(x=0.0, y=0.0),
        top_right=Translation2d(x=10.0, y=10.0),
        constraint=MaxVelocityConstraint(3.0),
    )
"""

import logging

from gated_constraints.constraints.base import TrajectoryConstraint
from gated_constraints.models.constraints import MinMax
from gated_constraints.models.geometry import Pose2d, Rotation2d, Translation2d


logger = logging.getLogger(__name__)


class RectangularRegionConstraint:
    """
    Enforces a constraint only within an axis-aligned rectangle.

    Bounds are inclusive on all four sides. The corners are used exactly
    as given: an inverted rectangle is not corrected and simply matches
    no poses. Comparisons involving NaN are false, so a NaN coordinate
    places the pose outside the region.

    Attributes:
        bottom_left: Bottom-left corner of the region
        top_right: Top-right corner of the region
        constraint: Constraint enforced inside the region
    """

    def __init__(
        self,
        bottom_left: Translation2d,
        top_right: Translation2d,
        constraint: TrajectoryConstraint,
    ) -> None:
        """
        Initialize the rectangular region constraint.

        Args:
            bottom_left: Bottom-left corner of the region (meters)
            top_right: Top-right corner of the region (meters)
            constraint: Constraint to enforce inside the region
        """
        self.bottom_left = bottom_left
        self.top_right = top_right
        self.constraint = constraint

        logger.debug(
            f"RectangularRegionConstraint initialized: "
            f"bottom_left=({bottom_left.x}, {bottom_left.y}), "
            f"top_right=({top_right.x}, {top_right.y}), "
            f"constraint={type(constraint).__name__}"
        )

    def max_velocity(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> float:
        if self.is_pose_in_region(pose):
            return self.constraint.max_velocity(pose, curvature, velocity)
        return float("inf")

    def min_max_acceleration(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> MinMax:
        if self.is_pose_in_region(pose):
            return self.constraint.min_max_acceleration(pose, curvature, velocity)
        return MinMax()

    def is_pose_in_region(self, pose: Pose2d) -> bool:
        """
        Check whether a pose lies within the rectangle.

        Args:
            pose: The pose to test

        Returns:
            True if the pose translation is within the inclusive bounds
        """
        x = pose.translation.x
        y = pose.translation.y
        return (
            self.bottom_left.x <= x <= self.top_right.x
            and self.bottom_left.y <= y <= self.top_right.y
        )


class EllipticalRegionConstraint:
    """
    Enforces a constraint only within a (possibly rotated) ellipse.

    Membership rotates the pose offset from the center into the
    ellipse's frame, then tests dx²·ry² + dy²·rx² <= rx²·ry², boundary
    inclusive. Widths are not validated.

    Attributes:
        center: Center of the ellipse
        x_width: Full width along the ellipse's x axis
        y_width: Full width along the ellipse's y axis
        rotation: Rotation of the ellipse axes
        constraint: Constraint enforced inside the region
    """

    def __init__(
        self,
        center: Translation2d,
        x_width: float,
        y_width: float,
        rotation: Rotation2d,
        constraint: TrajectoryConstraint,
    ) -> None:
        self.center = center
        self.x_width = x_width
        self.y_width = y_width
        self.rotation = rotation
        self.constraint = constraint

        # Rotating by the inverse maps field offsets into the ellipse frame
        self._inverse_rotation = rotation.unary_minus()
        self._radius_x = x_width / 2.0
        self._radius_y = y_width / 2.0

        logger.debug(
            f"EllipticalRegionConstraint initialized: "
            f"center=({center.x}, {center.y}), "
            f"widths=({x_width}, {y_width}), "
            f"rotation={rotation.degrees:.1f}deg"
        )

    def max_velocity(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> float:
        if self.is_pose_in_region(pose):
            return self.constraint.max_velocity(pose, curvature, velocity)
        return float("inf")

    def min_max_acceleration(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> MinMax:
        if self.is_pose_in_region(pose):
            return self.constraint.min_max_acceleration(pose, curvature, velocity)
        return MinMax()

    def is_pose_in_region(self, pose: Pose2d) -> bool:
        """
        Check whether a pose lies within the ellipse.

        Args:
            pose: The pose to test

        Returns:
            True if the pose translation is inside or on the ellipse
        """
        offset = pose.translation.minus(self.center).rotate_by(self._inverse_rotation)
        rx_sq = self._radius_x * self._radius_x
        ry_sq = self._radius_y * self._radius_y
        # Squared by multiplication so overflow gives inf instead of OverflowError
        return offset.x * offset.x * ry_sq + offset.y * offset.y * rx_sq <= rx_sq * ry_sq
