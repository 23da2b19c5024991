"""
Limit Constraints
=================

Plain constraints that apply everywhere along a path.

    - MaxVelocityConstraint: fixed velocity cap
    - CentripetalAccelerationConstraint: velocity cap from curvature
    - MaxAccelerationConstraint: symmetric acceleration bound

Formulas:
    centripetal acceleration a_c = v² · |κ|
    => v_max = sqrt(a_c_max / |κ|), unbounded on straight segments (κ = 0)
"""

import logging
import math

from gated_constraints.models.constraints import MinMax
from gated_constraints.models.geometry import Pose2d


logger = logging.getLogger(__name__)


class MaxVelocityConstraint:
    """
    Caps velocity at a fixed value. Accelerations are unbounded.

    Attributes:
        max_velocity_limit: Velocity cap (m/s)
    """

    def __init__(self, max_velocity: float) -> None:
        self.max_velocity_limit = max_velocity
        logger.debug(f"MaxVelocityConstraint initialized: {max_velocity} m/s")

    def max_velocity(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> float:
        return self.max_velocity_limit

    def min_max_acceleration(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> MinMax:
        return MinMax()


class CentripetalAccelerationConstraint:
    """
    Limits velocity so centripetal acceleration stays under a cap.

    Useful for keeping an agent from sliding or tipping in tight turns.

    Attributes:
        max_centripetal_acceleration: Centripetal acceleration cap (m/s²)
    """

    def __init__(self, max_centripetal_acceleration: float) -> None:
        self.max_centripetal_acceleration = max_centripetal_acceleration
        logger.debug(
            f"CentripetalAccelerationConstraint initialized: "
            f"{max_centripetal_acceleration} m/s²"
        )

    def max_velocity(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> float:
        """
        Maximum velocity that keeps centripetal acceleration under the cap.

        Args:
            pose: Pose of the agent (unused)
            curvature: Path curvature (rad/m)
            velocity: Current velocity (unused)

        Returns:
            sqrt(a_max / |curvature|), or +inf on a straight segment.
            NaN when the configured cap is negative.
        """
        if curvature == 0.0:
            return float("inf")
        ratio = self.max_centripetal_acceleration / abs(curvature)
        if ratio < 0.0:
            return float("nan")
        return math.sqrt(ratio)

    def min_max_acceleration(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> MinMax:
        # Centripetal acceleration is perpendicular to the path
        return MinMax()


class MaxAccelerationConstraint:
    """
    Bounds acceleration to [-max_acceleration, +max_acceleration].

    Velocity is unbounded.

    Attributes:
        max_acceleration: Acceleration magnitude cap (m/s²)
    """

    def __init__(self, max_acceleration: float) -> None:
        self.max_acceleration = max_acceleration
        logger.debug(f"MaxAccelerationConstraint initialized: {max_acceleration} m/s²")

    def max_velocity(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> float:
        return float("inf")

    def min_max_acceleration(
        self,
        pose: Pose2d,
        curvature: float,
        velocity: float,
    ) -> MinMax:
        return MinMax(-self.max_acceleration, self.max_acceleration)
