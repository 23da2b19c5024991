"""
gated_constraints
=================

Velocity and acceleration constraints for moving agents, with region gating.

A region gate enforces a wrapped constraint only while the agent's pose is
inside a region (an axis-aligned rectangle or an ellipse) and imposes no
restriction elsewhere. Gates, limits and constraint sets all implement the
same TrajectoryConstraint protocol, so they compose freely.

Components:
    - models: Pose geometry, MinMax, definition schema
    - constraints: Protocol, region gates, limits, ConstraintSet, loader
    - config: Settings and logging setup

Example:
    from gated_constraints.constraints import (
        MaxVelocityConstraint,
        RectangularRegionConstraint,
    )
    from gated_constraints.models import Pose2d, Translation2d

    gate = RectangularRegionConstraint(
        Translation2d(x=0.0, y=0.0),
        Translation2d(x=10.0, y=10.0),
        MaxVelocityConstraint(3.0),
    )
    gate.max_velocity(Pose2d.of(5.0, 5.0), curvature=0.0, velocity=1.0)  # 3.0
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
