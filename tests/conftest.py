"""
Test Configuration
==================

Pytest fixtures and test configuration for gated_constraints.
"""

import pytest


class FixedConstraint:
    """Constraint returning the same answer everywhere, recording calls."""

    def __init__(self, max_velocity=3.0, min_acceleration=-2.0, max_acceleration=2.0):
        from gated_constraints.models.constraints import MinMax

        self._max_velocity = max_velocity
        self._bounds = MinMax(min_acceleration, max_acceleration)
        self.calls = []

    def max_velocity(self, pose, curvature, velocity):
        self.calls.append(("max_velocity", pose, curvature, velocity))
        return self._max_velocity

    def min_max_acceleration(self, pose, curvature, velocity):
        self.calls.append(("min_max_acceleration", pose, curvature, velocity))
        return self._bounds


@pytest.fixture
def fixed_constraint():
    """Provide a constraint returning 3.0 m/s and (-2.0, 2.0) m/s² everywhere."""
    return FixedConstraint()


@pytest.fixture
def make_fixed_constraint():
    """Provide a factory for constraints with chosen fixed answers."""
    return FixedConstraint


@pytest.fixture
def unit_square_gate(fixed_constraint):
    """Provide a rectangular gate over (0, 0)-(10, 10) wrapping fixed_constraint."""
    from gated_constraints.constraints import RectangularRegionConstraint
    from gated_constraints.models import Translation2d

    return RectangularRegionConstraint(
        bottom_left=Translation2d(x=0.0, y=0.0),
        top_right=Translation2d(x=10.0, y=10.0),
        constraint=fixed_constraint,
    )


@pytest.fixture
def sample_definition():
    """Provide a sample constraint definition document."""
    return {
        "name": "test_floor",
        "constraints": [
            {"type": "max_velocity", "name": "global", "max_velocity": 4.0},
            {
                "type": "rectangular_region",
                "name": "dock",
                "bottom_left": {"x": 0.0, "y": 0.0},
                "top_right": {"x": 10.0, "y": 5.0},
                "constraint": {
                    "type": "rectangular_region",
                    "bottom_left": {"x": 2.0, "y": 1.0},
                    "top_right": {"x": 4.0, "y": 3.0},
                    "constraint": {"type": "max_velocity", "max_velocity": 0.5},
                },
            },
            {
                "type": "elliptical_region",
                "name": "roundabout",
                "center": {"x": 20.0, "y": 20.0},
                "x_width": 6.0,
                "y_width": 4.0,
                "constraint": {"type": "max_acceleration", "max_acceleration": 1.5},
            },
        ],
    }
