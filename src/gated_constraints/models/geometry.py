"""
Geometry Models
===============

This module defines the planar pose geometry consumed by trajectory constraints.

Design Philosophy:
    Geometry values are IMMUTABLE. A pose handed to a constraint query is
    never modified, and every operation returns a new value.

Supported Geometries:
    - Translation2d: 2D position (x, y in meters)
    - Rotation2d: Heading (radians, counter-clockwise positive)
    - Pose2d: Translation plus heading

Example:
    from gated_constraints.models.geometry import Pose2d, Translation2d

    pose = Pose2d.of(1.5, 2.0, heading=0.25)
    offset = pose.translation.minus(Translation2d(x=1.0, y=1.0))

Note:
    Non-finite coordinates (NaN, inf) are accepted as-is. Region membership
    tests follow plain float comparison semantics for them.
"""

import math

from pydantic import BaseModel, ConfigDict, Field


class Rotation2d(BaseModel):
    """
    Heading in the plane.

    Attributes:
        radians: Angle in radians, counter-clockwise positive
    """

    model_config = ConfigDict(frozen=True)

    radians: float = Field(
        default=0.0,
        description="Angle in radians (counter-clockwise positive)",
    )

    @classmethod
    def from_degrees(cls, degrees: float) -> "Rotation2d":
        """Build a rotation from an angle in degrees."""
        return cls(radians=math.radians(degrees))

    @property
    def degrees(self) -> float:
        return math.degrees(self.radians)

    @property
    def cos(self) -> float:
        return math.cos(self.radians)

    @property
    def sin(self) -> float:
        return math.sin(self.radians)

    def rotate_by(self, other: "Rotation2d") -> "Rotation2d":
        """Return the sum of the two rotations."""
        return Rotation2d(radians=self.radians + other.radians)

    def unary_minus(self) -> "Rotation2d":
        """Return the inverse rotation."""
        return Rotation2d(radians=-self.radians)


class Translation2d(BaseModel):
    """
    2D position in field coordinates.

    Attributes:
        x: Horizontal coordinate (meters)
        y: Vertical coordinate (meters)
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(
        default=0.0,
        description="Horizontal coordinate (meters)",
    )

    y: float = Field(
        default=0.0,
        description="Vertical coordinate (meters)",
    )

    def plus(self, other: "Translation2d") -> "Translation2d":
        return Translation2d(x=self.x + other.x, y=self.y + other.y)

    def minus(self, other: "Translation2d") -> "Translation2d":
        return Translation2d(x=self.x - other.x, y=self.y - other.y)

    def times(self, scalar: float) -> "Translation2d":
        return Translation2d(x=self.x * scalar, y=self.y * scalar)

    def rotate_by(self, rotation: Rotation2d) -> "Translation2d":
        """
        Rotate this translation about the origin.

        Args:
            rotation: Rotation to apply (counter-clockwise positive)

        Returns:
            The rotated translation
        """
        cos, sin = rotation.cos, rotation.sin
        return Translation2d(
            x=self.x * cos - self.y * sin,
            y=self.x * sin + self.y * cos,
        )

    @property
    def norm(self) -> float:
        """Distance from the origin."""
        return math.hypot(self.x, self.y)

    def distance(self, other: "Translation2d") -> float:
        """Euclidean distance to another translation."""
        return math.hypot(other.x - self.x, other.y - self.y)


class Pose2d(BaseModel):
    """
    Position plus heading of a moving agent.

    Region constraints only consult the translation; the heading is
    carried for constraints that need it.

    Attributes:
        translation: Position of the agent
        rotation: Heading of the agent
    """

    model_config = ConfigDict(frozen=True)

    translation: Translation2d = Field(
        default_factory=Translation2d,
        description="Position of the agent (meters)",
    )

    rotation: Rotation2d = Field(
        default_factory=Rotation2d,
        description="Heading of the agent",
    )

    @classmethod
    def of(cls, x: float, y: float, heading: float = 0.0) -> "Pose2d":
        """
        Build a pose from raw coordinates.

        Args:
            x: Horizontal coordinate (meters)
            y: Vertical coordinate (meters)
            heading: Heading in radians

        Returns:
            The pose
        """
        return cls(
            translation=Translation2d(x=x, y=y),
            rotation=Rotation2d(radians=heading),
        )

    @property
    def x(self) -> float:
        return self.translation.x

    @property
    def y(self) -> float:
        return self.translation.y
