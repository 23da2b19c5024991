"""
Constraint Loading
==================

Utilities for loading declarative constraint definitions and building
runtime constraint objects from them.

This module handles:
    - Loading definitions from YAML or JSON files
    - Building nested region gates and limits
    - Looking up named top-level constraints

Definitions are STATIC and loaded once. Built constraints are immutable.

Example:
    from gated_constraints.constraints import ConstraintManager

    manager = ConstraintManager()
    manager.load_from_file("./data/constraints/example.yaml")

    constraints = manager.build()
    v_max = constraints.max_velocity(pose, curvature=0.2, velocity=1.0)

    dock = manager.get_constraint("loading_dock")
"""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import yaml

from gated_constraints.constraints.aggregate import ConstraintSet
from gated_constraints.constraints.base import TrajectoryConstraint
from gated_constraints.constraints.limits import (
    CentripetalAccelerationConstraint,
    MaxAccelerationConstraint,
    MaxVelocityConstraint,
)
from gated_constraints.constraints.region import (
    EllipticalRegionConstraint,
    RectangularRegionConstraint,
)
from gated_constraints.models.constraints import (
    CentripetalAccelerationDefinition,
    ConstraintDefinition,
    ConstraintDefinitionFile,
    EllipticalRegionDefinition,
    MaxAccelerationDefinition,
    MaxVelocityDefinition,
    RectangularRegionDefinition,
)
from gated_constraints.models.geometry import Rotation2d

if TYPE_CHECKING:
    from gated_constraints.config import Settings


logger = logging.getLogger(__name__)


def build_constraint(definition: ConstraintDefinition) -> TrajectoryConstraint:
    """
    Build a runtime constraint from its definition.

    Region definitions are built recursively, wrapping their nested
    constraint.

    Args:
        definition: Validated constraint definition

    Returns:
        The runtime constraint

    Raises:
        TypeError: If the definition kind is not supported
    """
    if isinstance(definition, MaxVelocityDefinition):
        return MaxVelocityConstraint(definition.max_velocity)

    if isinstance(definition, CentripetalAccelerationDefinition):
        return CentripetalAccelerationConstraint(definition.max_centripetal_acceleration)

    if isinstance(definition, MaxAccelerationDefinition):
        return MaxAccelerationConstraint(definition.max_acceleration)

    if isinstance(definition, RectangularRegionDefinition):
        return RectangularRegionConstraint(
            bottom_left=definition.bottom_left,
            top_right=definition.top_right,
            constraint=build_constraint(definition.constraint),
        )

    if isinstance(definition, EllipticalRegionDefinition):
        return EllipticalRegionConstraint(
            center=definition.center,
            x_width=definition.x_width,
            y_width=definition.y_width,
            rotation=Rotation2d.from_degrees(definition.rotation_degrees),
            constraint=build_constraint(definition.constraint),
        )

    raise TypeError(f"Unsupported constraint definition: {type(definition).__name__}")


class ConstraintManager:
    """
    Manager for declarative constraint definitions.

    Loads definitions from YAML/JSON and builds runtime constraints.

    Attributes:
        definition: Loaded definition file
        _is_loaded: Whether definitions have been loaded
    """

    def __init__(self) -> None:
        """Initialize an empty constraint manager."""
        self.definition: Optional[ConstraintDefinitionFile] = None
        self._is_loaded: bool = False

    @classmethod
    def from_settings(cls, settings: Optional["Settings"] = None) -> "ConstraintManager":
        """
        Create a manager loaded from the configured definition path.

        Args:
            settings: Settings to use. If None, the global settings are used.

        Returns:
            A loaded ConstraintManager
        """
        if settings is None:
            # Deferred: importing config loads and applies global settings
            from gated_constraints.config import settings as global_settings

            settings = global_settings

        manager = cls()
        manager.load_from_file(settings.constraints.definition_path)
        return manager

    @property
    def is_loaded(self) -> bool:
        return self._is_loaded

    def load_from_file(self, path: str) -> None:
        """
        Load constraint definitions from a YAML or JSON file.

        The format is chosen by extension: .yaml/.yml or .json.

        Args:
            path: Path to the definition file

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the extension is not supported
            pydantic.ValidationError: If the document is invalid
        """
        file_path = Path(path)

        if not file_path.exists():
            raise FileNotFoundError(f"Constraint file not found: {path}")

        suffix = file_path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise ValueError(f"Unsupported constraint file type: {suffix or path}")

        logger.info(f"Loading constraints from: {path}")

        with open(file_path, "r") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}

        self.load_from_dict(data)

    def load_from_dict(self, data: Dict[str, Any]) -> None:
        """
        Load constraint definitions from an already-parsed document.

        Args:
            data: Parsed definition document

        Raises:
            pydantic.ValidationError: If the document is invalid
        """
        self.definition = ConstraintDefinitionFile.model_validate(data)
        self._is_loaded = True

        logger.info(
            f"Loaded constraints: name={self.definition.name}, "
            f"count={len(self.definition.constraints)}"
        )

    def build(self) -> ConstraintSet:
        """
        Build all top-level constraints into a single set.

        Returns:
            ConstraintSet of the loaded constraints, empty if not loaded
        """
        if not self._is_loaded or self.definition is None:
            logger.warning("No constraints loaded, building empty constraint set")
            return ConstraintSet()

        return ConstraintSet(
            build_constraint(definition) for definition in self.definition.constraints
        )

    def get_constraint(self, name: str) -> Optional[TrajectoryConstraint]:
        """
        Build a named top-level constraint.

        Args:
            name: Name given to the constraint in the definition file

        Returns:
            The runtime constraint if found, None otherwise
        """
        if not self._is_loaded or self.definition is None:
            return None

        for definition in self.definition.constraints:
            if definition.name == name:
                return build_constraint(definition)

        return None
