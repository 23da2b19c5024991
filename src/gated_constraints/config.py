"""
gated_constraints Configuration
===============================

This module handles configuration loading for the constraint library.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    GATED_CONSTRAINTS_PATH -> constraints.definition_path
    GATED_LOG_LEVEL        -> logging.level
    GATED_LOG_FORMAT       -> logging.format

Example:
    from gated_constraints.config import settings

    print(settings.constraints.definition_path)
    print(settings.logging.level)
"""

import os
import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)

# Keyed by LoggingConfig.format
LOG_FORMATS = {
    "json": (
        '{"ts": "%(asctime)s", "level": "%(levelname)s", '
        '"logger": "%(name)s", "msg": "%(message)s"}'
    ),
    "text": "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
}
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


# =============================================================================
# Configuration Models
# =============================================================================

class ConstraintsConfig(BaseModel):
    """Constraint definition source configuration."""

    definition_path: str = Field(
        default="./data/constraints/example.yaml",
        description="Path to constraint definition file (YAML or JSON)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: Literal["json", "text"] = Field(
        default="json",
        description="Log format: json or text",
    )


class Settings(BaseModel):
    """
    Main settings class for gated_constraints.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    constraints: ConstraintsConfig = Field(default_factory=ConstraintsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    # Find config file
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    # Load from YAML if exists
    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    if env_path := os.environ.get("GATED_CONSTRAINTS_PATH"):
        config_data.setdefault("constraints", {})["definition_path"] = env_path

    if env_log := os.environ.get("GATED_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_format := os.environ.get("GATED_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_format


def setup_logging(settings: Settings) -> None:
    """
    Configure root logging for the library's log level and format.

    Unknown level names fall back to INFO.

    Args:
        settings: Loaded settings
    """
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMATS[settings.logging.format],
        datefmt=LOG_DATE_FORMAT,
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Resolved once on import; ConstraintManager.from_settings reads it
settings = load_config()
setup_logging(settings)
