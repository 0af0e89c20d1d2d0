"""
Configuration schema for the geometry factory.

Controls the precision of shapes built through GeometryFactory and how
noteworthy input (negative radius, non-finite coordinates) is reported.
"""

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class GeometryConfig:
    """
    Geometry factory configuration.

    Immutable after construction (frozen dataclass), validated in
    __post_init__.
    """

    double_precision: bool = True
    log_level: str = "INFO"
    warn_on_negative_radius: bool = True
    warn_on_non_finite: bool = True

    def __post_init__(self):
        """Validate geometry configuration."""
        for name in ("double_precision", "warn_on_negative_radius", "warn_on_non_finite"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be a boolean, got {value!r}")

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

    @property
    def logging_level(self) -> int:
        """log_level as a logging module constant."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GeometryConfig":
        """
        Build configuration from a parsed mapping.

        Raises:
            ValueError: If data is not a mapping or has unknown keys
        """
        if not isinstance(data, dict):
            raise ValueError(f"Geometry config must be a mapping, got {type(data).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown geometry config keys: {sorted(unknown)}. "
                f"Allowed: {sorted(known)}"
            )
        return cls(**data)

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "GeometryConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            double_precision: false
            log_level: "DEBUG"
            warn_on_negative_radius: true
            warn_on_non_finite: false

        An empty file yields the defaults.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is invalid or fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        return cls.from_dict(data or {})
