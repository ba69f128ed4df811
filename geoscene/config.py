"""
Configuration schema for the GeoJSON scene parser.

Defines the defaults applied when callers pass no render options or
properties, whether polygon holes are re-oriented, and the log level.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class SceneConfig:
    """
    Parser configuration.

    Loaded from YAML or a dict and validated at construction.
    Immutable after construction (frozen dataclass); the option and property
    defaults are copied before every use, never handed out directly.
    """

    # Render options used when parse() is called without any
    default_options: Dict[str, Any] = field(default_factory=dict)

    # Properties used when neither the document nor the caller supplies any
    default_properties: Dict[str, Any] = field(default_factory=dict)

    # Reverse holes that wind the same way as their outer ring
    correct_winding: bool = True

    log_level: str = "INFO"

    def __post_init__(self):
        """Validate scene configuration."""
        if not isinstance(self.default_options, dict):
            raise ValueError(
                f"default_options must be a mapping, got {type(self.default_options).__name__}"
            )

        if not isinstance(self.default_properties, dict):
            raise ValueError(
                f"default_properties must be a mapping, got {type(self.default_properties).__name__}"
            )

        if not isinstance(self.correct_winding, bool):
            raise ValueError(
                f"correct_winding must be a boolean, got {self.correct_winding!r}"
            )

        level = str(self.log_level).upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )
        object.__setattr__(self, 'log_level', level)

    @property
    def logging_level(self) -> int:
        """log_level as a logging module constant."""
        return getattr(logging, self.log_level)

    def options(self) -> Dict[str, Any]:
        """Fresh copy of the default render options."""
        return dict(self.default_options)

    def properties(self) -> Dict[str, Any]:
        """Fresh copy of the default properties."""
        return dict(self.default_properties)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SceneConfig":
        """
        Build from a plain mapping (e.g. parsed YAML).

        Unknown keys are rejected so typos surface at startup.
        """
        data = data or {}
        known = {"default_options", "default_properties", "correct_winding", "log_level"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown config keys: {sorted(unknown)}. "
                f"Must be among {sorted(known)}"
            )

        return cls(
            default_options=data.get("default_options") or {},
            default_properties=data.get("default_properties") or {},
            correct_winding=data.get("correct_winding", True),
            log_level=data.get("log_level", "INFO"),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> "SceneConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            default_options:
              clickable: true
              strokeColor: "#3366ff"
              strokeWeight: 2

            default_properties:
              layer: "overlay"

            correct_winding: true
            log_level: "INFO"
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Scene config not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        if data is not None and not isinstance(data, dict):
            raise ValueError(
                f"Scene config must be a YAML mapping, got {type(data).__name__}"
            )

        return cls.from_dict(data or {})
