# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import math
from dataclasses import dataclass, fields, replace as dataclass_replace
from typing import Any, Dict


class InvalidConfigError(ValueError):
    """Raised when a filter configuration can not be accepted"""


@dataclass(frozen=True)
class CropBounds:
    """Axis-aligned box used by the region crop stage (bounds inclusive)"""
    x_min: float
    x_max: float
    y_min: float
    y_max: float
    z_min: float
    z_max: float

    def is_degenerate(self) -> bool:
        """True if any axis range is empty (min > max)"""
        return (self.x_min > self.x_max or
                self.y_min > self.y_max or
                self.z_min > self.z_max)


@dataclass(frozen=True)
class FilterConfig:
    """Configuration of the crop / voxel / outlier pipeline"""
    x_min: float = -10.0
    x_max: float = 20.0
    y_min: float = -10.0
    y_max: float = 10.0
    z_min: float = -1.0
    z_max: float = 1.5
    leaf_size: float = 0.5
    mean_k: int = 10
    stddev_multiplier: float = 1.0
    workers: int = 1
    require_nonempty_bounds: bool = False

    def __post_init__(self):
        self.validate()

    @classmethod
    def from_params(cls, **params: Any) -> 'FilterConfig':
        """Create configuration from node parameters, unknown keys are rejected"""
        known = {f.name for f in fields(cls)}
        unknown = set(params) - known
        if unknown:
            raise InvalidConfigError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**params)

    @property
    def bounds(self) -> CropBounds:
        return CropBounds(
            x_min=self.x_min, x_max=self.x_max,
            y_min=self.y_min, y_max=self.y_max,
            z_min=self.z_min, z_max=self.z_max,
        )

    def replace(self, **changes: Any) -> 'FilterConfig':
        """New validated configuration with the given fields changed"""
        return dataclass_replace(self, **changes)

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def validate(self) -> None:
        bounds = self.bounds
        for name, value in bounds.__dict__.items():
            if not _is_finite_number(value):
                raise InvalidConfigError(f"{name} must be a finite number, got {value!r}")

        if self.require_nonempty_bounds and bounds.is_degenerate():
            raise InvalidConfigError(
                f"Crop bounds describe an empty region: {bounds}")

        if not _is_finite_number(self.leaf_size) or self.leaf_size <= 0:
            raise InvalidConfigError(f"leaf_size must be > 0, got {self.leaf_size!r}")

        if isinstance(self.mean_k, bool) or not isinstance(self.mean_k, int) or self.mean_k < 1:
            raise InvalidConfigError(f"mean_k must be an integer >= 1, got {self.mean_k!r}")

        if not _is_finite_number(self.stddev_multiplier) or self.stddev_multiplier < 0:
            raise InvalidConfigError(
                f"stddev_multiplier must be >= 0, got {self.stddev_multiplier!r}")

        if (isinstance(self.workers, bool) or not isinstance(self.workers, int)
                or not (self.workers == -1 or self.workers >= 1)):
            raise InvalidConfigError(f"workers must be -1 or >= 1, got {self.workers!r}")


def _is_finite_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))
