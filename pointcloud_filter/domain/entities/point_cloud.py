# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence, Union

import numpy as np


FIELD_NAMES = ('x', 'y', 'z', 'intensity')


@dataclass(frozen=True)
class Point:
    """Single point of a range sensor frame"""
    x: float
    y: float
    z: float
    intensity: float = 0.0


@dataclass(frozen=True, eq=False)
class PointCloud:
    """
    Immutable frame of points.

    Backed by a read-only (N, 4) float64 array with columns x, y, z, intensity.
    Row order carries no meaning; filters may reorder or merge points.
    """
    data: np.ndarray

    def __post_init__(self):
        data = np.array(self.data, dtype=np.float64, copy=True)
        if data.size == 0:
            data = data.reshape(0, 4)
        elif data.ndim != 2 or data.shape[1] != 4:
            raise ValueError(f"PointCloud data must have shape (N, 4), got {data.shape}")
        data.setflags(write=False)
        object.__setattr__(self, 'data', data)

    @classmethod
    def empty(cls) -> 'PointCloud':
        return cls(np.empty((0, 4), dtype=np.float64))

    @classmethod
    def from_points(cls, points: Iterable[Union[Point, Sequence[float]]]) -> 'PointCloud':
        """Build a cloud from Point objects or (x, y, z[, intensity]) tuples"""
        rows = []
        for point in points:
            if isinstance(point, Point):
                rows.append((point.x, point.y, point.z, point.intensity))
            else:
                rows.append(tuple(point))
        if not rows:
            return cls.empty()
        return cls.from_array(rows)

    @classmethod
    def from_array(cls, array: Any) -> 'PointCloud':
        """
        Build a cloud from an (N, 3) or (N, 4) array-like.

        Raises:
            ValueError: if the input cannot be read as numeric rows of
                3 (x, y, z) or 4 (x, y, z, intensity) columns
        """
        try:
            values = np.asarray(array, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Point data is not numeric: {e}") from e

        if values.size == 0:
            return cls.empty()
        if values.ndim != 2 or values.shape[1] not in (3, 4):
            raise ValueError(
                f"Point data must have shape (N, 3) or (N, 4), got {values.shape}")

        if values.shape[1] == 3:
            values = np.hstack((values, np.zeros((values.shape[0], 1))))
        return cls(values)

    def __len__(self) -> int:
        return self.data.shape[0]

    def __iter__(self) -> Iterator[Point]:
        for x, y, z, intensity in self.data:
            yield Point(float(x), float(y), float(z), float(intensity))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointCloud):
            return NotImplemented
        return np.array_equal(self.data, other.data, equal_nan=True)

    def __repr__(self) -> str:
        return f"PointCloud({len(self)} points)"

    @property
    def xyz(self) -> np.ndarray:
        return self.data[:, :3]

    @property
    def intensity(self) -> np.ndarray:
        return self.data[:, 3]

    def is_empty(self) -> bool:
        return len(self) == 0

    def select(self, selector: np.ndarray) -> 'PointCloud':
        """Subset of this cloud by boolean mask or index array, order preserved"""
        return PointCloud(self.data[selector])

    def to_array(self) -> np.ndarray:
        """Writable (N, 4) copy of the point data"""
        return self.data.copy()
