# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

"""
Voxel grid downsampling.
Each occupied cell of a uniform grid is reduced to the centroid of its points.
"""

import math
from typing import Sequence, Tuple, Union

import numpy as np

from ..entities.point_cloud import PointCloud

LeafSize = Union[float, Sequence[float]]


def normalize_leaf_size(leaf_size: LeafSize) -> Tuple[float, float, float]:
    """
    Expand a uniform or per-axis leaf size into an (lx, ly, lz) tuple.

    Raises:
        ValueError: if any edge length is not a finite positive number
    """
    if np.ndim(leaf_size) == 0:
        try:
            sizes = (float(leaf_size),) * 3
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid leaf size: {leaf_size!r}") from e
    else:
        try:
            sizes = tuple(float(v) for v in leaf_size)
        except TypeError as e:
            raise ValueError(f"Invalid leaf size: {leaf_size!r}") from e
        if len(sizes) != 3:
            raise ValueError(f"Per-axis leaf size needs 3 values, got {len(sizes)}")

    for size in sizes:
        if not math.isfinite(size) or size <= 0:
            raise ValueError(f"Leaf size must be > 0, got {leaf_size!r}")
    return sizes


def voxel_keys(xyz: np.ndarray, leaf_size: Tuple[float, float, float]) -> np.ndarray:
    """Integer (ix, iy, iz) cell index of every row"""
    return np.floor(xyz / np.asarray(leaf_size)).astype(np.int64)


def voxel_downsample(cloud: PointCloud, leaf_size: LeafSize) -> PointCloud:
    """
    Replace the points of every occupied voxel by their centroid.

    Args:
        cloud: Input cloud
        leaf_size: Voxel edge length, uniform or (lx, ly, lz)

    Returns:
        One point per occupied voxel, x/y/z/intensity averaged over the cell.
        Rows are ordered by voxel key, so the result does not depend on the
        input order.
    """
    sizes = normalize_leaf_size(leaf_size)
    if cloud.is_empty():
        return cloud

    data = cloud.data
    data = data[np.isfinite(data[:, :3]).all(axis=1)]
    if data.shape[0] == 0:
        return PointCloud.empty()

    keys = voxel_keys(data[:, :3], sizes)
    _, inverse, counts = np.unique(keys, axis=0, return_inverse=True, return_counts=True)
    inverse = inverse.reshape(-1)

    n_voxels = counts.shape[0]
    sums = np.column_stack([
        np.bincount(inverse, weights=data[:, column], minlength=n_voxels)
        for column in range(4)
    ])
    return PointCloud(sums / counts[:, None])


class VoxelDownsampler:
    """Voxel stage, leaf size checked at construction"""

    def __init__(self, leaf_size: LeafSize):
        self.leaf_size = normalize_leaf_size(leaf_size)

    def filter(self, cloud: PointCloud) -> PointCloud:
        return voxel_downsample(cloud, self.leaf_size)
