# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

"""
Statistical outlier removal.

For every point the mean distance to its k nearest neighbours is computed.
Points whose mean distance exceeds mean + multiplier * stddev of all those
values are discarded.
"""

import logging
import math

import numpy as np
from scipy.spatial import cKDTree

from ..entities.point_cloud import PointCloud

logger = logging.getLogger(__name__)

# Mean distances closer than this (relative) count as equal
EQUAL_DISTANCE_RTOL = 1e-9


def mean_neighbor_distances(xyz: np.ndarray, k: int, workers: int = 1) -> np.ndarray:
    """
    Mean Euclidean distance of every point to its k nearest neighbours.

    The query asks for k + 1 neighbours and drops the first column, which is
    the point itself (distance 0). Requires len(xyz) > k.
    """
    xyz = np.array(xyz, dtype=np.float64, order='C')
    tree = cKDTree(xyz)
    distances, _ = tree.query(xyz, k=k + 1, workers=workers)
    return distances[:, 1:].mean(axis=1)


def remove_statistical_outliers(
    cloud: PointCloud,
    mean_k: int,
    stddev_multiplier: float,
    workers: int = 1
) -> PointCloud:
    """
    Drop points whose neighbourhood is sparse relative to the whole frame.

    Args:
        cloud: Input cloud
        mean_k: Number of neighbours used for the mean distance
        stddev_multiplier: Threshold is mu + stddev_multiplier * sigma
        workers: Parallel workers for the k-d tree queries (-1 uses all cores)

    Returns:
        Subset of cloud in its original order
    """
    point_count = len(cloud)
    if point_count <= 1:
        return cloud

    finite = np.isfinite(cloud.xyz).all(axis=1)
    if not finite.all():
        logger.warning(f"Dropping {int((~finite).sum())} points with non-finite coordinates")
        cloud = cloud.select(finite)
        point_count = len(cloud)
        if point_count <= 1:
            return cloud

    k = min(mean_k, point_count - 1)
    if k < mean_k:
        logger.debug(f"Cloud has {point_count} points, using k={k} instead of {mean_k}")

    stats = mean_neighbor_distances(cloud.xyz, k, workers)
    mu = stats.mean()

    # Equal up to rounding: sigma is 0 and every point passes
    if np.allclose(stats, mu, rtol=EQUAL_DISTANCE_RTOL, atol=0.0):
        return cloud

    sigma = stats.std()
    threshold = mu + stddev_multiplier * sigma
    return cloud.select(stats <= threshold)


class StatisticalOutlierFilter:
    """Outlier stage, parameters checked at construction"""

    def __init__(self, mean_k: int = 10, stddev_multiplier: float = 1.0, workers: int = 1):
        if isinstance(mean_k, bool) or not isinstance(mean_k, int) or mean_k < 1:
            raise ValueError(f"mean_k must be an integer >= 1, got {mean_k!r}")
        if not math.isfinite(stddev_multiplier) or stddev_multiplier < 0:
            raise ValueError(f"stddev_multiplier must be >= 0, got {stddev_multiplier!r}")
        if not (workers == -1 or workers >= 1):
            raise ValueError(f"workers must be -1 or >= 1, got {workers!r}")

        self.mean_k = mean_k
        self.stddev_multiplier = stddev_multiplier
        self.workers = workers

    def filter(self, cloud: PointCloud) -> PointCloud:
        return remove_statistical_outliers(
            cloud, self.mean_k, self.stddev_multiplier, self.workers)
