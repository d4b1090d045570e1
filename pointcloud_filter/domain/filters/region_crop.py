# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

"""
Axis-aligned region crop.

All three ranges are tested in one combined mask per point, so the result
is the intersection of the x, y and z slabs.
"""

import numpy as np

from ..entities.filter_config import CropBounds
from ..entities.point_cloud import PointCloud


def crop_mask(xyz: np.ndarray, bounds: CropBounds) -> np.ndarray:
    """Boolean mask of rows inside the box, bounds inclusive"""
    x, y, z = xyz[:, 0], xyz[:, 1], xyz[:, 2]
    # NaN compares False, so non-finite points always fall outside
    return ((x >= bounds.x_min) & (x <= bounds.x_max) &
            (y >= bounds.y_min) & (y <= bounds.y_max) &
            (z >= bounds.z_min) & (z <= bounds.z_max))


def crop_to_region(cloud: PointCloud, bounds: CropBounds) -> PointCloud:
    """Points of cloud inside bounds, relative order preserved"""
    if cloud.is_empty():
        return cloud
    return cloud.select(crop_mask(cloud.xyz, bounds))


class RegionCropFilter:
    """Crop stage bound to a fixed box"""

    def __init__(self, bounds: CropBounds):
        self.bounds = bounds

    def filter(self, cloud: PointCloud) -> PointCloud:
        return crop_to_region(cloud, self.bounds)
