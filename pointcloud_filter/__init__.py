# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

"""
PointCloud Filter Package

Crop, voxel grid and statistical outlier filtering of range sensor point
clouds, with a ROS2 node publishing the downsampled and filtered outputs.
"""

__version__ = "1.0.0"
__author__ = "brimo"
__license__ = "BSD-3-Clause"

__all__ = [
    'domain',
    'application',
    'infrastructure',
    'presentation',
]
