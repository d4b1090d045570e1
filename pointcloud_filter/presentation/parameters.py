# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

"""
Node parameter tables.

Kept free of rclpy so the reload rules can be checked without a ROS 2 install.
"""

from typing import Any, Dict, Mapping

from ..domain.entities import InvalidConfigError

# ROS parameter name -> FilterConfig field
CONFIG_PARAMETERS: Dict[str, str] = {
    'pass_through_x_min': 'x_min',
    'pass_through_x_max': 'x_max',
    'pass_through_y_min': 'y_min',
    'pass_through_y_max': 'y_max',
    'pass_through_z_min': 'z_min',
    'pass_through_z_max': 'z_max',
    'voxel_leaf_size': 'leaf_size',
    'outlier_mean_k': 'mean_k',
    'outlier_stddev_multiplier': 'stddev_multiplier',
    'outlier_workers': 'workers',
    'require_nonempty_bounds': 'require_nonempty_bounds',
}

# Read once when topics are created
STARTUP_PARAMETERS: Dict[str, Any] = {
    'input_topic': '/agent2/points',
    'downsampled_topic': '/voxelized_points',
    'filtered_topic': '/filtered_points',
    'publisher_depth': 100,
}


def config_changes(updates: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Translate runtime parameter updates into FilterConfig field changes.

    Args:
        updates: ROS parameter name -> new value

    Returns:
        FilterConfig field -> new value. Names outside both tables are ignored.

    Raises:
        InvalidConfigError: if any start-up only parameter is being changed
    """
    fixed = sorted(name for name in updates if name in STARTUP_PARAMETERS)
    if fixed:
        raise InvalidConfigError(
            f"Parameters {', '.join(fixed)} are read at start-up only, restart the node to change them")

    return {
        CONFIG_PARAMETERS[name]: value
        for name, value in updates.items()
        if name in CONFIG_PARAMETERS
    }
