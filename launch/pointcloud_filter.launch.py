#!/usr/bin/env python3

# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

"""
Launch file for the PointCloud filter node
"""

import os

from ament_index_python.packages import get_package_share_directory
from launch import LaunchDescription
from launch.actions import DeclareLaunchArgument
from launch.substitutions import LaunchConfiguration
from launch_ros.actions import Node
from launch_ros.parameter_descriptions import ParameterValue


def generate_launch_description():
    """Generate launch description for pointcloud_filter_node"""

    config_file = os.path.join(
        get_package_share_directory('pointcloud_filter'),
        'config',
        'pointcloud_filter.yaml'
    )

    # Declare launch arguments
    input_topic_arg = DeclareLaunchArgument(
        'input_topic',
        default_value='/agent2/points',
        description='Raw point cloud topic'
    )

    leaf_size_arg = DeclareLaunchArgument(
        'voxel_leaf_size',
        default_value='0.5',
        description='Voxel edge length (meters)'
    )

    mean_k_arg = DeclareLaunchArgument(
        'outlier_mean_k',
        default_value='10',
        description='Neighbour count for statistical outlier removal'
    )

    stddev_arg = DeclareLaunchArgument(
        'outlier_stddev_multiplier',
        default_value='1.0',
        description='Standard deviation multiplier for the outlier threshold'
    )

    # PointCloud filter node
    pointcloud_filter_node = Node(
        package='pointcloud_filter',
        executable='pointcloud_filter_node',
        name='pointcloud_filter',
        output='screen',
        parameters=[
            config_file,
            {
                'input_topic': LaunchConfiguration('input_topic'),
                'voxel_leaf_size': ParameterValue(
                    LaunchConfiguration('voxel_leaf_size'), value_type=float),
                'outlier_mean_k': ParameterValue(
                    LaunchConfiguration('outlier_mean_k'), value_type=int),
                'outlier_stddev_multiplier': ParameterValue(
                    LaunchConfiguration('outlier_stddev_multiplier'), value_type=float),
            },
        ],
    )

    return LaunchDescription([
        input_topic_arg,
        leaf_size_arg,
        mean_k_arg,
        stddev_arg,
        pointcloud_filter_node,
    ])
