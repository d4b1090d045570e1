# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import logging
from typing import Any, Optional

import numpy as np
from rclpy.node import Node
from rclpy.publisher import Publisher
from sensor_msgs.msg import PointField
from sensor_msgs_py import point_cloud2
from std_msgs.msg import Header

from ...domain.interfaces import ICloudPublisher
from ...domain.entities import PointCloud

logger = logging.getLogger(__name__)

POINT_FIELDS = [
    PointField(name='x', offset=0, datatype=PointField.FLOAT32, count=1),
    PointField(name='y', offset=4, datatype=PointField.FLOAT32, count=1),
    PointField(name='z', offset=8, datatype=PointField.FLOAT32, count=1),
    PointField(name='intensity', offset=12, datatype=PointField.FLOAT32, count=1),
]


class ROS2CloudPublisher(ICloudPublisher):
    """
    ROS2 adapter for publishing pipeline outputs.

    Outputs carry the header of the input frame. frame_id is only used to stamp
    a fresh header when a caller publishes without one.
    """

    def __init__(self, node: Node, downsampled_pub: Publisher, filtered_pub: Publisher,
                 frame_id: str = 'map'):
        self.node = node
        self.downsampled_pub = downsampled_pub
        self.filtered_pub = filtered_pub
        self.frame_id = frame_id

    def publish_downsampled(self, cloud: PointCloud, header: Optional[Any] = None) -> None:
        """Publish voxelized cloud"""
        try:
            self.downsampled_pub.publish(self._to_msg(cloud, header))
        except Exception as e:
            logger.error(f"Error publishing downsampled cloud: {e}")

    def publish_filtered(self, cloud: PointCloud, header: Optional[Any] = None) -> None:
        """Publish outlier-filtered cloud"""
        try:
            self.filtered_pub.publish(self._to_msg(cloud, header))
        except Exception as e:
            logger.error(f"Error publishing filtered cloud: {e}")

    def _to_msg(self, cloud: PointCloud, header: Optional[Header]):
        if header is None:
            header = Header(frame_id=self.frame_id)
            header.stamp = self.node.get_clock().now().to_msg()

        points = cloud.data.astype(np.float32)
        return point_cloud2.create_cloud(header, POINT_FIELDS, points)
