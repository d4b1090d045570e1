# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import logging

import numpy as np
from sensor_msgs.msg import PointCloud2
from sensor_msgs_py import point_cloud2

from ...domain.interfaces import ICloudDecoder
from ...domain.entities import PointCloud, SensorFrame

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('x', 'y', 'z')


class ROS2CloudDecoder(ICloudDecoder):
    """Decodes sensor_msgs/PointCloud2 into x, y, z, intensity frames"""

    def decode(self, msg: PointCloud2) -> SensorFrame:
        available = {field.name for field in msg.fields}
        missing = [name for name in REQUIRED_FIELDS if name not in available]
        if missing:
            raise ValueError(f"PointCloud2 is missing fields {missing}")

        expected_size = msg.row_step * msg.height
        if len(msg.data) < expected_size:
            raise ValueError(
                f"PointCloud2 data is truncated: {len(msg.data)} < {expected_size} bytes")

        field_names = list(REQUIRED_FIELDS)
        if 'intensity' in available:
            field_names.append('intensity')

        points = point_cloud2.read_points(msg, field_names=field_names, skip_nans=True)
        # Fields may have mixed datatypes (e.g. uint16 intensity)
        columns = [np.asarray(points[name], dtype=np.float64) for name in field_names]
        array = np.column_stack(columns) if len(points) else np.empty((0, len(field_names)))

        return SensorFrame(cloud=PointCloud.from_array(array), header=msg.header)
