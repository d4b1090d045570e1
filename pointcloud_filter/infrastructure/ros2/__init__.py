"""
Infrastructure ROS2 - PointCloud2 adapters
"""
from .cloud_decoder import ROS2CloudDecoder
from .ros2_cloud_publisher import ROS2CloudPublisher

__all__ = ['ROS2CloudDecoder', 'ROS2CloudPublisher']
