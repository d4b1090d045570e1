"""
Domain entities - point clouds, frames and filter configuration
"""
from .point_cloud import Point, PointCloud, FIELD_NAMES
from .sensor_frame import SensorFrame
from .filter_config import FilterConfig, CropBounds, InvalidConfigError

__all__ = ['Point', 'PointCloud', 'FIELD_NAMES', 'SensorFrame', 'FilterConfig', 'CropBounds', 'InvalidConfigError']
