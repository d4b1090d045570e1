# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..entities.point_cloud import PointCloud


class ICloudPublisher(ABC):
    """Interface for publishing pipeline outputs"""

    @abstractmethod
    def publish_downsampled(self, cloud: PointCloud, header: Optional[Any] = None) -> None:
        """Publish the cloud after voxel downsampling"""
        pass

    @abstractmethod
    def publish_filtered(self, cloud: PointCloud, header: Optional[Any] = None) -> None:
        """Publish the cloud after outlier removal"""
        pass
