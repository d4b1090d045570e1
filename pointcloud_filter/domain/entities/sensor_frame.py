# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

from dataclasses import dataclass
from typing import Any, Optional

from .point_cloud import PointCloud


@dataclass(frozen=True)
class SensorFrame:
    """Decoded sensor frame"""
    cloud: PointCloud
    header: Optional[Any] = None  # transport header, echoed on outputs
