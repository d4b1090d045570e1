# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

from abc import ABC, abstractmethod
from typing import Any

from ..entities.sensor_frame import SensorFrame


class ICloudDecoder(ABC):
    """Interface for turning transport messages into sensor frames"""

    @abstractmethod
    def decode(self, msg: Any) -> SensorFrame:
        """
        Decode a transport message.

        Raises ValueError (or KeyError / TypeError) for malformed messages.
        """
        pass
