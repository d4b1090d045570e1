# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import logging
from typing import Any, Optional

from ...domain.interfaces import ICloudDecoder, ICloudPublisher
from .filter_pipeline import FilterPipeline, PipelineResult

logger = logging.getLogger(__name__)


class CloudFilterService:
    """Service that decodes, filters and publishes incoming frames"""

    def __init__(self, pipeline: FilterPipeline, decoder: ICloudDecoder, publisher: ICloudPublisher):
        self.pipeline = pipeline
        self.decoder = decoder
        self.publisher = publisher
        self.processed_frames = 0
        self.dropped_frames = 0

    def handle_message(self, msg: Any) -> Optional[PipelineResult]:
        """Process one transport message, malformed frames are dropped"""
        try:
            frame = self.decoder.decode(msg)
        except (ValueError, KeyError, TypeError) as e:
            self.dropped_frames += 1
            logger.warning(f"Dropping malformed point cloud frame: {e}")
            return None

        result = self.pipeline.process(frame.cloud)

        self.publisher.publish_downsampled(result.downsampled, frame.header)
        self.publisher.publish_filtered(result.filtered, frame.header)
        self.processed_frames += 1
        return result
