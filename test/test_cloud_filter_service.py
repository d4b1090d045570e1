# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import unittest

import numpy as np

from pointcloud_filter.application.services import CloudFilterService, FilterPipeline
from pointcloud_filter.domain.entities import FilterConfig, PointCloud, SensorFrame
from pointcloud_filter.domain.interfaces import ICloudDecoder, ICloudPublisher


class ArrayDecoder(ICloudDecoder):
    """Test decoder: messages are dicts with 'points' and 'header'"""

    def decode(self, msg):
        return SensorFrame(cloud=PointCloud.from_array(msg['points']), header=msg['header'])


class RecordingPublisher(ICloudPublisher):

    def __init__(self):
        self.downsampled = []
        self.filtered = []

    def publish_downsampled(self, cloud, header=None):
        self.downsampled.append((cloud, header))

    def publish_filtered(self, cloud, header=None):
        self.filtered.append((cloud, header))


class TestCloudFilterService(unittest.TestCase):

    def setUp(self):
        self.publisher = RecordingPublisher()
        self.service = CloudFilterService(
            pipeline=FilterPipeline(FilterConfig()),
            decoder=ArrayDecoder(),
            publisher=self.publisher
        )

    def test_publishes_both_outputs_with_header(self):
        rng = np.random.default_rng(0)
        points = rng.uniform([-5, -5, -0.5], [5, 5, 0.5], size=(300, 3))

        result = self.service.handle_message({'points': points, 'header': 'frame-7'})

        self.assertIsNotNone(result)
        self.assertEqual(len(self.publisher.downsampled), 1)
        self.assertEqual(len(self.publisher.filtered), 1)
        self.assertIs(self.publisher.downsampled[0][0], result.downsampled)
        self.assertIs(self.publisher.filtered[0][0], result.filtered)
        self.assertEqual(self.publisher.filtered[0][1], 'frame-7')
        self.assertEqual(self.service.processed_frames, 1)

    def test_malformed_frame_is_dropped_and_processing_continues(self):
        self.assertIsNone(self.service.handle_message({'points': [[1.0, 2.0]], 'header': 'bad'}))
        self.assertIsNone(self.service.handle_message({'header': 'missing points'}))

        self.assertEqual(self.service.dropped_frames, 2)
        self.assertEqual(self.publisher.filtered, [])

        result = self.service.handle_message({'points': [[0.0, 0.0, 0.0]], 'header': 'good'})
        self.assertEqual(len(result.filtered), 1)
        self.assertEqual(self.service.processed_frames, 1)

    def test_empty_frame_is_published(self):
        self.service.handle_message({'points': [], 'header': 'empty'})

        self.assertTrue(self.publisher.downsampled[0][0].is_empty())
        self.assertTrue(self.publisher.filtered[0][0].is_empty())
