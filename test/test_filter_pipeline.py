# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import threading
import unittest

import numpy as np

from pointcloud_filter.application.services import FilterPipeline
from pointcloud_filter.domain.entities import FilterConfig, PointCloud


def uniform_cloud(count=1000, seed=0):
    rng = np.random.default_rng(seed)
    xyz = rng.uniform([-20, -20, -5], [20, 20, 5], size=(count, 3))
    intensity = rng.uniform(0, 255, size=(count, 1))
    return PointCloud.from_array(np.hstack((xyz, intensity)))


class TestFilterPipeline(unittest.TestCase):

    def test_counts_never_increase(self):
        cloud = uniform_cloud()
        result = FilterPipeline(FilterConfig()).process(cloud)
        counts = result.counts

        self.assertEqual(counts.count_in, 1000)
        self.assertLessEqual(counts.count_after_crop, 1000)
        self.assertLessEqual(counts.count_after_downsample, counts.count_after_crop)
        self.assertLessEqual(counts.count_after_outlier, counts.count_after_downsample)
        self.assertEqual(counts.count_after_downsample, len(result.downsampled))
        self.assertEqual(counts.count_after_outlier, len(result.filtered))

    def test_point_on_max_bound_survives_crop(self):
        config = FilterConfig()
        cloud = PointCloud.from_points([(config.x_max, 0.0, 0.0, 1.0)])
        result = FilterPipeline(config).process(cloud)

        self.assertEqual(result.counts.count_after_crop, 1)
        np.testing.assert_allclose(result.filtered.data, [[config.x_max, 0.0, 0.0, 1.0]])

    def test_filtered_is_subset_of_downsampled(self):
        result = FilterPipeline(FilterConfig(leaf_size=1.0, mean_k=5)).process(uniform_cloud(seed=5))

        downsampled = {tuple(row) for row in result.downsampled.data}
        filtered = {tuple(row) for row in result.filtered.data}
        self.assertTrue(filtered <= downsampled)

    def test_downsampled_points_inside_crop_box(self):
        config = FilterConfig()
        result = FilterPipeline(config).process(uniform_cloud(seed=2))

        xyz = result.downsampled.xyz
        self.assertTrue(np.all((xyz[:, 0] >= config.x_min) & (xyz[:, 0] <= config.x_max)))
        self.assertTrue(np.all((xyz[:, 1] >= config.y_min) & (xyz[:, 1] <= config.y_max)))
        self.assertTrue(np.all((xyz[:, 2] >= config.z_min) & (xyz[:, 2] <= config.z_max)))

    def test_empty_frame(self):
        result = FilterPipeline(FilterConfig()).process(PointCloud.empty())

        self.assertTrue(result.downsampled.is_empty())
        self.assertTrue(result.filtered.is_empty())

    def test_frames_are_independent(self):
        pipeline = FilterPipeline(FilterConfig())
        first = pipeline.process(uniform_cloud(seed=1))
        pipeline.process(uniform_cloud(seed=2))
        again = pipeline.process(uniform_cloud(seed=1))

        self.assertEqual(first.filtered, again.filtered)

    def test_update_config(self):
        pipeline = FilterPipeline(FilterConfig())
        cloud = PointCloud.from_points([(0.1, 0.1, 0.1, 0.0), (0.9, 0.1, 0.1, 0.0)])

        self.assertEqual(len(pipeline.process(cloud).downsampled), 2)
        pipeline.update_config(pipeline.config.replace(leaf_size=1.0))
        self.assertEqual(pipeline.config.leaf_size, 1.0)
        self.assertEqual(len(pipeline.process(cloud).downsampled), 1)

    def test_concurrent_updates_never_mix_configs(self):
        narrow = FilterConfig(x_min=-1.0, x_max=1.0, leaf_size=0.25)
        wide = FilterConfig(x_min=-20.0, x_max=20.0, leaf_size=2.0)
        pipeline = FilterPipeline(narrow)
        stop = threading.Event()

        def toggle():
            while not stop.is_set():
                pipeline.update_config(wide)
                pipeline.update_config(narrow)

        writer = threading.Thread(target=toggle)
        writer.start()
        try:
            for _ in range(50):
                config = pipeline.config
                self.assertIn(config, (narrow, wide))
        finally:
            stop.set()
            writer.join()
