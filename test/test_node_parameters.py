# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import os
import unittest

from pointcloud_filter.domain.entities import FilterConfig, InvalidConfigError
from pointcloud_filter.presentation.parameters import (
    CONFIG_PARAMETERS, STARTUP_PARAMETERS, config_changes
)

CONFIG_FILE = os.path.join(
    os.path.dirname(__file__), '..', 'config', 'pointcloud_filter.yaml')


def yaml_parameter_names(path):
    names = set()
    with open(path) as f:
        for line in f:
            key, sep, _ = line.strip().partition(':')
            if sep and key not in ('pointcloud_filter', 'ros__parameters'):
                names.add(key)
    return names


class TestNodeParameters(unittest.TestCase):

    def test_filter_parameters_map_to_config_fields(self):
        changes = config_changes({'voxel_leaf_size': 0.2, 'outlier_mean_k': 4})

        self.assertEqual(changes, {'leaf_size': 0.2, 'mean_k': 4})
        self.assertEqual(FilterConfig().replace(**changes).leaf_size, 0.2)

    def test_startup_parameters_are_refused(self):
        for name in STARTUP_PARAMETERS:
            with self.subTest(name=name):
                with self.assertRaises(InvalidConfigError) as ctx:
                    config_changes({name: STARTUP_PARAMETERS[name]})
                self.assertIn(name, str(ctx.exception))

    def test_mixed_update_is_refused_as_a_whole(self):
        with self.assertRaises(InvalidConfigError):
            config_changes({'voxel_leaf_size': 0.2, 'input_topic': '/other/points'})

    def test_unrelated_parameters_are_ignored(self):
        self.assertEqual(config_changes({'use_sim_time': True}), {})

    def test_config_file_declares_only_known_parameters(self):
        names = yaml_parameter_names(CONFIG_FILE)

        self.assertNotIn('frame_id', names)
        self.assertEqual(names, set(STARTUP_PARAMETERS) | set(CONFIG_PARAMETERS))
