# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause


import os
from glob import glob
from setuptools import setup
from setuptools import find_packages

package_name = 'pointcloud_filter'

setup(
    name=package_name,
    version='1.0.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        (os.path.join('share', package_name, 'launch'), glob(os.path.join('launch', '*launch.[pxy][yma]*'))),
        (os.path.join('share', package_name, 'config'), glob(os.path.join('config', '*'))),
    ],
    install_requires=['setuptools', 'numpy', 'scipy'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=True,
    maintainer='brimo',
    maintainer_email='abizov94@gmail.com',
    description='Crop, voxel grid and statistical outlier filtering of LiDAR point clouds',
    license='BSD-3-Clause',
    entry_points={
        'console_scripts': [
            'pointcloud_filter_node = pointcloud_filter.presentation.pointcloud_filter_node:main',
        ],
    },
)
