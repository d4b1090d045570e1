"""
Domain filters - crop, voxel grid and statistical outlier stages
"""
from .region_crop import RegionCropFilter, crop_to_region, crop_mask
from .voxel_grid import VoxelDownsampler, voxel_downsample, voxel_keys, normalize_leaf_size
from .statistical_outlier import (
    StatisticalOutlierFilter, remove_statistical_outliers, mean_neighbor_distances
)

__all__ = [
    'RegionCropFilter', 'crop_to_region', 'crop_mask',
    'VoxelDownsampler', 'voxel_downsample', 'voxel_keys', 'normalize_leaf_size',
    'StatisticalOutlierFilter', 'remove_statistical_outliers', 'mean_neighbor_distances'
]
