# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import logging
from dataclasses import dataclass
from threading import Lock
from typing import NamedTuple

from ...domain.entities import FilterConfig, PointCloud
from ...domain.filters import RegionCropFilter, VoxelDownsampler, StatisticalOutlierFilter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageCounts:
    """Point counts before and after each stage of one frame"""
    count_in: int
    count_after_crop: int
    count_after_downsample: int
    count_after_outlier: int


@dataclass(frozen=True)
class PipelineResult:
    """Both outputs of one frame"""
    downsampled: PointCloud
    filtered: PointCloud
    counts: StageCounts


class _Stages(NamedTuple):
    config: FilterConfig
    crop: RegionCropFilter
    voxel: VoxelDownsampler
    outlier: StatisticalOutlierFilter


def _build_stages(config: FilterConfig) -> _Stages:
    return _Stages(
        config=config,
        crop=RegionCropFilter(config.bounds),
        voxel=VoxelDownsampler(config.leaf_size),
        outlier=StatisticalOutlierFilter(config.mean_k, config.stddev_multiplier, config.workers),
    )


class FilterPipeline:
    """Crop -> voxel downsample -> outlier removal, one frame at a time"""

    def __init__(self, config: FilterConfig):
        self._lock = Lock()
        self._stages = _build_stages(config)

    @property
    def config(self) -> FilterConfig:
        with self._lock:
            return self._stages.config

    def update_config(self, config: FilterConfig) -> None:
        """Swap in a new configuration; frames already running keep the old one"""
        stages = _build_stages(config)
        with self._lock:
            self._stages = stages
        logger.info(f"Filter configuration updated: {config}")

    def process(self, cloud: PointCloud) -> PipelineResult:
        """Run all stages on one frame"""
        with self._lock:
            stages = self._stages

        cropped = stages.crop.filter(cloud)
        downsampled = stages.voxel.filter(cropped)
        logger.debug(f"Cloud before filtering: {len(downsampled)} points")

        filtered = stages.outlier.filter(downsampled)
        logger.debug(f"Cloud after filtering: {len(filtered)} points")

        counts = StageCounts(
            count_in=len(cloud),
            count_after_crop=len(cropped),
            count_after_downsample=len(downsampled),
            count_after_outlier=len(filtered),
        )
        logger.info(
            f"Stage counts: in={counts.count_in} crop={counts.count_after_crop} "
            f"voxel={counts.count_after_downsample} outlier={counts.count_after_outlier}"
        )
        return PipelineResult(downsampled=downsampled, filtered=filtered, counts=counts)
