"""
Application services
"""
from .filter_pipeline import FilterPipeline, PipelineResult, StageCounts
from .cloud_filter_service import CloudFilterService

__all__ = ['FilterPipeline', 'PipelineResult', 'StageCounts', 'CloudFilterService']
