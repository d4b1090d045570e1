"""
Application layer - application services
"""
from .services import FilterPipeline, PipelineResult, StageCounts, CloudFilterService
from .utils import FrameMailbox

__all__ = ['FilterPipeline', 'PipelineResult', 'StageCounts', 'CloudFilterService', 'FrameMailbox']
