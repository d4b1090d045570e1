"""
Domain layer - point cloud entities and filters
"""
from .entities import *
from .interfaces import *
from .filters import *

__all__ = ['entities', 'interfaces', 'filters']
