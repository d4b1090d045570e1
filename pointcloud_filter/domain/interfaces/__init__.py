"""
Domain interfaces - abstractions over the transport layer
"""
from .cloud_publisher import ICloudPublisher
from .cloud_decoder import ICloudDecoder

__all__ = ['ICloudPublisher', 'ICloudDecoder']
