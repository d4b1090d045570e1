"""
Application utilities
"""
from .frame_mailbox import FrameMailbox

__all__ = ['FrameMailbox']
