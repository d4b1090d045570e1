# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import logging
from threading import Condition
from typing import Generic, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class FrameMailbox(Generic[T]):
    """
    Thread-safe single slot that keeps only the newest undelivered frame.

    The transport callback puts frames, one worker takes them. A frame that
    is still waiting when a newer one arrives is dropped.
    """

    def __init__(self):
        self._condition = Condition()
        self._item: Optional[T] = None
        self._has_item = False
        self._closed = False
        self.dropped_count = 0

    def put(self, item: T) -> bool:
        """Store item, returns True if an undelivered frame was replaced"""
        with self._condition:
            if self._closed:
                return False
            replaced = self._has_item
            if replaced:
                self.dropped_count += 1
                logger.debug(f"Dropping stale frame ({self.dropped_count} dropped so far)")
            self._item = item
            self._has_item = True
            self._condition.notify()
            return replaced

    def take(self, timeout: Optional[float] = None) -> Optional[T]:
        """Wait for the next frame, None on timeout or after close()"""
        with self._condition:
            self._condition.wait_for(lambda: self._has_item or self._closed, timeout)
            if not self._has_item:
                return None
            item = self._item
            self._item = None
            self._has_item = False
            return item

    def close(self) -> None:
        """Discard any pending frame and wake up waiting consumers"""
        with self._condition:
            self._closed = True
            self._item = None
            self._has_item = False
            self._condition.notify_all()

    @property
    def closed(self) -> bool:
        with self._condition:
            return self._closed

    def has_pending(self) -> bool:
        with self._condition:
            return self._has_item
