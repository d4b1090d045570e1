# Copyright (c) 2024, RoboVerse community
# SPDX-License-Identifier: BSD-3-Clause

import threading
import unittest

from pointcloud_filter.application.utils import FrameMailbox


class TestFrameMailbox(unittest.TestCase):

    def test_keeps_only_latest(self):
        mailbox = FrameMailbox()

        self.assertFalse(mailbox.put('frame-1'))
        self.assertTrue(mailbox.put('frame-2'))
        self.assertTrue(mailbox.put('frame-3'))

        self.assertEqual(mailbox.take(timeout=0.1), 'frame-3')
        self.assertEqual(mailbox.dropped_count, 2)
        self.assertFalse(mailbox.has_pending())

    def test_take_times_out(self):
        self.assertIsNone(FrameMailbox().take(timeout=0.01))

    def test_close_wakes_consumer(self):
        mailbox = FrameMailbox()
        results = []

        consumer = threading.Thread(target=lambda: results.append(mailbox.take()))
        consumer.start()
        mailbox.close()
        consumer.join(timeout=2.0)

        self.assertFalse(consumer.is_alive())
        self.assertEqual(results, [None])
        self.assertTrue(mailbox.closed)

    def test_put_after_close_is_ignored(self):
        mailbox = FrameMailbox()
        mailbox.close()

        self.assertFalse(mailbox.put('frame'))
        self.assertIsNone(mailbox.take(timeout=0.01))

    def test_consumer_receives_frame_from_producer(self):
        mailbox = FrameMailbox()
        results = []

        consumer = threading.Thread(target=lambda: results.append(mailbox.take(timeout=2.0)))
        consumer.start()
        mailbox.put('frame')
        consumer.join(timeout=2.0)

        self.assertEqual(results, ['frame'])
