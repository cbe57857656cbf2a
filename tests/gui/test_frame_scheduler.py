"""
Tests for the display frame scheduler
"""

from frogger.gui.frame_scheduler import DisplayFrameScheduler


def test_requested_callbacks_run_once():
    scheduler = DisplayFrameScheduler()
    timestamps = []
    scheduler.request_frame(timestamps.append)

    assert scheduler.run_pending() == 1
    assert scheduler.run_pending() == 0
    assert len(timestamps) == 1


def test_callbacks_requested_while_running_wait_for_next_frame():
    scheduler = DisplayFrameScheduler()
    frames = []

    def tick(timestamp):
        frames.append(timestamp)
        scheduler.request_frame(tick)

    scheduler.request_frame(tick)
    scheduler.run_pending()

    assert len(frames) == 1
    assert scheduler.pending_count() == 1

    scheduler.run_pending()
    assert len(frames) == 2


def test_callbacks_share_frame_timestamp():
    scheduler = DisplayFrameScheduler()
    timestamps = []
    scheduler.request_frame(timestamps.append)
    scheduler.request_frame(timestamps.append)

    scheduler.run_pending()

    assert len(timestamps) == 2
    assert timestamps[0] == timestamps[1]
    assert isinstance(timestamps[0], float)
