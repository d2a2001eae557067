# tests/test_timing.py
import threading

from scribbles.timing import make_recording_sleep, paced

def test_pause_only_between_items():
    sleep, calls = make_recording_sleep()
    assert list(paced("abc", 0.2, sleep=sleep)) == ["a", "b", "c"]
    assert calls == [0.2, 0.2]

def test_single_item_and_zero_pause_never_sleep():
    sleep, calls = make_recording_sleep()
    assert list(paced([1], 0.2, sleep=sleep)) == [1]
    assert list(paced([1, 2, 3], 0, sleep=sleep)) == [1, 2, 3]
    assert calls == []

def test_cancel_before_start_yields_nothing():
    cancel = threading.Event()
    cancel.set()
    sleep, calls = make_recording_sleep()
    assert list(paced([1, 2], 0.2, sleep=sleep, cancel=cancel)) == []
    assert calls == []

def test_cancel_during_pause_stops_before_next_item():
    cancel = threading.Event()
    def sleep(seconds):
        cancel.set()  # user hits cancel while we wait
    assert list(paced([1, 2, 3], 0.2, sleep=sleep, cancel=cancel)) == [1]
