# src/scribbles/timing.py
"""
Pacing helpers for sequential batch work: a fixed pause between items and a
cooperative cancel flag checked only at item boundaries.
"""

import threading
import time
from typing import Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")

def paced(
    items: Iterable[T],
    pause_s: float,
    *,
    sleep: Callable[[float], None] = time.sleep,
    cancel: Optional[threading.Event] = None,
) -> Iterator[T]:
    """
    Yield items one by one, sleeping pause_s between consecutive items (not
    before the first, not after the last). Stops before the next item once
    cancel is set; the consumer's work on the current item is never cut short.
    """
    for i, item in enumerate(items):
        if cancel is not None and cancel.is_set():
            return
        if i and pause_s > 0:
            sleep(pause_s)
            if cancel is not None and cancel.is_set():
                return
        yield item

def make_recording_sleep() -> Tuple[Callable[[float], None], List[float]]:
    """
    Deterministic sleep for tests: records each requested delay instead of
    blocking.
    """
    calls: List[float] = []
    def sleep(seconds: float) -> None:
        calls.append(seconds)
    return sleep, calls
