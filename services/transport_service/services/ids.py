"""Record id generation."""

import time
from typing import Callable


class TimestampIdGenerator:
    """
    Hands out ids from the wall clock in milliseconds.

    When the clock has not moved past the previous id, the previous id plus
    one is used, so ids are strictly increasing. Not thread-safe on its own;
    callers hold their store lock while calling it.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def __call__(self) -> int:
        candidate = int(self._clock() * 1000)
        self._last = max(candidate, self._last + 1)
        return self._last
