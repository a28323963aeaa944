"""Frame-rate limiter that sleeps to keep a steady frame schedule."""

import time

__all__ = ["FPSLimit"]


class FPSLimit:
    """Keeps frames at ``limit`` per second when ``wait`` is called once per frame.

    Frames are scheduled against a fixed base time; when a frame runs late the
    schedule restarts from the current time.
    """

    def __init__(self, limit=60, clock=time.monotonic, sleep=time.sleep):
        self._clock = clock
        self._sleep = sleep
        self.enabled = True
        self._limit = 0
        self._frame_count = 0
        self._base = clock()
        self.set_fps_limit(limit)

    def set_fps_limit(self, limit):
        if limit <= 0:
            raise ValueError("FPS limit must be positive")
        self._limit = int(limit)
        self._frame_count = 0
        self._base = self._clock()

    def fps_limit(self):
        return self._limit

    def set_enabled(self, value):
        self.enabled = bool(value)

    def wait(self):
        """Sleep until the next frame is due; return the seconds slept."""
        if not self.enabled:
            return 0.0
        self._frame_count += 1
        now = self._clock()
        target = self._base + self._frame_count / self._limit
        if now <= target:
            delay = target - now
            self._sleep(delay)
            return delay
        self._frame_count = 0
        self._base = self._clock()
        return 0.0