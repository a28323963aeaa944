"""Fixed-step accumulator that turns variable frame deltas into constant ticks."""

__all__ = ["FixedTimestep"]


class FixedTimestep:
    """Call ``callback(step)`` once for every whole ``step`` of accumulated time."""

    def __init__(self, callback, step=1.0 / 60.0):
        if step <= 0:
            raise ValueError("step must be positive")
        self.callback = callback
        self.step = step
        self.time = 0.0
        self.last_update_time = 0.0
        self.time_buffer = 0.0

    def update(self, delta):
        """Advance by ``delta`` and run the due fixed steps; return how many ran."""
        self.time += delta
        self.time_buffer += self.time - self.last_update_time
        self.last_update_time = self.time
        ticks = 0
        while self.time_buffer >= self.step:
            self.callback(self.step)
            self.time_buffer -= self.step
            ticks += 1
        return ticks