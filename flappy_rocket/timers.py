"""Fixed-interval timers driven by elapsed milliseconds rather than frames."""


class IntervalTimer:
    """Counts elapsed time and reports how many times its interval has passed.

    The timer is advanced with wall-clock (or simulated) milliseconds, so its
    cadence does not depend on the frame rate of whoever drives it.
    """

    def __init__(self, interval_ms):
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        self.interval_ms = interval_ms
        self.elapsed_ms = 0.0

    def advance(self, delta_ms):
        """Adds ``delta_ms`` and returns the number of intervals that completed."""
        if delta_ms < 0:
            raise ValueError(f"delta_ms must not be negative, got {delta_ms}")

        self.elapsed_ms += delta_ms
        fired = int(self.elapsed_ms // self.interval_ms)
        self.elapsed_ms -= fired * self.interval_ms
        return fired

    def reset(self):
        self.elapsed_ms = 0.0

    def __repr__(self):
        return f"IntervalTimer(interval_ms={self.interval_ms}, elapsed_ms={self.elapsed_ms:.1f})"
