import time
import logging

logger = logging.getLogger(__name__)

class DebounceFilter:
    """Minimum-dwell debounce for a discrete signal.

    A new value is accepted only when it differs from the current stable
    value and more than ``dwell`` seconds have passed since the last
    accepted change. Otherwise the previous stable value is kept.
    """

    def __init__(self, dwell=0.5, initial=0, started_at=0.0):
        """Initialize the filter.

        Args:
            dwell: Minimum time between accepted changes, in seconds
            initial: Stable value before any input
            started_at: Timestamp of the (virtual) initial change
        """
        if dwell <= 0:
            raise ValueError("Dwell time must be positive")

        self.dwell = float(dwell)
        self.last_value = initial
        self.last_change_time = float(started_at)

    def filter(self, value, now=None):
        """Feed a raw value and return the stable one."""
        if now is None:
            now = time.monotonic()

        if value != self.last_value and (now - self.last_change_time) > self.dwell:
            logger.debug(f"Debounce commit: {self.last_value} -> {value} at {now:.3f}")
            self.last_value = value
            self.last_change_time = now

        return self.last_value

    def reset(self, initial=0, started_at=0.0):
        self.last_value = initial
        self.last_change_time = float(started_at)
