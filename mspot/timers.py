"""Elapsed-time measurement and tick-driven timeouts."""

import time


class SteadyTimer:
    """Measures seconds elapsed since the last start, on a monotonic clock."""

    def __init__(self) -> None:
        self._start = time.monotonic()

    def start(self) -> None:
        """Restart the measurement."""
        self._start = time.monotonic()

    def time(self) -> float:
        """Seconds since the last start."""
        return time.monotonic() - self._start


class StopWatch:
    """Millisecond stopwatch on a monotonic clock."""

    def __init__(self) -> None:
        self._start_ms = 0

    def time(self) -> int:
        """Wall-clock time in milliseconds since the epoch."""
        return time.time_ns() // 1_000_000

    def start(self) -> int:
        """Start timing; returns the monotonic start time in milliseconds."""
        self._start_ms = time.monotonic_ns() // 1_000_000
        return self._start_ms

    def elapsed(self) -> int:
        """Milliseconds since the last start."""
        return time.monotonic_ns() // 1_000_000 - self._start_ms


class Timer:
    """A timeout counted in clock ticks, ``ticks_per_sec`` ticks per second."""

    def __init__(self, ticks_per_sec: int, secs: int = 0, msecs: int = 0) -> None:
        if ticks_per_sec <= 0:
            raise ValueError("ticks_per_sec must be positive")
        self._ticks_per_sec = ticks_per_sec
        self._timeout = 0
        self._timer = 0
        if secs > 0 or msecs > 0:
            self._timeout = self._ticks_for(secs, msecs)

    def _ticks_for(self, secs: int, msecs: int) -> int:
        return ((secs * 1000 + msecs) * self._ticks_per_sec) // 1000 + 1

    def set_timeout(self, secs: int, msecs: int = 0) -> None:
        """Set the timeout; a zero timeout also stops the timer."""
        if secs > 0 or msecs > 0:
            self._timeout = self._ticks_for(secs, msecs)
        else:
            self._timeout = 0
            self._timer = 0

    @property
    def timeout(self) -> int:
        """The timeout in whole seconds."""
        if self._timeout == 0:
            return 0
        return (self._timeout - 1) // self._ticks_per_sec

    @property
    def timer(self) -> int:
        """Whole seconds counted since the timer started."""
        if self._timer == 0:
            return 0
        return (self._timer - 1) // self._ticks_per_sec

    @property
    def remaining(self) -> int:
        """Whole seconds left before expiry; 0 if stopped or expired."""
        if self._timeout == 0 or self._timer == 0 or self._timer >= self._timeout:
            return 0
        return (self._timeout - self._timer) // self._ticks_per_sec

    @property
    def running(self) -> bool:
        """Whether the timer is counting."""
        return self._timer > 0

    def start(self, secs=None, msecs: int = 0) -> None:
        """Start counting, first setting a new timeout if ``secs`` is given."""
        if secs is not None:
            self.set_timeout(secs, msecs)
        if self._timeout > 0:
            self._timer = 1

    def stop(self) -> None:
        """Stop counting."""
        self._timer = 0

    @property
    def expired(self) -> bool:
        """Whether a running timer has reached its timeout."""
        if self._timeout == 0 or self._timer == 0:
            return False
        return self._timer >= self._timeout

    def clock(self, ticks: int = 1) -> None:
        """Advance a running timer by ``ticks``."""
        if self._timer > 0 and self._timeout > 0:
            self._timer += ticks