"""A simple stopwatch."""

from __future__ import annotations

from time import perf_counter_ns

from rappy.duration import Duration


class Timer:
    """Measures the time since it was started or reset."""

    def __init__(self, start: bool = False) -> None:
        self._start_ns = 0
        self._stop_ns = 0
        self._running = False
        if start:
            self.start()

    def start(self) -> None:
        """Start running and reset the starting point."""
        self._running = True
        self.reset()

    def reset(self) -> None:
        """Move the starting point to now."""
        self._start_ns = perf_counter_ns()

    def stop(self) -> None:
        """Stop running and freeze the elapsed time."""
        self._running = False
        self._stop_ns = perf_counter_ns()

    def elapsed(self) -> Duration:
        """Time between the start and now, or the stop if stopped."""
        end = perf_counter_ns() if self._running else self._stop_ns
        return Duration.from_nanoseconds(end - self._start_ns)

    def running(self) -> bool:
        """Whether the timer is running."""
        return self._running