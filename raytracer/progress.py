"""A console progress bar with elapsed time."""

from __future__ import annotations

import sys
import threading
import time

BAR_WIDTH = 80


class ProgressBar:
    """Tracks the highest completed iteration and renders a one-line bar."""

    def __init__(self, total_iterations):
        self.total_iterations = total_iterations
        self.current_iteration = 0
        self.start_time = time.monotonic()
        self._lock = threading.Lock()

    def update(self, current_iteration):
        """Record progress; the counter never moves backwards."""
        with self._lock:
            if current_iteration > self.current_iteration:
                self.current_iteration = current_iteration

    def format(self):
        """Return the bar as a carriage-return-prefixed line."""
        if self.total_iterations <= 0:
            raise ValueError("progress bar needs a positive number of iterations")
        current = self.current_iteration
        filled = current * BAR_WIDTH // self.total_iterations
        elapsed = max(0.0, time.monotonic() - self.start_time)
        minutes = int(elapsed // 60)
        seconds = int(elapsed - minutes * 60)
        bar = "=" * filled + ">" + " " * (BAR_WIDTH - 1 - filled)
        return (
            f"\r[{bar}] {current}/{self.total_iterations}"
            f" | {minutes:02d}:{seconds:02d}"
        )

    def display(self, stream=None):
        """Write the bar to ``stream`` (standard output by default) and flush."""
        out = sys.stdout if stream is None else stream
        out.write(self.format())
        out.flush()