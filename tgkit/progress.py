"""Transfer progress reporting: percentage, ETA, speed and a text bar."""

from __future__ import annotations

import time
from typing import Callable

_BAR_LENGTH = 50


def format_duration(seconds: int) -> str:
    """Format whole seconds as hours, minutes and seconds, e.g. ``1h2m3s``."""
    seconds = int(seconds)
    if seconds == 0:
        return "0s"
    sign = "-" if seconds < 0 else ""
    seconds = abs(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{sign}{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{sign}{minutes}m{secs}s"
    return f"{sign}{secs}s"


class ProgressManager:
    """Tracks the progress of a transfer and renders it as text."""

    def __init__(
        self,
        total_bytes: int,
        edit_interval: int,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._clock = clock
        now = int(clock())
        self.start_time = now
        self.last_edit = now
        self.edit_interval = edit_interval
        self.total_size = total_bytes
        self.last_perc = 0.0

    def print_func(self) -> Callable[[int, int], None]:
        """Return a callback ``(total, current)`` that prints the current stats."""

        def report(total: int, current: int) -> None:
            self.total_size = total
            self.should_edit()
            print(self.stats(current))

        return report

    def should_edit(self) -> bool:
        """True once ``edit_interval`` seconds have passed since the last edit."""
        now = int(self._clock())
        if now - self.last_edit >= self.edit_interval:
            self.last_edit = now
            return True
        return False

    def get_progress(self, current_bytes: int) -> float:
        """Percentage done; never lower than a previously reported value."""
        if self.total_size == 0:
            return 0.0
        percent = current_bytes / self.total_size * 100
        if percent < self.last_perc:
            return self.last_perc
        self.last_perc = percent
        return percent

    def eta(self, current_bytes: int) -> str:
        """Estimated time left, based on the average rate so far."""
        if current_bytes <= 0:
            return format_duration(0)
        elapsed = int(self._clock()) - self.start_time
        remaining = (self.total_size - current_bytes) / current_bytes * elapsed
        return format_duration(int(remaining))

    def speed(self, current_bytes: int) -> str:
        """Average transfer rate in B/s, KB/s or MB/s."""
        elapsed = self._clock() - self.start_time
        if int(elapsed) == 0:
            return "0 B/s"
        rate = current_bytes / elapsed
        if rate < 1024:
            return f"{rate:.2f} B/s"
        if rate < 1024 * 1024:
            return f"{rate / 1024:.2f} KB/s"
        return f"{rate / 1024 / 1024:.2f} MB/s"

    def stats(self, current_bytes: int) -> str:
        """Progress, ETA and speed on one line, the bar on the next."""
        return (
            f"Progress: {self.get_progress(current_bytes):.2f}% | "
            f"ETA: {self.eta(current_bytes)} | Speed: {self.speed(current_bytes)}\n"
            f"{self.progress_bar(current_bytes)}"
        )

    def progress_bar(self, current_bytes: int) -> str:
        """A fixed-width text bar followed by the whole percentage."""
        filled = int(self.get_progress(current_bytes) / 100 * _BAR_LENGTH)
        bar = "".join("=" if i < filled else " " for i in range(_BAR_LENGTH))
        return f"\r[{bar}] {int(self.get_progress(current_bytes))}%"