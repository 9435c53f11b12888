# src/fragbind/core/utils/timing.py

import time
from dataclasses import dataclass, field


@dataclass
class Timer:
    """Context manager for timing code blocks."""

    name: str
    start_time: float = field(default=0.0)
    end_time: float = field(default=0.0)

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        self.end_time = 0.0
        return self

    def __exit__(self, *args) -> None:
        self.end_time = time.perf_counter()

    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        if self.end_time == 0.0:
            return time.perf_counter() - self.start_time
        return self.end_time - self.start_time
