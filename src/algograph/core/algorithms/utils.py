"""
Utility functions for graph algorithms.
"""

import gc
import logging
import os
import time
from typing import Optional

import psutil

from ..models import Edge

logger = logging.getLogger(__name__)

# Constants
MEMORY_CHECK_INTERVAL = 0.1  # Seconds between two RSS samples


def is_better_cost(new_cost: float, old_cost: Optional[float]) -> bool:
    """Return True when ``new_cost`` strictly improves on ``old_cost``.

    An unknown (None) old cost is always improved upon. Costs are compared
    exactly: any smaller value counts, however small the difference.
    """
    return old_cost is None or new_cost < old_cost


def relax(distance: Optional[float], edge: Edge) -> Optional[float]:
    """Tentative distance to ``edge.destination`` through ``edge``, None when unknown."""
    if distance is None:
        return None
    return distance + edge.weight


class MemoryManager:
    """Memory management utilities for graph algorithms."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = MEMORY_CHECK_INTERVAL

    def check_memory(self) -> None:
        """Check if memory usage exceeds limit."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        if not self.max_memory:
            return

        if current - self.start_memory > self.max_memory:
            logger.warning("Memory limit reached, collecting garbage")
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    @property
    def peak_memory(self) -> int:
        """Peak memory usage in bytes."""
        return self._peak_memory

    @property
    def peak_memory_mb(self) -> float:
        """Get peak memory usage in MB."""
        return self._peak_memory / 1024 / 1024

    def reset_peak_memory(self) -> None:
        """Reset peak memory tracking."""
        self._peak_memory = get_memory_usage()
        self.start_memory = self._peak_memory
        self._last_check = time.time()


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
