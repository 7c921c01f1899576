"""
Utility functions for path finding operations.
"""

import gc
import logging
import os
import time
from heapq import heappop, heappush
from typing import Dict, Generic, List, Mapping, Optional, Tuple, TypeVar

import psutil

from ..exceptions import ConfigurationError
from ..models import Coordinate, GraphNode
from .models import SearchRecord

# Configure logging
logger = logging.getLogger(__name__)

# Constants
EPSILON = 1e-10  # Floating point comparison tolerance

K = TypeVar("K")


def is_better_cost(new_cost: float, old_cost: float) -> bool:
    """Return True if new_cost is lower than old_cost by more than EPSILON."""
    return (new_cost - old_cost) < -EPSILON


class PriorityQueue(Generic[K]):
    """
    Min-priority queue with decrease-key.

    Items are tracked in an index so each one appears at most once; lowering
    an item's priority invalidates its old heap entry instead of adding a
    duplicate. Equal priorities pop in insertion order.
    """

    def __init__(self):
        self._queue: List[Tuple[float, int, K]] = []
        self._entry_finder: Dict[K, Tuple[float, int]] = {}
        self._counter = 0  # Unique counter to break ties

    def add_or_update(self, item: K, priority: float) -> bool:
        """
        Insert an item or lower its priority.

        Returns:
            True if the item was inserted or updated, False if the existing
            priority was already at least as good
        """
        if item in self._entry_finder:
            old_priority, _ = self._entry_finder[item]
            if not is_better_cost(priority, old_priority):
                return False

        entry = (priority, self._counter, item)
        self._entry_finder[item] = (priority, self._counter)
        heappush(self._queue, entry)
        self._counter += 1
        return True

    def pop(self) -> Optional[Tuple[float, K]]:
        """Remove and return the item with the lowest priority."""
        while self._queue:
            priority, count, item = heappop(self._queue)
            stored = self._entry_finder.get(item)
            if stored == (priority, count):
                del self._entry_finder[item]
                return (priority, item)
        return None

    def empty(self) -> bool:
        """Return True if the queue is empty."""
        return len(self._entry_finder) == 0

    def __len__(self) -> int:
        """Return the number of valid items in the queue."""
        return len(self._entry_finder)


def reconstruct_path(goal: GraphNode, parents: Mapping[GraphNode, Optional[GraphNode]]) -> List[Coordinate]:
    """Follow predecessor links from goal back to the start and return coordinates in travel order."""
    path = []
    current: Optional[GraphNode] = goal
    while current is not None:
        path.append(current.coordinate)
        current = parents.get(current)
    path.reverse()
    return path


def parents_of(records: Mapping[GraphNode, SearchRecord]) -> Dict[GraphNode, Optional[GraphNode]]:
    """Predecessor map view of a search record table."""
    return {node: record.parent for node, record in records.items()}


class MemoryManager:
    """Tracks process memory during a search and enforces an optional limit."""

    def __init__(self, max_memory_mb: Optional[float] = None):
        """Initialize memory manager."""
        if max_memory_mb is not None and max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")
        self.max_memory = max_memory_mb * 1024 * 1024 if max_memory_mb else None
        self.start_memory = get_memory_usage()
        self._peak_memory = self.start_memory
        self._last_check = time.time()
        self._check_interval = 0.1  # Check memory every 100ms

    def check_memory(self) -> None:
        """Sample memory usage and raise if it exceeds the limit."""
        current_time = time.time()
        if current_time - self._last_check < self._check_interval:
            return

        self._last_check = current_time
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)

        if self.max_memory and current - self.start_memory > self.max_memory:
            gc.collect()
            current = get_memory_usage()

            if current - self.start_memory > self.max_memory:
                raise MemoryError(
                    f"Memory usage {current/1024/1024:.1f}MB exceeds "
                    f"limit of {self.max_memory/1024/1024:.1f}MB"
                )

    def sample(self) -> int:
        """Read current memory usage, updating the peak."""
        current = get_memory_usage()
        self._peak_memory = max(self._peak_memory, current)
        return current

    @property
    def peak_memory(self) -> int:
        """Peak memory usage in bytes."""
        return self._peak_memory


def get_memory_usage() -> int:
    """Get current memory usage in bytes."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss
