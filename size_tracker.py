#!/usr/bin/env python3
"""
Size Tracker Module for Megethos

Keeps the N largest distinct file sizes seen in a stream of (size, path)
observations, together with every path of each retained size.

Memory stays bounded by the number of retained groups, never by the number
of files observed. The smallest retained size (the floor) sits at the top of
a min-heap of keys, so admitting a new size at capacity costs O(log N).
"""

import heapq
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class SizeGroup:
    """All paths sharing one exact byte size, in discovery order"""

    size: int
    paths: list[str] = field(default_factory=list)


class TopSizeTracker:
    """Bounded top-N tracker keyed by distinct file size"""

    def __init__(self, capacity: int):
        """Initialize tracker

        Args:
            capacity: Maximum number of distinct sizes to retain (0 retains nothing)
        """
        if capacity < 0:
            raise ValueError(f"Capacity must not be negative: {capacity}")

        self._capacity = capacity
        self._groups: dict[int, list[str]] = {}
        # Every key of _groups exactly once; _heap[0] is the floor
        self._heap: list[int] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def distinct_count(self) -> int:
        return len(self._groups)

    @property
    def floor(self) -> Optional[int]:
        """Smallest retained size, or None while empty"""
        return self._heap[0] if self._heap else None

    @property
    def file_count(self) -> int:
        """Total number of retained paths across all groups"""
        return sum(len(paths) for paths in self._groups.values())

    def add_file(self, size: int, path: str):
        """Offer one file to the tracker

        The file is kept if its size is among the `capacity` largest distinct
        sizes seen so far. Admitting a new size at capacity evicts the whole
        group at the floor.
        """
        if self._capacity == 0:
            return

        group = self._groups.get(size)

        if len(self._groups) < self._capacity:
            if group is None:
                self._groups[size] = [path]
                heapq.heappush(self._heap, size)
            else:
                group.append(path)
            return

        if size < self._heap[0]:
            return

        if group is not None:
            group.append(path)
            return

        # size is new and strictly above the floor: swap it in for the floor
        self._groups[size] = [path]
        evicted = heapq.heapreplace(self._heap, size)
        del self._groups[evicted]

    def results(self) -> list[SizeGroup]:
        """Return retained groups in ascending size order

        The returned groups are copies, so the call can be repeated and
        callers may modify what they get back.
        """
        return [SizeGroup(size, list(self._groups[size])) for size in sorted(self._groups)]

    def __iter__(self) -> Iterator[SizeGroup]:
        return iter(self.results())

    def __len__(self) -> int:
        return len(self._groups)
