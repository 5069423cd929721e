"""
Utility data structures for weightgraph.

This module provides shared helpers used across the weightgraph package,
currently the disjoint-set structure that backs spanning-tree construction.
"""

from typing import Any, Dict, Hashable, Iterable


class DisjointSet:
    """
    Disjoint-set union over hashable items.

    Uses union by size and path compression, so any sequence of ``find`` and
    ``union`` calls runs in near-linear time.
    """

    def __init__(self, aItem: Iterable[Hashable] = ()):
        """
        Initialize with one singleton partition per item.

        Args:
            aItem: Items to register up front
        """
        self._parent: Dict[Any, Any] = {}
        self._size: Dict[Any, int] = {}
        for item in aItem:
            self.add(item)

    def add(self, item: Hashable) -> None:
        """Register an item as its own partition if not already known."""
        if item not in self._parent:
            self._parent[item] = item
            self._size[item] = 1

    def find(self, item: Hashable) -> Any:
        """
        Get the representative of the partition containing an item.

        Args:
            item: A registered item

        Returns:
            The partition representative

        Raises:
            KeyError: If the item was never registered
        """
        root = item
        while self._parent[root] != root:
            root = self._parent[root]

        # Path compression
        while item != root:
            next_item = self._parent[item]
            self._parent[item] = root
            item = next_item

        return root

    def union(self, item_a: Hashable, item_b: Hashable) -> bool:
        """
        Merge the partitions containing two items.

        Returns:
            True if the items were in different partitions, False if already joined
        """
        root_a = self.find(item_a)
        root_b = self.find(item_b)
        if root_a == root_b:
            return False

        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        del self._size[root_b]
        return True

    def connected(self, item_a: Hashable, item_b: Hashable) -> bool:
        """Check whether two items share a partition."""
        return self.find(item_a) == self.find(item_b)

    def count(self) -> int:
        """Number of distinct partitions."""
        return len(self._size)
