"""
Graph analysis modules.

This module contains classes for shortest-path search, spanning-tree
construction and distance metrics such as the diameter.
"""

from .pathfinding import PathFinder, INFINITY
from .spanning import SpanningTreeBuilder
from .metrics import GraphMetrics

__all__ = [
    'PathFinder',
    'INFINITY',
    'SpanningTreeBuilder',
    'GraphMetrics',
]
