"""
Core graph data structures and management.

This module contains the fundamental graph container and the facade that
combines it with the analysis components.
"""

from .graph import WeightedGraph

__all__ = [
    'WeightedGraph',
]
