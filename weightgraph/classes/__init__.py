"""
Core data classes for weighted graph representation.

This module contains the vertex and edge value types and the shared data
structures used throughout the weightgraph library.
"""

from .vertex import pyvertex
from .edge import pyedge
from .utils import DisjointSet

__all__ = [
    'pyvertex',
    'pyedge',
    'DisjointSet',
]
