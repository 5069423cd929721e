"""
weightgraph - Undirected Weighted Graph Library

A Python library providing a mutable, undirected weighted-graph container
with shortest-path, minimum spanning tree and diameter analyses.

Main Classes:
    pyweightgraph: Graph container with all analyses (facade)
    pyvertex: Vertex with an identity key and a display label
    pyedge: Undirected edge with an integer length

Example:
    >>> from weightgraph import pyweightgraph, pyvertex, pyedge
    >>> a, b = pyvertex(1, "A"), pyvertex(2, "B")
    >>> graph = pyweightgraph([a, b], [pyedge(a, b, 5)])
    >>> graph.shortest_path(a, b)
    [pyvertex(1, 'A'), pyvertex(2, 'B')]
"""

__version__ = "0.1.0"

from weightgraph.classes.vertex import pyvertex
from weightgraph.classes.edge import pyedge
from weightgraph.core.graph import WeightedGraph
from weightgraph.core.weightgraph import pyweightgraph

__all__ = [
    'pyweightgraph',
    'WeightedGraph',
    'pyvertex',
    'pyedge',
]
