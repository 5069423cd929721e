"""
Main facade class for weighted graph analysis.

This module provides the pyweightgraph class that bundles the graph
container with the shortest-path, spanning-tree and diameter components.
"""

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Set, Tuple

import numpy as np

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from .graph import WeightedGraph
from ..analysis.pathfinding import PathFinder
from ..analysis.spanning import SpanningTreeBuilder
from ..analysis.metrics import GraphMetrics

logger = logging.getLogger(__name__)


class pyweightgraph:
    """
    Main facade class for undirected weighted graphs.

    Holds a WeightedGraph and delegates analyses to specialized modules, so
    callers work with a single object.
    """

    def __init__(self,
                 aVertex: Optional[Iterable[pyvertex]] = None,
                 aEdge: Optional[Iterable[pyedge]] = None,
                 iFlag_allow_negative: int = 0):
        """
        Initialize the graph, optionally populating it.

        Args:
            aVertex: Vertices to add, in order
            aEdge: Edges to add after the vertices, in order
            iFlag_allow_negative: 1 to accept negative edge lengths
        """
        # Initialize core graph
        self._graph = WeightedGraph(aVertex, aEdge, iFlag_allow_negative=iFlag_allow_negative)

        # Initialize analysis components
        self._pathfinder = PathFinder(self._graph)
        self._spanning = SpanningTreeBuilder(self._graph)
        self._metrics = GraphMetrics(self._graph, self._pathfinder)

    def __len__(self) -> int:
        return len(self._graph)

    def __contains__(self, pVertex) -> bool:
        return pVertex in self._graph

    def __repr__(self) -> str:
        return (f"pyweightgraph(vertices={self._graph.get_vertex_count()}, "
                f"edges={self._graph.get_edge_count()})")

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def add_vertex(self, pVertex: Optional[pyvertex]) -> bool:
        """Add a vertex unless one with the same identity key is present."""
        return self._graph.add_vertex(pVertex)

    def has_vertex(self, pVertex) -> bool:
        """Check whether the vertex is part of the graph."""
        return self._graph.has_vertex(pVertex)

    def remove_vertex(self, pVertex) -> bool:
        """Remove a vertex and every edge incident on it."""
        return self._graph.remove_vertex(pVertex)

    def all_vertices(self) -> Set[pyvertex]:
        """Get a copy of the vertex set."""
        return self._graph.all_vertices()

    def get_vertex_count(self) -> int:
        """Get the number of vertices."""
        return self._graph.get_vertex_count()

    def add_edge(self, pEdge: Optional[pyedge]) -> bool:
        """Add an edge whose endpoints are both already in the graph."""
        return self._graph.add_edge(pEdge)

    def has_edge(self, pEdge) -> bool:
        """Check whether a structurally equal edge is in the graph."""
        return self._graph.has_edge(pEdge)

    def has_edge_between(self, pVertex_a, pVertex_b) -> bool:
        """Check whether two vertices are adjacent."""
        return self._graph.has_edge_between(pVertex_a, pVertex_b)

    def get_edge(self, pVertex_a, pVertex_b) -> Optional[pyedge]:
        """Get the edge joining two vertices, or None."""
        return self._graph.get_edge(pVertex_a, pVertex_b)

    def edge_length(self, pVertex_a, pVertex_b) -> int:
        """Get the length of the edge joining two vertices, 0 if absent."""
        return self._graph.edge_length(pVertex_a, pVertex_b)

    def edge_length_sum(self) -> int:
        """Get the sum of all edge lengths."""
        return self._graph.edge_length_sum()

    def remove_edge(self, pEdge) -> bool:
        """Remove an edge from the graph."""
        return self._graph.remove_edge(pEdge)

    def all_edges(self, pVertex=None) -> Set[pyedge]:
        """Get a copy of the edge set, optionally only edges incident on a vertex."""
        return self._graph.all_edges(pVertex)

    def get_edge_count(self) -> int:
        """Get the number of edges."""
        return self._graph.get_edge_count()

    def get_neighbours(self, pVertex) -> Mapping[pyvertex, pyedge]:
        """Get a read-only map of neighbour -> connecting edge."""
        return self._graph.get_neighbours(pVertex)

    # ========================================================================
    # PATH FINDING
    # ========================================================================

    def shortest_path(self, pVertex_source, pVertex_sink) -> List[pyvertex]:
        """Find the least-cost path between two vertices."""
        return self._pathfinder.shortest_path(pVertex_source, pVertex_sink)

    def shortest_path_length(self, pVertex_source, pVertex_sink) -> int:
        """Get the total length of the shortest path between two vertices."""
        return self._pathfinder.shortest_path_length(pVertex_source, pVertex_sink)

    def shortest_distances(self, pVertex_source) -> dict:
        """Get least-cost distances from a vertex to every vertex."""
        return self._pathfinder.shortest_distances(pVertex_source)

    def shortest_path_lengths(self, pVertex_source) -> dict:
        """Get shortest-path lengths from a vertex to every vertex it reaches."""
        return self._pathfinder.shortest_path_lengths(pVertex_source)

    def path_length(self, aPath: Sequence[pyvertex]) -> int:
        """Sum the edge lengths along a vertex path."""
        return self._pathfinder.path_length(aPath)

    # ========================================================================
    # SPANNING TREE
    # ========================================================================

    def minimum_spanning_tree(self) -> List[pyedge]:
        """Compute a minimum spanning tree (forest if disconnected)."""
        return self._spanning.minimum_spanning_tree()

    def minimum_spanning_tree_weight(self) -> int:
        """Get the total length of the minimum spanning tree."""
        return self._spanning.minimum_spanning_tree_weight()

    # ========================================================================
    # DISTANCE METRICS
    # ========================================================================

    def distance_matrix(self) -> Tuple[List[pyvertex], np.ndarray]:
        """Compute all-pairs shortest distances."""
        return self._metrics.distance_matrix()

    def diameter(self) -> int:
        """Get the longest shortest-path length, ignoring unreachable pairs."""
        return self._metrics.diameter()

    def eccentricity(self, pVertex) -> int:
        """Get the greatest shortest-path distance from a vertex."""
        return self._metrics.eccentricity(pVertex)
