"""
Core graph data structure for undirected weighted graphs.

This module provides the fundamental graph container without the derived
analyses (shortest path, spanning tree, diameter).
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Set
from collections import defaultdict

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge

logger = logging.getLogger(__name__)


class WeightedGraph:
    """
    Core container for a simple undirected weighted graph.

    This class owns the vertex and edge sets and keeps them consistent:
    - Vertices are unique by identity key
    - Edges are unique by structural equality
    - Every edge's endpoints are present in the vertex set
    - Removing a vertex removes every edge incident on it

    Expected failures (duplicates, unknown vertices, missing edges) are
    reported through return values, never by raising.
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
            iFlag_allow_negative: 1 to accept negative edge lengths (shortest
                path and diameter are then undefined), 0 to reject them
        """
        self.iFlag_allow_negative = iFlag_allow_negative

        # Dicts keyed by element serve as insertion-ordered sets
        self.vertex_set: Dict[pyvertex, None] = {}
        self.edge_set: Dict[pyedge, None] = {}

        # Incidence index: vertex -> ordered set of incident edges
        self.adjacency_list: defaultdict = defaultdict(dict)

        for pVertex in aVertex or ():
            self.add_vertex(pVertex)
        for pEdge in aEdge or ():
            self.add_edge(pEdge)

        logger.debug(f"Built graph with {len(self.vertex_set)} vertices and {len(self.edge_set)} edges")

    def __len__(self) -> int:
        return len(self.vertex_set)

    def __contains__(self, pVertex) -> bool:
        return self.has_vertex(pVertex)

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, pVertex: Optional[pyvertex]) -> bool:
        """
        Add a vertex unless one with the same identity key is present.

        Args:
            pVertex: Vertex to add

        Returns:
            True if the vertex was added, False for None or a duplicate identity
        """
        if pVertex is None:
            return False
        for pVertex_existing in self.vertex_set:
            if pVertex.check_id(pVertex_existing):
                logger.debug(f"Rejected vertex {pVertex!r}: identity already present")
                return False
        self.vertex_set[pVertex] = None
        return True

    def has_vertex(self, pVertex) -> bool:
        """Check whether the vertex is part of the graph."""
        if pVertex is None:
            return False
        return pVertex in self.vertex_set

    def remove_vertex(self, pVertex) -> bool:
        """
        Remove a vertex and every edge incident on it.

        Args:
            pVertex: Vertex to remove

        Returns:
            True if the vertex was present and removed, False otherwise
        """
        if not self.has_vertex(pVertex):
            return False

        aEdge_incident = list(self.adjacency_list.get(pVertex, {}))
        for pEdge in aEdge_incident:
            self._discard_edge(pEdge)

        del self.vertex_set[pVertex]
        self.adjacency_list.pop(pVertex, None)
        logger.debug(f"Removed vertex {pVertex!r} and {len(aEdge_incident)} incident edges")
        return True

    def all_vertices(self) -> Set[pyvertex]:
        """
        Get all vertices of the graph.

        Returns:
            A new set; changing it does not affect the graph
        """
        return set(self.vertex_set)

    def get_vertex_count(self) -> int:
        """Get the number of vertices in the graph."""
        return len(self.vertex_set)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, pEdge: Optional[pyedge]) -> bool:
        """
        Add an edge whose endpoints are both already in the graph.

        Args:
            pEdge: Edge to add

        Returns:
            True if added; False for None, a structurally equal edge already
            present, a missing endpoint, or a rejected negative length
        """
        if pEdge is None:
            return False
        if pEdge in self.edge_set:
            logger.debug(f"Rejected edge {pEdge!r}: already present")
            return False
        if not (self.has_vertex(pEdge.pVertex_start) and self.has_vertex(pEdge.pVertex_end)):
            logger.debug(f"Rejected edge {pEdge!r}: endpoint not in graph")
            return False
        if pEdge.lLength < 0 and not self.iFlag_allow_negative:
            logger.warning(f"Rejected edge {pEdge!r}: negative length")
            return False

        self.edge_set[pEdge] = None
        self.adjacency_list[pEdge.pVertex_start][pEdge] = None
        self.adjacency_list[pEdge.pVertex_end][pEdge] = None
        return True

    def has_edge(self, pEdge) -> bool:
        """Check whether an edge structurally equal to the given one is in the graph."""
        if pEdge is None:
            return False
        return pEdge in self.edge_set

    def has_edge_between(self, pVertex_a, pVertex_b) -> bool:
        """Check whether the two vertices are joined by an edge, in either orientation."""
        return self.get_edge(pVertex_a, pVertex_b) is not None

    def get_edge(self, pVertex_a, pVertex_b) -> Optional[pyedge]:
        """
        Find the edge joining two vertices.

        Args:
            pVertex_a: One endpoint
            pVertex_b: The other endpoint

        Returns:
            The stored edge, or None if the vertices are not adjacent
        """
        if pVertex_a is None or pVertex_b is None:
            return None
        for pEdge in self.adjacency_list.get(pVertex_a, {}):
            if pEdge.connects(pVertex_a, pVertex_b):
                return pEdge
        return None

    def edge_length(self, pVertex_a, pVertex_b) -> int:
        """
        Get the length of the edge joining two vertices.

        A zero result is ambiguous (zero-length edge or no edge); use
        has_edge_between to tell them apart.

        Returns:
            The edge length, or 0 if there is no such edge
        """
        pEdge = self.get_edge(pVertex_a, pVertex_b)
        if pEdge is None:
            return 0
        return pEdge.lLength

    def edge_length_sum(self) -> int:
        """Get the sum of the lengths of all edges."""
        return sum(pEdge.lLength for pEdge in self.edge_set)

    def remove_edge(self, pEdge) -> bool:
        """
        Remove an edge from the graph.

        Returns:
            True if the edge was present and removed, False otherwise
        """
        if not self.has_edge(pEdge):
            return False
        self._discard_edge(pEdge)
        return True

    def all_edges(self, pVertex=None) -> Set[pyedge]:
        """
        Get edges of the graph.

        Args:
            pVertex: If given, only edges incident on this vertex are returned

        Returns:
            A new set; changing it does not affect the graph
        """
        if pVertex is None:
            return set(self.edge_set)
        return set(self.adjacency_list.get(pVertex, {}))

    def get_edge_count(self) -> int:
        """Get the number of edges in the graph."""
        return len(self.edge_set)

    def get_edges(self) -> List[pyedge]:
        """Get all edges as a list, in insertion order."""
        return list(self.edge_set)

    def get_vertices(self) -> List[pyvertex]:
        """Get all vertices as a list, in insertion order."""
        return list(self.vertex_set)

    # ------------------------------------------------------------------
    # Neighbours
    # ------------------------------------------------------------------

    def get_neighbours(self, pVertex) -> Mapping[pyvertex, pyedge]:
        """
        Map each neighbour of a vertex to the edge joining them.

        If two stored edges joined the vertex to the same neighbour, the one
        inserted later would win.

        Args:
            pVertex: Vertex whose neighbourhood is wanted

        Returns:
            Read-only mapping of neighbour -> edge, empty for an unknown vertex
        """
        aNeighbour: Dict[pyvertex, pyedge] = {}
        for pEdge in self.adjacency_list.get(pVertex, {}):
            aNeighbour[pEdge.other_vertex(pVertex)] = pEdge
        return MappingProxyType(aNeighbour)

    def _discard_edge(self, pEdge: pyedge) -> None:
        """Drop an edge from the edge set and the incidence index."""
        del self.edge_set[pEdge]
        for pVertex in (pEdge.pVertex_start, pEdge.pVertex_end):
            aIncident = self.adjacency_list.get(pVertex)
            if aIncident is not None:
                aIncident.pop(pEdge, None)
