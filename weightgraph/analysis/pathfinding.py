"""
Shortest-path search for weighted graphs.

This module provides Dijkstra's algorithm over a WeightedGraph together with
helpers for measuring path lengths.
"""

import heapq
import itertools
import logging
import math
from typing import Dict, List, Sequence, Tuple

from ..classes.vertex import pyvertex
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)

# Tentative distance of vertices not yet reached
INFINITY = math.inf


class PathFinder:
    """
    Path finding algorithms for weighted graphs.

    This class provides methods for:
    - Finding the least-cost path between two vertices
    - Computing single-source distances to every vertex
    - Measuring the length of a vertex path

    Edge lengths are assumed non-negative.
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the path finder.

        Args:
            graph: WeightedGraph instance to search
        """
        self.graph = graph

    def shortest_path(self, pVertex_source, pVertex_sink) -> List[pyvertex]:
        """
        Find the least-cost path between two vertices using Dijkstra's algorithm.

        Args:
            pVertex_source: Start vertex
            pVertex_sink: End vertex

        Returns:
            Vertices from source to sink inclusive; the one-vertex path when
            source and sink are equal; an empty list if either vertex is
            missing or the sink is unreachable
        """
        if pVertex_source is None or pVertex_sink is None:
            return []

        if pVertex_source == pVertex_sink:
            return [pVertex_source]

        if not (self.graph.has_vertex(pVertex_source) and self.graph.has_vertex(pVertex_sink)):
            return []

        _, aPrevious = self._dijkstra(pVertex_source, pVertex_sink)

        if pVertex_sink not in aPrevious:
            logger.debug(f"No path from {pVertex_source!r} to {pVertex_sink!r}")
            return []

        return self._build_path(aPrevious, pVertex_source, pVertex_sink)

    def shortest_path_lengths(self, pVertex_source) -> Dict[pyvertex, int]:
        """
        Get the shortest-path length from a vertex to every vertex it reaches.

        Lengths are sums of edge_length along the reconstructed paths, so they
        agree with shortest_path_length for every pair.

        Args:
            pVertex_source: Start vertex

        Returns:
            Mapping of reachable vertex -> path length, the source mapped to 0;
            empty if the source is not in the graph
        """
        if not self.graph.has_vertex(pVertex_source):
            return {}

        _, aPrevious = self._dijkstra(pVertex_source)
        aLength: Dict[pyvertex, int] = {pVertex_source: 0}
        for pVertex_sink in aPrevious:
            if pVertex_sink == pVertex_source:
                continue
            aPath = self._build_path(aPrevious, pVertex_source, pVertex_sink)
            if aPath:
                aLength[pVertex_sink] = self.path_length(aPath)
        return aLength

    def shortest_distances(self, pVertex_source) -> Dict[pyvertex, float]:
        """
        Compute the least-cost distance from a vertex to every vertex.

        Args:
            pVertex_source: Start vertex

        Returns:
            Mapping of vertex -> distance, INFINITY for unreachable vertices;
            empty if the source is not in the graph
        """
        if not self.graph.has_vertex(pVertex_source):
            return {}
        aDistance, _ = self._dijkstra(pVertex_source)
        return aDistance

    def shortest_path_length(self, pVertex_source, pVertex_sink) -> int:
        """
        Get the total length of the shortest path between two vertices.

        Returns:
            Sum of edge lengths along the path, 0 if there is no path
        """
        return self.path_length(self.shortest_path(pVertex_source, pVertex_sink))

    def path_length(self, aPath: Sequence[pyvertex]) -> int:
        """
        Sum the edge lengths between consecutive vertices of a path.

        Args:
            aPath: Ordered vertices of the path

        Returns:
            Total length; consecutive vertices with no edge contribute 0
        """
        lLength = 0
        for i in range(len(aPath) - 1):
            lLength += self.graph.edge_length(aPath[i], aPath[i + 1])
        return lLength

    def _dijkstra(self, pVertex_source, pVertex_target=None) -> Tuple[Dict[pyvertex, float], Dict[pyvertex, pyvertex]]:
        """
        Run Dijkstra's algorithm from a source vertex.

        The frontier is a binary heap without decrease-key: a vertex may be
        pushed several times and stale entries are skipped once it is visited.

        Args:
            pVertex_source: Start vertex, must be in the graph
            pVertex_target: Optional vertex at which the search may stop early

        Returns:
            Tuple of (distance map, predecessor map)
        """
        aDistance: Dict[pyvertex, float] = {pVertex: INFINITY for pVertex in self.graph.get_vertices()}
        aDistance[pVertex_source] = 0
        aPrevious: Dict[pyvertex, pyvertex] = {}
        aVisited = set()

        # Sequence numbers break distance ties so vertices are never compared
        counter = itertools.count()
        aFrontier = [(0, next(counter), pVertex_source)]

        while aFrontier:
            dDistance_current, _, pVertex_current = heapq.heappop(aFrontier)
            if pVertex_current in aVisited:
                continue
            aVisited.add(pVertex_current)

            if pVertex_target is not None and pVertex_current == pVertex_target:
                break

            for pVertex_neighbour, pEdge in self.graph.get_neighbours(pVertex_current).items():
                dDistance_new = dDistance_current + pEdge.lLength
                if dDistance_new < aDistance[pVertex_neighbour]:
                    aDistance[pVertex_neighbour] = dDistance_new
                    aPrevious[pVertex_neighbour] = pVertex_current
                    if pVertex_neighbour not in aVisited:
                        heapq.heappush(aFrontier, (dDistance_new, next(counter), pVertex_neighbour))

        return aDistance, aPrevious

    def _build_path(self, aPrevious: Dict[pyvertex, pyvertex], pVertex_source, pVertex_sink) -> List[pyvertex]:
        """Walk predecessor links back from the sink; empty if the chain never reaches the source."""
        aPath = [pVertex_sink]
        pVertex_current = pVertex_sink
        while pVertex_current != pVertex_source:
            pVertex_current = aPrevious[pVertex_current]
            aPath.append(pVertex_current)
            # Only reachable with negative lengths, which can make predecessors cyclic
            if len(aPath) > self.graph.get_vertex_count():
                logger.warning("Predecessor chain does not reach the source; negative edge lengths?")
                return []
        aPath.reverse()
        return aPath
