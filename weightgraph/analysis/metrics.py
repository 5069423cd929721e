"""
Distance-based graph metrics.

This module computes all-pairs shortest distances and the measures derived
from them: vertex eccentricity and graph diameter. Pairs of vertices with no
connecting path are ignored by every measure, so on a disconnected graph the
results describe the components individually.
"""

import logging
import time
from typing import List, Tuple

import numpy as np

from ..classes.vertex import pyvertex
from ..core.graph import WeightedGraph
from .pathfinding import PathFinder

logger = logging.getLogger(__name__)


class GraphMetrics:
    """
    Diameter and eccentricity calculator built on shortest-path search.
    """

    def __init__(self, graph: WeightedGraph, pathfinder: PathFinder):
        """
        Initialize the metrics calculator.

        Args:
            graph: WeightedGraph instance to measure
            pathfinder: PathFinder used for the single-source searches
        """
        self.graph = graph
        self.pathfinder = pathfinder

    def distance_matrix(self) -> Tuple[List[pyvertex], np.ndarray]:
        """
        Compute shortest distances between every pair of vertices.

        Returns:
            Tuple of (vertices in insertion order, square matrix of distances
            indexed the same way, inf where no path exists)
        """
        start_time = time.time()
        aVertex = self.graph.get_vertices()
        nVertex = len(aVertex)
        aDistance = np.full((nVertex, nVertex), np.inf)

        for i, pVertex_source in enumerate(aVertex):
            aDistance_source = self.pathfinder.shortest_distances(pVertex_source)
            for j, pVertex_sink in enumerate(aVertex):
                aDistance[i, j] = aDistance_source.get(pVertex_sink, np.inf)

        duration = time.time() - start_time
        logger.info(f"All-pairs distances for {nVertex} vertices computed in {duration:.3f}s")
        return aVertex, aDistance

    def diameter(self) -> int:
        """
        Compute the length of the longest shortest path in the graph.

        Path lengths are summed edge by edge in integer arithmetic, so the
        result matches shortest_path_length for the pair that attains it.
        Unreachable pairs are skipped, so a disconnected graph reports the
        largest diameter among its components.

        Returns:
            The diameter, 0 for a graph with fewer than two connected vertices
        """
        start_time = time.time()
        lDiameter = 0
        for pVertex in self.graph.get_vertices():
            lDiameter = max(lDiameter, self.eccentricity(pVertex))

        duration = time.time() - start_time
        logger.info(f"Diameter of {self.graph.get_vertex_count()} vertices computed in {duration:.3f}s")
        return lDiameter

    def eccentricity(self, pVertex) -> int:
        """
        Get the longest shortest-path length from a vertex to any vertex it reaches.

        Returns:
            The eccentricity, 0 for an isolated vertex or one not in the graph
        """
        aLength = self.pathfinder.shortest_path_lengths(pVertex)
        return max(aLength.values(), default=0)
