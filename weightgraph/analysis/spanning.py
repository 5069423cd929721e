"""
Minimum spanning tree construction for weighted graphs.

This module builds a minimum spanning tree (a forest for disconnected
graphs) by greedy edge selection.
"""

import logging
from typing import List

import numpy as np

from ..classes.edge import pyedge
from ..classes.utils import DisjointSet
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class SpanningTreeBuilder:
    """
    Kruskal spanning-tree builder.

    Edges are taken in ascending length, ties in insertion order, and
    accepted whenever they join two different partitions of the vertices.
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the builder.

        Args:
            graph: WeightedGraph instance to span
        """
        self.graph = graph

    def minimum_spanning_tree(self) -> List[pyedge]:
        """
        Compute a minimum spanning tree.

        If the graph is disconnected the result is a minimum spanning forest,
        one tree per connected component.

        Returns:
            Accepted edges in the order they were selected
        """
        aEdge = self.graph.get_edges()
        if not aEdge:
            return []

        aLength = np.array([pEdge.lLength for pEdge in aEdge])
        aIndex_order = np.argsort(aLength, kind="stable")

        pPartition = DisjointSet(self.graph.get_vertices())
        aEdge_tree = []

        for k in aIndex_order:
            pEdge = aEdge[k]
            # union() is False when both endpoints already share a partition (cycle)
            if pPartition.union(pEdge.pVertex_start, pEdge.pVertex_end):
                aEdge_tree.append(pEdge)

        logger.debug(f"Spanning forest has {len(aEdge_tree)} edges across {pPartition.count()} components")
        return aEdge_tree

    def minimum_spanning_tree_weight(self) -> int:
        """Get the total length of the minimum spanning tree."""
        return sum(pEdge.lLength for pEdge in self.minimum_spanning_tree())
