"""
Undirected weighted edge between two vertices.

Edges are value objects: the endpoint pair is unordered and, together with
the length, fully determines equality. Once built an edge cannot be changed,
so handing one out never exposes graph internals to mutation.
"""

from typing import Any


class pyedge:
    """
    Undirected edge with an integer length.

    Attributes:
        pVertex_start: First endpoint as given at construction
        pVertex_end: Second endpoint as given at construction
        lLength: Edge weight, 1 unless specified
    """

    def __init__(self, pVertex_start: Any, pVertex_end: Any, lLength: int = 1):
        """
        Create an edge.

        Args:
            pVertex_start: One endpoint
            pVertex_end: The other endpoint
            lLength: Integer weight of the edge

        Raises:
            TypeError: If the length is not an integer
        """
        if isinstance(lLength, bool) or not isinstance(lLength, int):
            raise TypeError(f"Edge length must be an int, got {type(lLength).__name__}")
        self._pVertex_start = pVertex_start
        self._pVertex_end = pVertex_end
        self._lLength = lLength

    @property
    def pVertex_start(self) -> Any:
        return self._pVertex_start

    @property
    def pVertex_end(self) -> Any:
        return self._pVertex_end

    @property
    def lLength(self) -> int:
        return self._lLength

    def is_incident(self, pVertex: Any) -> bool:
        """Check whether the vertex is one of the two endpoints."""
        return pVertex == self._pVertex_start or pVertex == self._pVertex_end

    def other_vertex(self, pVertex: Any) -> Any:
        """
        Get the endpoint opposite to the given one.

        Args:
            pVertex: One of the edge's endpoints

        Returns:
            The other endpoint (the vertex itself for a self-loop)

        Raises:
            ValueError: If the vertex is not an endpoint of this edge
        """
        if pVertex == self._pVertex_start:
            return self._pVertex_end
        if pVertex == self._pVertex_end:
            return self._pVertex_start
        raise ValueError(f"{pVertex!r} is not an endpoint of {self!r}")

    def connects(self, pVertex_a: Any, pVertex_b: Any) -> bool:
        """Check whether the edge joins the two vertices, in either orientation."""
        return ((self._pVertex_start == pVertex_a and self._pVertex_end == pVertex_b)
                or (self._pVertex_start == pVertex_b and self._pVertex_end == pVertex_a))

    def __eq__(self, other) -> bool:
        if not isinstance(other, pyedge):
            return NotImplemented
        return self._lLength == other._lLength and self.connects(other._pVertex_start, other._pVertex_end)

    def __hash__(self) -> int:
        # frozenset keeps the hash independent of endpoint order
        return hash((frozenset((self._pVertex_start, self._pVertex_end)), self._lLength))

    def __repr__(self) -> str:
        return f"pyedge({self._pVertex_start!r}, {self._pVertex_end!r}, {self._lLength})"
