"""
Vertex representation for weighted graphs.

A vertex carries an immutable identity key and a mutable display label.
Only the identity key takes part in equality and hashing, so relabelling a
vertex never changes its membership in a graph.
"""


class pyvertex:
    """
    Graph vertex identified by an integer key.

    Attributes:
        lVertexID: Identity key, read-only after construction
        sName: Display label, free to change
    """

    def __init__(self, lVertexID: int, sName: str = ""):
        """
        Create a vertex.

        Args:
            lVertexID: Unique identity key of the vertex
            sName: Optional display label

        Raises:
            TypeError: If the identity key is not an integer
        """
        if isinstance(lVertexID, bool) or not isinstance(lVertexID, int):
            raise TypeError(f"Vertex identity key must be an int, got {type(lVertexID).__name__}")
        self._lVertexID = lVertexID
        self.sName = sName

    @property
    def lVertexID(self) -> int:
        return self._lVertexID

    def update_name(self, sName: str) -> None:
        """Replace the display label."""
        self.sName = sName

    def check_id(self, other) -> bool:
        """
        Check whether another vertex shares this vertex's identity key.

        Args:
            other: Vertex to compare against

        Returns:
            True if both vertices have the same identity key, regardless of label
        """
        if not isinstance(other, pyvertex):
            return False
        return self._lVertexID == other._lVertexID

    def __eq__(self, other) -> bool:
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self.check_id(other)

    def __hash__(self) -> int:
        return hash(self._lVertexID)

    def __repr__(self) -> str:
        return f"pyvertex({self._lVertexID}, {self.sName!r})"
