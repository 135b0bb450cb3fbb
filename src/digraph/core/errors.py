"""Exceptions raised by digraph operations."""

from .arc import Arc


class DigraphError(ValueError):
    """Base class for invalid operations on a digraph."""


class UnknownVertexError(DigraphError):
    """A vertex identifier does not name a vertex of the graph."""

    def __init__(self, vertex: int) -> None:
        """Record the offending vertex."""
        super().__init__(f"Not a vertex: {vertex}")
        self.vertex = vertex


class DuplicateVertexError(DigraphError):
    """A vertex identifier is already in use."""

    def __init__(self, vertex: int) -> None:
        """Record the offending vertex."""
        super().__init__(f"Vertex already exists: {vertex}")
        self.vertex = vertex


class ArcNotFoundError(DigraphError):
    """An arc between two existing vertices is not in the graph."""

    def __init__(self, arc: Arc) -> None:
        """Record the missing arc."""
        super().__init__(f"Not an arc: {arc}")
        self.arc = arc
