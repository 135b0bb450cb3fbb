"""Incidence bookkeeping for a single vertex."""

from .arc import Arc


class Neighborhood:
    """
    The arcs incident to one vertex, split by direction.

    In-arcs have the vertex as their head, out-arcs have it as their tail. A
    neighborhood does not know which vertex it belongs to; the owning
    :class:`~digraph.core.digraph.Digraph` keeps both sides of every arc in
    step.

    """

    __slots__ = ("_in_arcs", "_out_arcs")

    def __init__(self) -> None:
        """Initialize a neighborhood with no incident arcs."""
        self._in_arcs: set[Arc] = set()
        self._out_arcs: set[Arc] = set()

    def __repr__(self) -> str:
        """Summarize the neighborhood by its arc counts."""
        return f"Neighborhood(in={len(self._in_arcs)}, out={len(self._out_arcs)})"

    def __len__(self) -> int:
        """Return the number of incident arcs."""
        return self.size()

    def add_in_arc(self, arc: Arc) -> None:
        """Add an arc ending at this vertex."""
        self._in_arcs.add(arc)

    def add_out_arc(self, arc: Arc) -> None:
        """Add an arc starting at this vertex."""
        self._out_arcs.add(arc)

    def delete_in_arc(self, arc: Arc) -> None:
        """Remove an in-arc, if present."""
        self._in_arcs.discard(arc)

    def delete_out_arc(self, arc: Arc) -> None:
        """Remove an out-arc, if present."""
        self._out_arcs.discard(arc)

    def is_in_arc(self, arc: Arc) -> bool:
        return arc in self._in_arcs

    def is_out_arc(self, arc: Arc) -> bool:
        return arc in self._out_arcs

    def get_in_arcs(self) -> frozenset[Arc]:
        """Get a snapshot of the in-arcs."""
        return frozenset(self._in_arcs)

    def get_out_arcs(self) -> frozenset[Arc]:
        """Get a snapshot of the out-arcs."""
        return frozenset(self._out_arcs)

    def size(self) -> int:
        """
        Count the incident arcs in both directions.

        A self-loop is both an in-arc and an out-arc, so it counts twice.

        """
        return len(self._in_arcs) + len(self._out_arcs)

    def num_in_arcs(self) -> int:
        return len(self._in_arcs)

    def num_out_arcs(self) -> int:
        return len(self._out_arcs)

    def get_in_neighbors(self) -> set[int]:
        """Get the tails of all in-arcs."""
        return {arc.tail for arc in self._in_arcs}

    def get_out_neighbors(self) -> set[int]:
        """Get the heads of all out-arcs."""
        return {arc.head for arc in self._out_arcs}
