"""Directed graph container keyed by integer vertex identifiers."""

import io
import logging
import sys
from collections.abc import Iterator
from typing import TextIO

from .arc import Arc
from .errors import ArcNotFoundError, DuplicateVertexError, UnknownVertexError
from .neighborhood import Neighborhood

logger = logging.getLogger(__name__)


class Digraph:
    """
    Mutable directed graph with at most one arc per ordered vertex pair.

    Each vertex owns a :class:`Neighborhood`. Every arc ``(u, v)`` is recorded
    twice: in the out-arcs of ``u`` and in the in-arcs of ``v``. All mutating
    methods update both sides, and validate their arguments before touching
    anything, so a call that raises leaves the graph as it was.

    Example usage:
        graph = Digraph()
        graph.add_vertex(1)
        graph.add_vertex(2)
        graph.add_arc(1, 2)
        graph.get_out_neighbors(1)  # {2}

    """

    def __init__(self) -> None:
        """Initialize an empty directed graph."""
        # Iteration order is insertion order; nothing depends on it.
        self._adjacency: dict[int, Neighborhood] = {}

    def __repr__(self) -> str:
        """Summarize the graph by its vertex and arc counts."""
        return f"Digraph(N={len(self._adjacency)}, M={self.num_arcs()})"

    def __str__(self) -> str:
        """Render the same text as :meth:`dump`."""
        buffer = io.StringIO()
        self.dump(buffer)
        return buffer.getvalue()

    def __len__(self) -> int:
        """Return the number of vertices."""
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        """Check whether ``vertex`` is a vertex of the graph."""
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[int]:
        """Iterate over the vertex identifiers."""
        return iter(list(self._adjacency))

    def _neighborhood(self, vertex: int) -> Neighborhood:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise UnknownVertexError(vertex) from None

    def add_vertex(self, vertex: int) -> None:
        """
        Add a vertex with no incident arcs.

        Args:
            vertex: Identifier of the new vertex

        Raises:
            DuplicateVertexError: If the vertex already exists

        """
        if vertex in self._adjacency:
            raise DuplicateVertexError(vertex)
        self._adjacency[vertex] = Neighborhood()
        logger.debug("Added vertex %d", vertex)

    def is_vertex(self, vertex: int) -> bool:
        """Check whether ``vertex`` is a vertex of the graph."""
        return vertex in self._adjacency

    def add_arc(self, tail: int, head: int) -> Arc:
        """
        Add the arc ``tail -> head``.

        Adding an arc that already exists has no effect. Self-loops are
        allowed.

        Args:
            tail: Vertex the arc starts at
            head: Vertex the arc ends at

        Returns:
            The arc as stored in the graph

        Raises:
            UnknownVertexError: If either endpoint is not a vertex

        """
        tail_nbr = self._neighborhood(tail)
        head_nbr = self._neighborhood(head)
        arc = Arc(tail, head)
        tail_nbr.add_out_arc(arc)
        head_nbr.add_in_arc(arc)
        logger.debug("Added arc %s", arc)
        return arc

    def is_arc(self, arc: Arc) -> bool:
        """
        Check whether ``arc`` is in the graph.

        Raises:
            UnknownVertexError: If either endpoint is not a vertex

        """
        self._neighborhood(arc.tail)
        return self._neighborhood(arc.head).is_in_arc(arc)

    def delete_vertex(self, vertex: int) -> None:
        """
        Delete a vertex together with every arc incident to it.

        Args:
            vertex: Identifier of the vertex to delete

        Raises:
            UnknownVertexError: If the vertex does not exist

        """
        nbr = self._neighborhood(vertex)
        del self._adjacency[vertex]

        # Self-loops went away with the vertex's own neighborhood.
        for arc in nbr.get_in_arcs():
            if arc.tail != vertex:
                self._adjacency[arc.tail].delete_out_arc(arc)
        for arc in nbr.get_out_arcs():
            if arc.head != vertex:
                self._adjacency[arc.head].delete_in_arc(arc)

        logger.debug(
            "Deleted vertex %d (%d in-arcs, %d out-arcs)",
            vertex,
            nbr.num_in_arcs(),
            nbr.num_out_arcs(),
        )

    def delete_arc(self, tail: int, head: int) -> None:
        """
        Delete the arc ``tail -> head``.

        Raises:
            UnknownVertexError: If either endpoint is not a vertex
            ArcNotFoundError: If both endpoints exist but the arc does not

        """
        tail_nbr = self._neighborhood(tail)
        head_nbr = self._neighborhood(head)
        arc = Arc(tail, head)
        if not head_nbr.is_in_arc(arc):
            raise ArcNotFoundError(arc)
        tail_nbr.delete_out_arc(arc)
        head_nbr.delete_in_arc(arc)
        logger.debug("Deleted arc %s", arc)

    def size(self) -> int:
        """Get the number of vertices."""
        return len(self._adjacency)

    def num_arcs(self) -> int:
        """Get the number of arcs."""
        return sum(nbr.num_out_arcs() for nbr in self._adjacency.values())

    def get_vertex_set(self) -> set[int]:
        """Get a snapshot of all vertex identifiers."""
        return set(self._adjacency)

    def get_out_neighbors(self, vertex: int) -> set[int]:
        """
        Get the vertices reachable from ``vertex`` by one arc.

        Raises:
            UnknownVertexError: If the vertex does not exist

        """
        return self._neighborhood(vertex).get_out_neighbors()

    def get_in_neighbors(self, vertex: int) -> set[int]:
        """
        Get the vertices with an arc into ``vertex``.

        Raises:
            UnknownVertexError: If the vertex does not exist

        """
        return self._neighborhood(vertex).get_in_neighbors()

    def dump(self, out: TextIO = sys.stdout) -> None:
        """Dump a textual representation of this graph to out."""
        for vertex in sorted(self._adjacency):
            nbr = self._adjacency[vertex]
            in_arcs = ", ".join(str(arc) for arc in sorted(nbr.get_in_arcs()))
            out_arcs = ", ".join(str(arc) for arc in sorted(nbr.get_out_arcs()))
            out.write(f"Vertex: {vertex}\n")
            out.write(f"In arcs: {in_arcs}\n")
            out.write(f"Out arcs: {out_arcs}\n")
