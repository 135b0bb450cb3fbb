"""Adjacency model: arcs, per-vertex neighborhoods and the digraph container."""

from .arc import Arc
from .digraph import Digraph
from .errors import (
    ArcNotFoundError,
    DigraphError,
    DuplicateVertexError,
    UnknownVertexError,
)
from .neighborhood import Neighborhood

__all__: list[str] = [
    "Arc",
    "ArcNotFoundError",
    "Digraph",
    "DigraphError",
    "DuplicateVertexError",
    "Neighborhood",
    "UnknownVertexError",
]
