"""Mutable directed graphs keyed by integer vertex identifiers."""

from .core import (
    Arc,
    ArcNotFoundError,
    Digraph,
    DigraphError,
    DuplicateVertexError,
    Neighborhood,
    UnknownVertexError,
)

__version__: str = "0.1.0"

__all__: list[str] = [
    "Arc",
    "ArcNotFoundError",
    "Digraph",
    "DigraphError",
    "DuplicateVertexError",
    "Neighborhood",
    "UnknownVertexError",
    "__version__",
]
