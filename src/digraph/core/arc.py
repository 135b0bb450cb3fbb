"""Dataclass for an arc (directed edge) between two vertices."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Arc:
    """An arc from ``tail`` to ``head``, compared and hashed by its endpoints."""

    tail: int
    head: int

    def __str__(self) -> str:
        """Represent the arc as ``(tail, head)``."""
        return f"({self.tail}, {self.head})"

    def reversed(self) -> "Arc":
        """Return the arc pointing the other way."""
        return Arc(self.head, self.tail)
