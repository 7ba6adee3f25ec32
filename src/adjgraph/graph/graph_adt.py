"""Abstract interface for directed, unweighted graphs."""

from abc import ABC, abstractmethod


class GraphADT(ABC):
    """
    Operations every directed graph container provides.

    Implementations never raise for malformed input: a ``None`` label, a
    duplicate insert or a reference to a missing vertex or edge leaves the
    graph untouched. Mutations report whether the graph changed.
    """

    @abstractmethod
    def add_vertex(self, label: str | None) -> bool:
        """Add a vertex with no neighbors."""

    @abstractmethod
    def remove_vertex(self, label: str | None) -> bool:
        """Remove a vertex and every edge that references it."""

    @abstractmethod
    def add_edge(self, source: str | None, target: str | None) -> bool:
        """Add the edge ``source -> target``, creating missing vertices."""

    @abstractmethod
    def remove_edge(self, source: str | None, target: str | None) -> bool:
        """Remove the edge ``source -> target``."""

    @abstractmethod
    def get_all_vertices(self) -> list[str]:
        """Return every vertex label in sorted order."""

    @abstractmethod
    def get_adjacent_vertices_of(self, label: str | None) -> list[str] | None:
        """Return the neighbors of a vertex, or ``None`` if it is missing."""

    @abstractmethod
    def size(self) -> int:
        """Return the number of edges."""

    @abstractmethod
    def order(self) -> int:
        """Return the number of vertices."""
