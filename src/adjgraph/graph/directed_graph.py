"""Directed, unweighted graph backed by an adjacency list."""

import logging

from .graph_adt import GraphADT
from .vertex_record import VertexRecord

logger = logging.getLogger(__name__)


class DirectedGraph(GraphADT):
    """
    Directed, unweighted graph keyed by string labels.

    Vertices are kept in insertion order and each vertex keeps its neighbors
    in the order the edges were added. Invalid input is never an error: it
    leaves the graph unchanged and the mutation returns ``False``.

    Example usage:
        graph = DirectedGraph()
        graph.add_edge("A", "B")
        graph.get_adjacent_vertices_of("A")  # ["B"]
        graph.remove_vertex("B")
        graph.size()  # 0

    """

    def __init__(self) -> None:
        """Initialize an empty directed graph."""
        self._vertices: dict[str, VertexRecord] = {}
        self._size = 0
        self._order = 0

    def add_vertex(self, label: str | None) -> bool:
        """
        Add a vertex with no neighbors.

        Args:
            label: The vertex label

        Returns:
            True if the vertex was added, False if ``label`` is None or the
            vertex already exists

        """
        if label is None:
            logger.debug("Ignoring add_vertex with no label")
            return False
        if label in self._vertices:
            logger.debug("Vertex %s already exists", label)
            return False
        self._vertices[label] = VertexRecord(label)
        self._order += 1
        return True

    def remove_vertex(self, label: str | None) -> bool:
        """
        Remove a vertex along with its outgoing and incoming edges.

        Args:
            label: The vertex label

        Returns:
            True if the vertex was removed, False if it does not exist

        """
        if label is None or label not in self._vertices:
            logger.debug("Ignoring remove_vertex for missing vertex %s", label)
            return False

        record = self._vertices.pop(label)
        removed = record.out_degree()
        # Remove edges pointing to this vertex
        for other in self._vertices.values():
            if other.remove_neighbor(label):
                removed += 1

        self._order -= 1
        self._size -= removed
        logger.debug("Removed vertex %s and %d edges", label, removed)
        return True

    def add_edge(self, source: str | None, target: str | None) -> bool:
        """
        Add the edge ``source -> target``.

        Missing vertices are created first. Self-loops are allowed.

        Args:
            source: Label of the vertex the edge leaves
            target: Label of the vertex the edge enters

        Returns:
            True if the edge was added, False if either label is None or the
            edge already exists

        """
        if source is None or target is None:
            logger.debug(
                "Ignoring add_edge with no label: %s -> %s", source, target
            )
            return False
        self.add_vertex(source)
        self.add_vertex(target)
        if not self._vertices[source].add_neighbor(target):
            logger.debug("Edge %s -> %s already exists", source, target)
            return False
        self._size += 1
        return True

    def remove_edge(self, source: str | None, target: str | None) -> bool:
        """
        Remove the edge ``source -> target``.

        Self-loops cannot be removed this way; they go away with their
        vertex.

        Args:
            source: Label of the vertex the edge leaves
            target: Label of the vertex the edge enters

        Returns:
            True if the edge was removed, False otherwise

        """
        if source is None or target is None:
            logger.debug(
                "Ignoring remove_edge with no label: %s -> %s", source, target
            )
            return False
        if source == target:
            logger.debug("Ignoring remove_edge for self-loop on %s", source)
            return False
        if source not in self._vertices or target not in self._vertices:
            logger.debug("Ignoring remove_edge between missing vertices")
            return False
        if not self._vertices[source].remove_neighbor(target):
            logger.debug("Edge %s -> %s does not exist", source, target)
            return False
        self._size -= 1
        return True

    def get_all_vertices(self) -> list[str]:
        """Get all vertex labels in sorted order."""
        return sorted(self._vertices)

    def get_adjacent_vertices_of(self, label: str | None) -> list[str] | None:
        """
        Get the neighbors (outgoing edges) of a vertex.

        Args:
            label: The vertex label

        Returns:
            A copy of the neighbors in insertion order, or None if the
            vertex does not exist

        """
        if label is None or label not in self._vertices:
            return None
        return list(self._vertices[label].neighbors)

    def has_vertex(self, label: str | None) -> bool:
        """Check whether a vertex exists."""
        return label is not None and label in self._vertices

    def has_edge(self, source: str | None, target: str | None) -> bool:
        """Check whether the edge ``source -> target`` exists."""
        if source is None or source not in self._vertices:
            return False
        return self._vertices[source].has_neighbor(target)

    def size(self) -> int:
        """Get the number of edges."""
        return self._size

    def order(self) -> int:
        """Get the number of vertices."""
        return self._order

    def __contains__(self, label: object) -> bool:
        """Check whether a vertex exists."""
        return label in self._vertices

    def __len__(self) -> int:
        """Return the number of vertices."""
        return self._order

    def __repr__(self) -> str:
        """Represent the graph by its order and size."""
        return f"DirectedGraph(order={self._order}, size={self._size})"
