"""Dataclass for a vertex and its outgoing edges."""

from dataclasses import dataclass, field


@dataclass(slots=True)
class VertexRecord:
    """A labeled vertex holding its neighbors in insertion order."""

    label: str
    neighbors: list[str] = field(default_factory=list)

    def has_neighbor(self, label: str) -> bool:
        """Check whether an edge to ``label`` is recorded."""
        return label in self.neighbors

    def add_neighbor(self, label: str) -> bool:
        """Append ``label`` unless it is already a neighbor."""
        if label in self.neighbors:
            return False
        self.neighbors.append(label)
        return True

    def remove_neighbor(self, label: str) -> bool:
        """Drop ``label`` from the neighbors if present."""
        if label not in self.neighbors:
            return False
        self.neighbors.remove(label)
        return True

    def out_degree(self) -> int:
        """Number of outgoing edges."""
        return len(self.neighbors)

    def __repr__(self) -> str:
        """Represent the VertexRecord by its label."""
        return self.label
