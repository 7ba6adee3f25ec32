"""Test the VertexRecord dataclass."""

from adjgraph.graph import VertexRecord


def test_vertex_record_neighbors() -> None:
    """Test adding and removing neighbors without duplicates."""
    record = VertexRecord("A")
    assert record.neighbors == []
    assert record.add_neighbor("B")
    assert record.add_neighbor("C")
    assert not record.add_neighbor("B")
    assert record.neighbors == ["B", "C"]
    assert record.out_degree() == 2
    assert record.has_neighbor("C")

    assert record.remove_neighbor("B")
    assert not record.remove_neighbor("B")
    assert record.neighbors == ["C"]


def test_vertex_record_repr() -> None:
    """Test VertexRecord is represented by its label."""
    assert repr(VertexRecord("node")) == "node"


def test_vertex_records_do_not_share_neighbors() -> None:
    """Test each record gets its own neighbor list."""
    first = VertexRecord("A")
    second = VertexRecord("B")
    first.add_neighbor("B")
    assert second.neighbors == []
