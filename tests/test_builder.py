"""Test building graphs from textual edges."""

import pytest

from adjgraph.builder import build_graph, parse_edge


def test_parse_edge() -> None:
    """Test splitting SOURCE:TARGET."""
    assert parse_edge("A:B") == ("A", "B")
    assert parse_edge("A:B:C") == ("A", "B:C")


@pytest.mark.parametrize("text", ["AB", ":B", "A:", ""])
def test_parse_edge_rejects_malformed(text: str) -> None:
    """Test malformed edges raise ValueError."""
    with pytest.raises(ValueError, match="SOURCE:TARGET"):
        parse_edge(text)


def test_build_graph() -> None:
    """Test vertices are added before edges."""
    graph = build_graph([("A", "B"), ("A", "B"), ("B", "B")], ["D", "A"])
    assert graph.get_all_vertices() == ["A", "B", "D"]
    assert graph.size() == 2
    assert graph.get_adjacent_vertices_of("B") == ["B"]
