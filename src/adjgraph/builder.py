"""Build a DirectedGraph from textual edge and vertex descriptions."""

from collections.abc import Iterable

from adjgraph.graph import DirectedGraph

EDGE_SEPARATOR = ":"


def parse_edge(text: str) -> tuple[str, str]:
    """
    Split a ``SOURCE:TARGET`` string into its two labels.

    Raises:
        ValueError: If the text has no separator or an empty label

    """
    source, sep, target = text.partition(EDGE_SEPARATOR)
    if not sep or not source or not target:
        msg = f"expected SOURCE{EDGE_SEPARATOR}TARGET, got {text!r}"
        raise ValueError(msg)
    return source, target


def build_graph(
    edges: Iterable[tuple[str, str]], vertices: Iterable[str] = ()
) -> DirectedGraph:
    """Create a graph holding the given vertices and edges, in that order."""
    graph = DirectedGraph()
    for label in vertices:
        graph.add_vertex(label)
    for source, target in edges:
        graph.add_edge(source, target)
    return graph
