"""adjgraph: a small directed, unweighted graph container."""

from .graph import DirectedGraph, GraphADT, VertexRecord

__version__: str = "0.1.0"

__all__: list[str] = ["DirectedGraph", "GraphADT", "VertexRecord", "__version__"]
