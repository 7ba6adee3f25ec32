"""Module for the directed graph container and its vertex records."""

from .directed_graph import DirectedGraph
from .graph_adt import GraphADT
from .vertex_record import VertexRecord

__all__: list[str] = ["DirectedGraph", "GraphADT", "VertexRecord"]
