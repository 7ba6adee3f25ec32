"""adjgraph neighbors CLI definition."""

import sys

import click

from adjgraph.builder import build_graph

from .cli import cli, edges_callback


@cli.command()
@click.argument("label", nargs=1, type=str, required=True)
@click.argument("edges", nargs=-1, type=str, callback=edges_callback)
def neighbors(label: str, edges: list[tuple[str, str]]) -> None:
    """Print the neighbors of LABEL in a graph of SOURCE:TARGET edges."""
    graph = build_graph(edges)
    adjacent = graph.get_adjacent_vertices_of(label)
    if adjacent is None:
        click.echo(f"Vertex not found: {label}", err=True)
        sys.exit(1)
    for neighbor in adjacent:
        click.echo(neighbor)
    sys.exit(0)
