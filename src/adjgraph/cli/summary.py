"""adjgraph summary CLI definition."""

import sys

import click

from adjgraph.builder import build_graph

from .cli import cli, edges_callback


@cli.command()
@click.argument("edges", nargs=-1, type=str, callback=edges_callback)
@click.option(
    "-v",
    "--vertex",
    "vertices",
    multiple=True,
    type=str,
    help="Add a vertex without edges. May be repeated.",
)
def summary(edges: list[tuple[str, str]], vertices: tuple[str, ...]) -> None:
    """Build a graph from SOURCE:TARGET edges and print its structure."""
    graph = build_graph(edges, vertices)
    click.echo(f"order: {graph.order()}")
    click.echo(f"size: {graph.size()}")
    click.echo(f"vertices: {', '.join(graph.get_all_vertices())}")
    for label in graph.get_all_vertices():
        neighbors = graph.get_adjacent_vertices_of(label) or []
        click.echo(f"{label} -> {', '.join(neighbors)}")
    sys.exit(0)
