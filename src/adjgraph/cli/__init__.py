"""Setup the adjgraph command line interface."""

from . import cli, neighbors, summary

__all__: list[str] = ["cli", "neighbors", "summary"]
