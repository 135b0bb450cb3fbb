"""Digraph demo CLI definition."""

import sys

import click

from digraph.core import Digraph

from .cli import cli

DEMO_VERTICES: list[int] = [1, 2, 3, 4]
DEMO_ARCS: list[tuple[int, int]] = [(1, 2), (2, 3), (3, 4), (4, 1), (1, 3)]


def build_demo_graph() -> Digraph:
    """Build the four-vertex sample graph with arc (3, 4) deleted again."""
    graph = Digraph()
    for vertex in DEMO_VERTICES:
        graph.add_vertex(vertex)
    for tail, head in DEMO_ARCS:
        graph.add_arc(tail, head)
    graph.delete_arc(3, 4)
    return graph


@cli.command()
def demo() -> None:
    """Build a small sample graph and print it."""
    click.echo(str(build_demo_graph()), nl=False)
    sys.exit(0)
