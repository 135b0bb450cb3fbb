"""Digraph build CLI definition."""

import sys
from collections.abc import Iterable

import click
import daiquiri

from digraph.core import Digraph, DigraphError

from .cli import cli

logger = daiquiri.getLogger(__name__)


def build_graph(
    vertices: Iterable[int],
    arcs: Iterable[tuple[int, int]],
    deleted_arcs: Iterable[tuple[int, int]] = (),
    deleted_vertices: Iterable[int] = (),
) -> Digraph:
    """
    Build a graph by applying insertions first, then deletions.

    Args:
        vertices: Vertices to add, in order
        arcs: Arcs to add as ``(tail, head)`` pairs
        deleted_arcs: Arcs to delete after all insertions
        deleted_vertices: Vertices to delete last

    Returns:
        The resulting graph

    Raises:
        DigraphError: If any step refers to a missing or duplicate vertex or arc

    """
    graph = Digraph()
    for vertex in vertices:
        graph.add_vertex(vertex)
    for tail, head in arcs:
        graph.add_arc(tail, head)
    for tail, head in deleted_arcs:
        graph.delete_arc(tail, head)
    for vertex in deleted_vertices:
        graph.delete_vertex(vertex)
    return graph


@cli.command()
@click.option(
    "-v",
    "--vertex",
    "vertices",
    type=int,
    multiple=True,
    help="Vertex to add. May be repeated.",
)
@click.option(
    "-a",
    "--arc",
    "arcs",
    type=(int, int),
    multiple=True,
    help="Arc TAIL HEAD to add. May be repeated.",
)
@click.option(
    "--delete-arc",
    "deleted_arcs",
    type=(int, int),
    multiple=True,
    help="Arc TAIL HEAD to delete after all insertions.",
)
@click.option(
    "--delete-vertex",
    "deleted_vertices",
    type=int,
    multiple=True,
    help="Vertex to delete after all other steps.",
)
def build(
    vertices: tuple[int, ...],
    arcs: tuple[tuple[int, int], ...],
    deleted_arcs: tuple[tuple[int, int], ...],
    deleted_vertices: tuple[int, ...],
) -> None:
    """Build a graph from the given vertices and arcs and print it."""
    try:
        graph = build_graph(vertices, arcs, deleted_arcs, deleted_vertices)
    except DigraphError as err:
        raise click.ClickException(str(err)) from err
    logger.info("Built %r", graph)
    click.echo(str(graph), nl=False)
    sys.exit(0)
