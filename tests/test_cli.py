"""Unit tests for the CLI module."""

from click.testing import CliRunner

from digraph import __version__
from digraph.cli.build import build_graph
from digraph.cli.cli import cli
from digraph.cli.demo import build_demo_graph
from digraph.core.arc import Arc


def test_cli_help() -> None:
    """Test CLI help message."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "CLI command group for digraph" in result.output


def test_cli_version_option() -> None:
    """Test CLI --version option."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_log_level_debug() -> None:
    """Test CLI with DEBUG log level."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--log-level", "DEBUG", "demo"])
    assert result.exit_code == 0


def test_cli_demo() -> None:
    """Test the demo command prints the sample graph."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--log-level", "ERROR", "demo"])
    assert result.exit_code == 0
    assert "Vertex: 1\nIn arcs: (4, 1)\nOut arcs: (1, 2), (1, 3)\n" in result.output
    assert "(3, 4)" not in result.output


def test_build_demo_graph() -> None:
    """Test the demo graph has arc (3, 4) removed."""
    graph = build_demo_graph()
    assert graph.get_vertex_set() == {1, 2, 3, 4}
    assert not graph.is_arc(Arc(3, 4))
    assert graph.num_arcs() == 4


def test_cli_build() -> None:
    """Test building a graph from command line options."""
    runner = CliRunner()
    result = runner.invoke(
        cli,
        [
            "--log-level",
            "ERROR",
            "build",
            "-v",
            "1",
            "-v",
            "2",
            "-v",
            "3",
            "-a",
            "1",
            "2",
            "--arc",
            "2",
            "3",
            "--delete-vertex",
            "3",
        ],
    )
    assert result.exit_code == 0
    assert "Vertex: 2\nIn arcs: (1, 2)\nOut arcs: \n" in result.output
    assert "Vertex: 3" not in result.output


def test_cli_build_unknown_vertex() -> None:
    """Test that graph errors exit with status 1."""
    runner = CliRunner()
    result = runner.invoke(
        cli, ["--log-level", "ERROR", "build", "-v", "1", "-a", "1", "2"]
    )
    assert result.exit_code == 1
    assert "Not a vertex: 2" in result.output


def test_build_graph_order() -> None:
    """Test that deletions run after insertions."""
    graph = build_graph([1, 2], [(1, 2), (2, 1)], deleted_arcs=[(2, 1)])
    assert graph.is_arc(Arc(1, 2))
    assert not graph.is_arc(Arc(2, 1))
