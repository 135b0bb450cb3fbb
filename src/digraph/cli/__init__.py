"""Setup the digraph command line interface."""

from . import build, cli, demo

__all__: list[str] = ["build", "cli", "demo"]
