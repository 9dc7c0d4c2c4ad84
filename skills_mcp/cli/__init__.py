"""Skills MCP command line interface."""

import asyncio
import sys

from skills_mcp.cli.cli import run


def main() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(run()))


__all__ = ["main", "run"]
