"""Skills MCP CLI."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from skills_mcp.cli.cli_types import CLIArgs
from skills_mcp.conf import SkillsConfig
from skills_mcp.env import SKILLS_MCP_DIRS, SKILLS_MCP_LOG_LEVEL
from skills_mcp.errors import SkillDiscoveryError
from skills_mcp.instructions import get_instructions
from skills_mcp.server.server import create_server

logger = logging.getLogger(__name__)

USAGE_EXAMPLES = """\
Usage: skills-mcp --skills-dir /path/to/skills
       skills-mcp --skills-dir /path/to/skills1 --skills-dir /path/to/skills2
       skills-mcp -s /path/to/skills"""


class UsageError(Exception):
    """Invalid command line usage."""


def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup the argument parser."""
    parser = argparse.ArgumentParser(
        prog="skills-mcp",
        description="Serve a directory of agent skills over MCP (stdio).",
    )
    parser.add_argument(
        "-s",
        "--skills-dir",
        action="append",
        default=None,
        help="Absolute path to a skills directory. Can be given multiple times.",
        dest="skills_dirs",
    )
    parser.add_argument(
        "--staleness-threshold",
        type=int,
        default=None,
        help="Milliseconds before list_skills rescans the skills directories.",
        dest="staleness_threshold",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=SKILLS_MCP_LOG_LEVEL,
        help="Logging level, written to stderr.",
        dest="log_level",
    )
    subparsers = parser.add_subparsers(dest="command")
    instructions = subparsers.add_parser(
        "instructions",
        help="Print the agent usage instructions.",
        description=(
            "Export Skills MCP agent instructions for agent configuration files, "
            "e.g. `skills-mcp instructions >> AGENTS.md`."
        ),
    )
    instructions.add_argument(
        "--no-xml",
        action="store_false",
        default=True,
        help="Do not wrap the instructions in <skills-mcp-instructions> tags.",
        dest="xml",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> CLIArgs:
    """Parse the command line arguments."""
    return setup_argument_parser().parse_args(argv, namespace=CLIArgs())


def load_config(args: CLIArgs) -> SkillsConfig:
    """Build the registry configuration from arguments and environment.

    Raises:
        UsageError: No skills directory is given, one is not absolute, or a
            setting is out of range.
    """
    skills_dirs = (
        [Path(d) for d in args.skills_dirs] if args.skills_dirs else SKILLS_MCP_DIRS
    )
    if not skills_dirs:
        raise UsageError(
            "At least one --skills-dir argument is required\n" + USAGE_EXAMPLES
        )

    relative = [d for d in skills_dirs if not d.is_absolute()]
    if relative:
        lines = [
            "All skills directories must be absolute paths",
            "Non-absolute paths found:",
        ]
        lines.extend(f"  - {d}" for d in relative)
        raise UsageError("\n".join(lines))

    overrides: dict[str, int] = {}
    if args.staleness_threshold is not None:
        overrides["staleness_threshold"] = args.staleness_threshold
    try:
        return SkillsConfig(skills_dirs=skills_dirs, **overrides)
    except ValidationError as e:
        problems = [
            f"  - {'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise UsageError("\n".join(["Invalid configuration:", *problems])) from e


def setup_logging(level: str) -> None:
    """Send logs to stderr, stdout carries the MCP stdio transport."""
    logging.basicConfig(
        stream=sys.stderr,
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def run(argv: Sequence[str] | None = None) -> int:
    """skills_mcp CLI entrypoint.

    Returns:
        The process exit status.
    """
    args = parse_args(argv)

    if args.command == "instructions":
        print(get_instructions(xml=args.xml))  # noqa: T201
        return 0

    setup_logging(args.log_level)
    try:
        config = load_config(args)
    except UsageError as e:
        logger.error("Error: %s", e)  # noqa: TRY400
        return 1

    logger.info("Skills MCP Server starting...")
    for skills_dir in config.skills_dirs:
        logger.info("Skills directory: %s", skills_dir)

    server, registry = create_server(config)

    logger.info("Scanning skills directories...")
    try:
        await registry.scan()
    except SkillDiscoveryError:
        logger.exception("Failed to scan skills directories")
        return 1

    skill_infos = registry.get_skill_infos()
    logger.info("Loaded %s skill(s)", len(skill_infos))
    for info in skill_infos:
        logger.info("  - %s: %s", info.id, info.metadata.name)

    logger.info("Starting stdio transport...")
    await server.run_stdio_async()
    return 0
