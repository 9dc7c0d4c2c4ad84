"""MCP server exposing the skill registry."""

from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from skills_mcp.conf import SkillsConfig
from skills_mcp.errors import SkillNotFoundError
from skills_mcp.instructions import get_instructions
from skills_mcp.server import tools
from skills_mcp.server.tools import SkillDetail, SkillList
from skills_mcp.skills.registry import SkillRegistry

SERVER_NAME = "skills-mcp"

LIST_SKILLS_DESCRIPTION = (
    "List all available skills with their names and descriptions. "
    "Call this tool at the start of a conversation to discover available skills."
)

GET_SKILL_DESCRIPTION = (
    "Get the full instructions (SKILL.md content) for a specific skill. "
    "Returns the skill content along with the absolute path to the skill file, "
    "so referenced resources (references/, scripts/, assets/) can be resolved "
    "and read with your own file-reading tools."
)


def create_server(config: SkillsConfig) -> tuple[FastMCP, SkillRegistry]:
    """Create the MCP server and the registry it serves."""
    registry = SkillRegistry(config)
    return build_server(registry), registry


def build_server(registry: SkillRegistry) -> FastMCP:
    """Create an MCP server serving an existing registry."""
    server = FastMCP(SERVER_NAME, instructions=get_instructions(xml=False))

    @server.tool(
        name="list_skills",
        title="List Skills",
        description=LIST_SKILLS_DESCRIPTION,
    )
    async def list_skills() -> SkillList:
        return await tools.list_skills(registry)

    @server.tool(
        name="get_skill",
        title="Get Skill",
        description=GET_SKILL_DESCRIPTION,
    )
    async def get_skill(
        id: Annotated[  # noqa: A002
            str, Field(description="The skill identifier (directory name)")
        ],
    ) -> SkillDetail:
        try:
            return await tools.get_skill(registry, id)
        except SkillNotFoundError as e:
            raise ToolError(str(e)) from e

    @server.prompt(
        name="init-skills",
        title="Initialize Skills",
        description=(
            "Initialize a conversation with skill awareness and usage instructions"
        ),
    )
    def init_skills() -> str:
        return get_instructions(xml=False)

    return server
