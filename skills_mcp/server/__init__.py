"""MCP server for skills."""

from skills_mcp.server.server import build_server, create_server
from skills_mcp.server.tools import SkillDetail, SkillList, SkillSummary

__all__ = [
    "SkillDetail",
    "SkillList",
    "SkillSummary",
    "build_server",
    "create_server",
]
