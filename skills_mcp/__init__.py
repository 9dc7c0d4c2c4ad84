"""Serve a directory of agent skills over the Model Context Protocol."""

from skills_mcp.conf import SkillsConfig
from skills_mcp.errors import (
    SkillDiscoveryError,
    SkillNotFoundError,
    SkillReadError,
    SkillsError,
    SkillValidationError,
)
from skills_mcp.skills import Skill, SkillInfo, SkillMetadata, SkillRegistry

__all__ = [
    "Skill",
    "SkillDiscoveryError",
    "SkillInfo",
    "SkillMetadata",
    "SkillNotFoundError",
    "SkillReadError",
    "SkillRegistry",
    "SkillValidationError",
    "SkillsConfig",
    "SkillsError",
]
