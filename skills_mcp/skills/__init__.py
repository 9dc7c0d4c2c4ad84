"""Skill loading and caching."""

from skills_mcp.skills.models import (
    Skill,
    SkillEntry,
    SkillFile,
    SkillInfo,
    SkillMetadata,
)
from skills_mcp.skills.reader import get_skill_id, read_skill_file
from skills_mcp.skills.registry import SkillRegistry
from skills_mcp.skills.validation import validate_metadata, validate_skill_id

__all__ = [
    "Skill",
    "SkillEntry",
    "SkillFile",
    "SkillInfo",
    "SkillMetadata",
    "SkillRegistry",
    "get_skill_id",
    "read_skill_file",
    "validate_metadata",
    "validate_skill_id",
]
