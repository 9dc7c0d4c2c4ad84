"""Operations served to agents, built on the skill registry."""

import logging

from pydantic import BaseModel, Field

from skills_mcp.errors import SkillDiscoveryError, SkillNotFoundError
from skills_mcp.skills.registry import SkillRegistry

logger = logging.getLogger(__name__)


class SkillSummary(BaseModel):
    """A skill as listed by `list_skills`."""

    id: str = Field(description="The skill identifier (directory name).")
    name: str
    description: str


class SkillList(BaseModel):
    """Result of `list_skills`."""

    skills: list[SkillSummary]


class SkillDetail(BaseModel):
    """Result of `get_skill`."""

    path: str = Field(description="Absolute path to the skill's SKILL.md.")
    name: str
    description: str
    content: str = Field(description="SKILL.md instructions without frontmatter.")


async def list_skills(registry: SkillRegistry) -> SkillList:
    """List every skill, rescanning first if the registry is stale."""
    try:
        await registry.refresh_if_stale()
    except SkillDiscoveryError:
        logger.exception("Failed to refresh skills, serving previous scan")

    return SkillList(
        skills=[
            SkillSummary(
                id=info.id,
                name=info.metadata.name,
                description=info.metadata.description,
            )
            for info in registry.get_skill_infos()
        ]
    )


async def get_skill(registry: SkillRegistry, skill_id: str) -> SkillDetail:
    """Get a skill's instructions.

    Raises:
        SkillNotFoundError: The skill does not exist or cannot be read.
    """
    skill = await registry.get_skill(skill_id)
    if skill is None:
        raise SkillNotFoundError(skill_id)

    return SkillDetail(
        path=str(skill.path),
        name=skill.metadata.name,
        description=skill.metadata.description,
        content=skill.content,
    )
