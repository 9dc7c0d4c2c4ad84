"""Skill data models.

Ref: https://agentskills.io/specification
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, StrictStr

MAX_NAME_LENGTH = 64
MAX_DESCRIPTION_LENGTH = 1024


class SkillMetadata(BaseModel):
    """Definition of skills frontmatter."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(max_length=MAX_NAME_LENGTH)
    description: StrictStr = Field(max_length=MAX_DESCRIPTION_LENGTH)


class SkillFile(BaseModel):
    """Result of reading a SKILL.md file once."""

    metadata: SkillMetadata
    body: str
    last_modified: float
    """File modification time in milliseconds."""


class SkillInfo(BaseModel):
    """Skill metadata kept in the registry, without content."""

    id: str
    path: Path
    metadata: SkillMetadata
    last_modified: float


class SkillEntry(BaseModel):
    """Registry entry."""

    info: SkillInfo
    last_checked: float
    """Registry clock time of the last check, in milliseconds."""


class Skill(SkillInfo):
    """Complete skill with its instructions body."""

    content: str
