"""Configuration models."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from skills_mcp.env import SKILLS_MCP_STALENESS_THRESHOLD


class SkillsConfig(BaseModel):
    """Configuration of the skill registry."""

    skills_dirs: list[Path] = Field(min_length=1)
    """Root directories scanned recursively for SKILL.md files."""

    staleness_threshold: int = Field(default=SKILLS_MCP_STALENESS_THRESHOLD, ge=0)
    """Maximum age of the last full scan, in milliseconds."""

    scan_concurrency: int = Field(default=32, ge=1)
    """Maximum number of skill files read at the same time during a scan."""

    @field_validator("skills_dirs")
    @classmethod
    def _require_absolute(cls, value: list[Path]) -> list[Path]:
        relative = [str(p) for p in value if not p.is_absolute()]
        if relative:
            raise ValueError(
                "skills directories must be absolute paths: " + ", ".join(relative)
            )
        return list(dict.fromkeys(value))
