"""Reading SKILL.md files."""

import os
from pathlib import Path

import anyio
import frontmatter

from skills_mcp.errors import SkillReadError, SkillValidationError
from skills_mcp.skills.models import SkillFile
from skills_mcp.skills.validation import validate_metadata

SKILL_FILE_NAME = "SKILL.md"


def mtime_ms(stat_result: os.stat_result) -> float:
    """Modification time of a stat result in milliseconds."""
    return stat_result.st_mtime_ns / 1_000_000


async def read_skill_file(path: Path) -> SkillFile:
    """Read and parse a skill file once.

    Raises:
        SkillValidationError: The frontmatter does not match the schema.
        SkillReadError: The file could not be read or parsed.
    """
    file = anyio.Path(path)
    try:
        text = await file.read_text(encoding="utf-8")
        stat_result = await file.stat()
        post = frontmatter.loads(text)
        metadata = validate_metadata(post.metadata)
    except SkillValidationError as e:
        raise SkillValidationError(e.violations, path=path) from e
    except Exception as e:
        raise SkillReadError(path, str(e) or type(e).__name__) from e

    return SkillFile(
        metadata=metadata,
        body=post.content,
        last_modified=mtime_ms(stat_result),
    )


def get_skill_id(path: Path) -> str:
    """Skill id of a skill file, the name of its directory."""
    return path.parent.name
