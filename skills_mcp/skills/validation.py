"""Validation of skill metadata and skill ids."""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from skills_mcp.errors import SkillValidationError
from skills_mcp.skills.models import SkillMetadata

# lowercase alphanumeric segments joined by single hyphens
SKILL_ID_PATTERN = re.compile(r"[a-z0-9]+(-[a-z0-9]+)*")


def validate_metadata(record: Any) -> SkillMetadata:
    """Validate a front-matter record.

    Raises:
        SkillValidationError: listing every violated constraint.
    """
    if not isinstance(record, Mapping):
        raise SkillValidationError(
            [f"metadata: expected a mapping, got {type(record).__name__}"]
        )
    try:
        return SkillMetadata.model_validate(dict(record))
    except ValidationError as e:
        violations = [
            f"{'.'.join(str(loc) for loc in err['loc']) or 'metadata'}: {err['msg']}"
            for err in e.errors()
        ]
        raise SkillValidationError(violations) from e


def validate_skill_id(skill_id: str) -> bool:
    """Check that a skill directory name is a valid skill id."""
    return SKILL_ID_PATTERN.fullmatch(skill_id) is not None
