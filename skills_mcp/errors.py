"""Errors raised while loading and serving skills."""

from collections.abc import Iterable
from pathlib import Path


class SkillsError(Exception):
    """Base error of the skills package."""


class SkillValidationError(SkillsError):
    """Skill metadata failed schema validation."""

    def __init__(self, violations: list[str], path: Path | None = None) -> None:
        """Initialize the error.

        Args:
            violations: Every constraint the metadata violated.
            path: The skill file the metadata came from, if known.
        """
        self.violations = violations
        self.path = path
        detail = "; ".join(violations)
        if path is None:
            super().__init__(f"Invalid skill metadata: {detail}")
        else:
            super().__init__(f"Invalid skill file at {path}: {detail}")


class SkillReadError(SkillsError):
    """A skill file could not be read or parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to parse skill file {path}: {reason}")


class SkillDiscoveryError(SkillsError):
    """None of the configured skill directories could be scanned."""

    def __init__(self, roots: Iterable[Path]) -> None:
        self.roots = list(roots)
        names = ", ".join(str(r) for r in self.roots)
        super().__init__(f"No readable skills directory among: {names}")


class SkillNotFoundError(SkillsError):
    """The requested skill does not exist."""

    def __init__(self, skill_id: str) -> None:
        self.skill_id = skill_id
        super().__init__(f"Skill '{skill_id}' not found")
