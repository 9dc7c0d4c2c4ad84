import os
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

SKILL_TEMPLATE = """\
---
name: {name}
description: {description}
---

{body}
"""


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, now: float = 1_000_000) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


WriteSkill: TypeAlias = Callable[..., Path]


@pytest.fixture
def clock() -> FakeClock:
    """A fake clock for the skill registry."""
    return FakeClock()


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    """An empty skills directory."""
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture
def write_skill() -> WriteSkill:
    """Write a SKILL.md under `root/<skill_dir>/` and return its path."""

    def _write(
        root: Path,
        skill_dir: str,
        *,
        name: str | None = None,
        description: str = "A test skill",
        body: str = "## Instructions\n\nDo the thing.",
        raw: str | None = None,
    ) -> Path:
        d = root / skill_dir
        d.mkdir(parents=True, exist_ok=True)
        path = d / "SKILL.md"
        text = raw
        if text is None:
            text = SKILL_TEMPLATE.format(
                name=name or Path(skill_dir).name,
                description=description,
                body=body,
            )
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def bump_mtime(path: Path, seconds: int = 10) -> None:
    """Move a file's modification time forward."""
    st = path.stat()
    os.utime(path, ns=(st.st_atime_ns, st.st_mtime_ns + seconds * 1_000_000_000))


@pytest.fixture
def touch_later() -> Callable[..., None]:
    """Move a file's modification time forward."""
    return bump_mtime
