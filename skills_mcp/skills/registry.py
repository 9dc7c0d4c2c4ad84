"""In-memory registry of skill metadata."""

from __future__ import annotations

import asyncio
import logging
import os
import time
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TYPE_CHECKING, TypeAlias

import anyio
import anyio.to_thread

from skills_mcp.errors import (
    SkillDiscoveryError,
    SkillReadError,
    SkillValidationError,
)
from skills_mcp.skills.models import Skill, SkillEntry, SkillFile, SkillInfo
from skills_mcp.skills.reader import (
    SKILL_FILE_NAME,
    get_skill_id,
    mtime_ms,
    read_skill_file,
)
from skills_mcp.skills.validation import validate_skill_id

if TYPE_CHECKING:
    from skills_mcp.conf import SkillsConfig

logger = logging.getLogger(__name__)

Clock: TypeAlias = Callable[[], float]
SkillReader: TypeAlias = Callable[[Path], Awaitable[SkillFile]]


def wall_clock_ms() -> float:
    """Current wall-clock time in milliseconds."""
    return time.time() * 1000


def find_skill_files(root: Path) -> list[Path]:
    """Find skill files under a directory, following symlinked directories.

    Each directory is visited once, so symlink cycles terminate.

    Raises:
        OSError: The root directory itself cannot be listed.
    """

    def _on_error(e: OSError) -> None:
        if e.filename is not None and Path(e.filename) == root:
            raise e
        logger.warning("skipping unreadable dir: %s (%s)", e.filename, e.strerror)

    found: list[Path] = []
    seen: set[tuple[int, int]] = set()
    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_on_error, followlinks=True
    ):
        try:
            st = os.stat(dirpath)
        except OSError:
            logger.warning("skipping unreadable dir: %s", dirpath)
            dirnames.clear()
            continue
        if (st.st_dev, st.st_ino) in seen:
            dirnames.clear()
            continue
        seen.add((st.st_dev, st.st_ino))

        if SKILL_FILE_NAME in filenames:
            path = Path(dirpath) / SKILL_FILE_NAME
            if path.is_file():
                found.append(path)
    return sorted(found)


class SkillRegistry:
    """Cache of skill metadata discovered under the skills directories.

    Only metadata is cached. Skill content is read from disk on every
    `get_skill` call.

    The entry map is only ever replaced as a whole by `scan` or updated one
    key at a time by `get_skill`, so readers never observe a partial scan.
    """

    def __init__(
        self,
        config: SkillsConfig,
        *,
        clock: Clock | None = None,
        reader: SkillReader = read_skill_file,
    ) -> None:
        """Initialize the registry.

        Args:
            config: The registry configuration.
            clock: Returns the current time in milliseconds.
            reader: Reads and validates a single skill file.
        """
        self._config = config
        self._clock = clock or wall_clock_ms
        self._read = reader
        self._entries: dict[str, SkillEntry] = {}
        self._last_scan: float = 0

    @property
    def skills_dirs(self) -> list[Path]:
        """Return the configured skills directories."""
        return list(self._config.skills_dirs)

    @property
    def staleness_threshold(self) -> int:
        """Return the staleness threshold in milliseconds."""
        return self._config.staleness_threshold

    @property
    def last_scan_time(self) -> float:
        """Return the time of the last completed scan in milliseconds."""
        return self._last_scan

    async def scan(self) -> None:
        """Rebuild the registry from the skills directories.

        Files with an invalid id or invalid content are skipped.

        Raises:
            SkillDiscoveryError: None of the skills directories is readable.
        """
        paths = await anyio.to_thread.run_sync(self._discover)
        self._warn_duplicates(paths)
        semaphore = asyncio.Semaphore(self._config.scan_concurrency)

        async def _load(path: Path) -> SkillEntry | None:
            async with semaphore:
                return await self._load_entry(path)

        tasks: list[asyncio.Task[SkillEntry | None]] = []
        async with asyncio.TaskGroup() as tg:
            tasks.extend(tg.create_task(_load(path)) for path in paths)

        # discovery order decides which duplicate wins
        entries: dict[str, SkillEntry] = {}
        for task in tasks:
            if (entry := task.result()) is not None:
                entries[entry.info.id] = entry

        self._entries = entries
        self._last_scan = self._clock()
        logger.debug(
            "scan found %s skills under: %s", len(entries), self._config.skills_dirs
        )

    def _discover(self) -> list[Path]:
        """Find every skill file under the skills directories."""
        found: dict[Path, None] = {}
        readable = 0
        for root in self._config.skills_dirs:
            try:
                if not root.is_dir():
                    logger.warning("skills dir not found: %s", root)
                    continue
                paths = find_skill_files(root)
            except OSError:
                logger.warning("skills dir not readable: %s", root, exc_info=True)
                continue
            readable += 1
            for path in paths:
                found[path.absolute()] = None

        if not readable:
            raise SkillDiscoveryError(self._config.skills_dirs)
        return list(found)

    def _warn_duplicates(self, paths: list[Path]) -> None:
        """Warn about skill files sharing an id, the later one wins."""
        claimed: dict[str, Path] = {}
        for path in paths:
            skill_id = get_skill_id(path)
            if not validate_skill_id(skill_id):
                continue
            if (previous := claimed.get(skill_id)) is not None:
                logger.warning(
                    "Duplicate skill id '%s' found at %s, "
                    "previous skill at %s will be overwritten",
                    skill_id,
                    path,
                    previous,
                )
            claimed[skill_id] = path

    async def _load_entry(self, path: Path) -> SkillEntry | None:
        skill_id = get_skill_id(path)
        if not validate_skill_id(skill_id):
            logger.warning(
                "Skipping skill with invalid id: %s "
                "(should be lowercase with hyphens) at %s",
                skill_id,
                path,
            )
            return None

        try:
            skill_file = await self._read(path)
        except (SkillValidationError, SkillReadError) as e:
            logger.warning("Failed to load skill from %s: %s", path, e)
            return None

        return self._make_entry(skill_id, path, skill_file)

    def _make_entry(
        self, skill_id: str, path: Path, skill_file: SkillFile
    ) -> SkillEntry:
        return SkillEntry(
            info=SkillInfo(
                id=skill_id,
                path=path,
                metadata=skill_file.metadata,
                last_modified=skill_file.last_modified,
            ),
            last_checked=self._clock(),
        )

    def is_stale(self) -> bool:
        """Whether the last scan is older than the staleness threshold."""
        return self._clock() - self._last_scan > self._config.staleness_threshold

    async def is_modified(self, skill_id: str) -> bool:
        """Whether the skill file changed since it was last read.

        Unknown skills and files that cannot be stat'ed count as modified.
        """
        entry = self._entries.get(skill_id)
        if entry is None:
            return True

        try:
            stat_result = await anyio.Path(entry.info.path).stat()
        except OSError:
            logger.warning(
                "Failed to check modification time for %s", skill_id, exc_info=True
            )
            return True

        return mtime_ms(stat_result) > entry.info.last_modified

    async def refresh_if_stale(self) -> bool:
        """Rescan if the registry is stale.

        Returns:
            True if a scan was performed.
        """
        if self.is_stale():
            await self.scan()
            return True
        return False

    def get_skill_infos(self) -> list[SkillInfo]:
        """Return the metadata of every known skill."""
        return [entry.info for entry in self._entries.values()]

    async def get_skill(self, skill_id: str) -> Skill | None:
        """Get a skill with its content read from disk.

        Returns:
            The skill, or None if it is unknown or cannot be read.
        """
        entry = self._entries.get(skill_id)
        if entry is None:
            if not self.is_stale():
                return None

            # the skill may have been added since the last scan
            try:
                await self.scan()
            except SkillDiscoveryError:
                logger.exception("Failed to rescan for skill %s", skill_id)
                return None

            entry = self._entries.get(skill_id)
            if entry is None:
                return None

        if await self.is_modified(skill_id):
            return await self._reload(entry)

        try:
            skill_file = await self._read(entry.info.path)
        except (SkillValidationError, SkillReadError):
            logger.exception("Failed to read skill content for %s", skill_id)
            return None

        return Skill(**entry.info.model_dump(), content=skill_file.body.strip())

    async def _reload(self, entry: SkillEntry) -> Skill | None:
        """Re-read a modified skill file and update its entry."""
        skill_id = entry.info.id
        try:
            skill_file = await self._read(entry.info.path)
        except (SkillValidationError, SkillReadError):
            # no second read of the same file
            logger.exception("Failed to reload skill %s", skill_id)
            return None

        new_entry = self._make_entry(skill_id, entry.info.path, skill_file)
        self._entries[skill_id] = new_entry
        return Skill(**new_entry.info.model_dump(), content=skill_file.body.strip())
