"""Tests for the command line interface."""

from pathlib import Path

import pytest

from skills_mcp.cli import cli
from skills_mcp.cli.cli import UsageError, load_config, parse_args, run
from skills_mcp.instructions import SKILLS_MCP_INSTRUCTIONS, get_instructions


def test_parse_multiple_skills_dirs() -> None:
    """Test that --skills-dir can be repeated."""
    args = parse_args(
        ["-s", "/a", "--skills-dir", "/b", "--staleness-threshold", "10"]
    )

    assert args.skills_dirs == ["/a", "/b"]
    assert args.staleness_threshold == 10
    assert args.command is None


def test_load_config(tmp_path: Path) -> None:
    """Test building the config from arguments."""
    config = load_config(parse_args(["-s", str(tmp_path)]))

    assert config.skills_dirs == [tmp_path]
    assert config.staleness_threshold == 5000


def test_load_config_staleness_override(tmp_path: Path) -> None:
    """Test overriding the staleness threshold."""
    config = load_config(
        parse_args(["-s", str(tmp_path), "--staleness-threshold", "250"])
    )

    assert config.staleness_threshold == 250


def test_load_config_requires_skills_dir(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that a skills directory is required."""
    monkeypatch.setattr(cli, "SKILLS_MCP_DIRS", [])

    with pytest.raises(UsageError, match="--skills-dir"):
        load_config(parse_args([]))


def test_load_config_from_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Test falling back to directories from the environment."""
    monkeypatch.setattr(cli, "SKILLS_MCP_DIRS", [tmp_path])

    assert load_config(parse_args([])).skills_dirs == [tmp_path]


def test_load_config_rejects_relative_paths(tmp_path: Path) -> None:
    """Test that relative directories are listed in the error."""
    with pytest.raises(UsageError, match="relative/skills"):
        load_config(parse_args(["-s", str(tmp_path), "-s", "relative/skills"]))


@pytest.mark.asyncio
async def test_instructions_command(capsys: pytest.CaptureFixture[str]) -> None:
    """Test printing the instructions wrapped in XML tags."""
    assert await run(["instructions"]) == 0

    out = capsys.readouterr().out
    assert out.startswith("<skills-mcp-instructions>")
    assert "list_skills" in out
    assert out.rstrip().endswith("</skills-mcp-instructions>")


@pytest.mark.asyncio
async def test_instructions_command_no_xml(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Test printing the instructions without XML tags."""
    assert await run(["instructions", "--no-xml"]) == 0

    out = capsys.readouterr().out
    assert "<skills-mcp-instructions>" not in out
    assert out.strip() == SKILLS_MCP_INSTRUCTIONS.strip()


@pytest.mark.asyncio
async def test_run_fails_without_readable_dirs(tmp_path: Path) -> None:
    """Test that startup aborts when no skills directory can be scanned."""
    assert await run(["-s", str(tmp_path / "missing")]) == 1


@pytest.mark.asyncio
async def test_run_fails_on_relative_dir() -> None:
    """Test that startup aborts on a relative skills directory."""
    assert await run(["-s", "relative"]) == 1


def test_get_instructions() -> None:
    """Test the XML wrapper."""
    assert get_instructions(xml=False) == SKILLS_MCP_INSTRUCTIONS
    wrapped = get_instructions()
    assert wrapped.startswith("<skills-mcp-instructions>\n")
    assert SKILLS_MCP_INSTRUCTIONS in wrapped


def test_load_config_rejects_negative_threshold(tmp_path: Path) -> None:
    """Test that an out of range threshold is a usage error."""
    with pytest.raises(UsageError, match="staleness_threshold"):
        load_config(
            parse_args(["-s", str(tmp_path), "--staleness-threshold", "-1"])
        )


@pytest.mark.asyncio
async def test_run_fails_on_negative_threshold(tmp_path: Path) -> None:
    """Test that startup exits cleanly on an out of range threshold."""
    assert await run(["-s", str(tmp_path), "--staleness-threshold", "-1"]) == 1
