"""Usage guide for agents connected to the skills server.

Served as the `init-skills` prompt and printed by `skills-mcp instructions`.
"""

SKILLS_MCP_INSTRUCTIONS = """\
# Skills MCP - Usage Guide

This message is background information about the Skills MCP server. Do not act \
on it by itself; wait for a concrete task before using any skill.

## What Skills Are

A skill is a self-contained package of expertise for one domain or workflow. \
Every skill is a directory with:

- **Instructions** (`SKILL.md`): the core procedure for the domain
- **References** (`references/`): extra documentation, read only when needed
- **Scripts** (`scripts/`): executable helpers that run without entering context
- **Assets** (`assets/`): templates and files used to produce output

## Progressive Disclosure

Load information in stages and only when the task requires it:

1. **Metadata**: names and descriptions from `list_skills`, cheap enough to \
fetch early
2. **Instructions**: the `SKILL.md` body from `get_skill`, loaded once a skill \
is relevant
3. **Resources**: references, scripts and assets, used as the instructions \
direct

## Division of Work

The server only provides discovery and instruction content:

- `list_skills` returns the id, name and description of every skill
- `get_skill` returns the absolute `path` of a skill's `SKILL.md`, its `name`, \
`description` and the instruction `content`

Everything else is done with your own tools: reading reference files, running \
scripts and browsing skill directories. Resolve relative references against \
the directory of the returned `path`. For example, if `path` is \
`/skills/pdf-processing/SKILL.md`, then `references/FORMS.md` lives at \
`/skills/pdf-processing/references/FORMS.md`, and \
`cd /skills/pdf-processing && python scripts/fill_form.py` runs a script.

## When to Call Each Tool

- Call `list_skills` early in a conversation, and again whenever you need to \
refresh what is available.
- Call `get_skill` only when a skill clearly matches the current task. Do not \
preload skills in case they might be useful; load them one at a time as they \
become relevant. Several skills may be combined when a task spans domains.

When a skill says **MANDATORY - READ ENTIRE FILE** for a referenced file, read \
that whole file before you continue.

## Example

1. The user asks to fill out a PDF form.
2. `list_skills` shows `pdf-processing`, whose description mentions forms.
3. `get_skill` with id `pdf-processing` returns its path and instructions.
4. The instructions point to `references/FORMS.md`; read it from the skill \
directory.
5. Run the form filling script from the skill directory and finish the task.
"""


def get_instructions(xml: bool = True) -> str:  # noqa: FBT001, FBT002
    """Return the usage guide, wrapped in XML tags by default."""
    if not xml:
        return SKILLS_MCP_INSTRUCTIONS
    return (
        "<skills-mcp-instructions>\n"
        f"{SKILLS_MCP_INSTRUCTIONS}"
        "</skills-mcp-instructions>"
    )
