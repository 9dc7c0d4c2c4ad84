import os
from os import getenv
from pathlib import Path

SKILLS_MCP_DIRS = [
    Path(p) for p in getenv("SKILLS_MCP_DIRS", "").split(os.pathsep) if p
]
SKILLS_MCP_STALENESS_THRESHOLD = int(getenv("SKILLS_MCP_STALENESS_THRESHOLD", "5000"))
SKILLS_MCP_LOG_LEVEL = getenv("SKILLS_MCP_LOG_LEVEL", "INFO")
