from argparse import Namespace


class CLIArgs(Namespace):
    """Command line arguments."""

    skills_dirs: list[str] | None
    staleness_threshold: int | None
    log_level: str
    command: str | None
    xml: bool
