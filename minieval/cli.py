"""Command-line entry point."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .environment import Environment


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Set up an empty environment and exit successfully."""
    parser = argparse.ArgumentParser(
        prog="minieval",
        description="Create an empty evaluation environment.",
    )
    parser.parse_args(argv)
    Environment()
    return 0