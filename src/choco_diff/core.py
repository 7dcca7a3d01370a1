"""Core comparison entrypoints.

This module does no output of its own so it can back both the command line
tool and library callers.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from .combine import combine_packages
from .config import Settings
from .parsers.choco_list import Warn, parse
from .report import aggregate

STDIN_MARKER = "-"
BOM = "\ufeff"


def compare_listings(
    left_text: str,
    right_text: str,
    settings: Settings | None = None,
    warn: Warn | None = None,
) -> dict[str, Any]:
    """Parse two listings and return the aggregated comparison report."""
    settings = settings or Settings()
    left = parse(left_text, warn=warn, rules=settings.exclusions)
    right = parse(right_text, warn=warn, rules=settings.exclusions)
    entries = combine_packages(left, right)
    return aggregate(entries, left_label=settings.left_label, right_label=settings.right_label)


def _read_listing(source: Path | str) -> str:
    # a leading byte order mark is not part of the listing
    if str(source) == STDIN_MARKER:
        return sys.stdin.read().removeprefix(BOM)
    return Path(source).read_text(encoding="utf-8-sig")


def compare_files(
    left_path: Path | str,
    right_path: Path | str,
    settings: Settings | None = None,
    warn: Warn | None = None,
) -> dict[str, Any]:
    """Read two listing files and compare them.

    ``-`` reads standard input, for at most one of the two sides.
    """
    if str(left_path) == STDIN_MARKER and str(right_path) == STDIN_MARKER:
        raise ValueError("Standard input can only be used for one side")
    return compare_listings(
        _read_listing(left_path),
        _read_listing(right_path),
        settings=settings,
        warn=warn,
    )
