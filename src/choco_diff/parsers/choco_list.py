"""Parse the output of ``choco list --local-only`` into package records."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..config import DEFAULT_RULES, ExclusionRules
from ..models import Package
from .version import parse_version

logger = logging.getLogger(__name__)

Warn = Callable[[str], None]


@dataclass(slots=True)
class ParsedListing:
    """Packages of one listing together with what was dropped on the way."""

    packages: list[Package]
    total_lines: int
    excluded_lines: int
    skipped_records: list[str] = field(default_factory=list)

    @property
    def package_count(self) -> int:
        return len(self.packages)


def _prune(lines: list[str], rules: ExclusionRules) -> list[str]:
    """Remove banner and summary lines."""
    return [line for line in lines if not rules.matches(line)]


def _parse_line(line: str, warn: Warn) -> Package | None:
    chunks = line.split(" ")
    if len(chunks) != 2 or not chunks[0]:
        warn(f'Ignoring malformed package line: "{line}"')
        return None

    name, version_str = chunks
    version = parse_version(version_str)
    if version is None:
        warn(f'Ignoring package "{name}" with malformed version: "{version_str}"')
        return None

    return Package(name=name, version=version, version_str=version_str)


def _split_lines(text: str) -> list[str]:
    trimmed = text.strip()
    if not trimmed:
        return []
    return trimmed.replace("\r\n", "\n").split("\n")


def parse(text: str, warn: Warn | None = None, rules: ExclusionRules | None = None) -> list[Package]:
    """Return the packages of a listing in input order.

    Malformed lines never raise: each one is dropped and reported once
    through ``warn`` (the module logger by default). Duplicate names are kept.
    """
    warn = warn or logger.warning
    rules = rules or DEFAULT_RULES

    packages: list[Package] = []
    for line in _prune(_split_lines(text), rules):
        package = _parse_line(line, warn)
        if package is not None:
            packages.append(package)
    return packages


def parse_listing(text: str, rules: ExclusionRules | None = None) -> ParsedListing:
    """Parse a listing and keep the diagnostics alongside the packages."""
    rules = rules or DEFAULT_RULES
    skipped: list[str] = []

    def record(message: str) -> None:
        skipped.append(message)
        logger.warning(message)

    lines = _split_lines(text)
    excluded = sum(1 for line in lines if rules.matches(line))
    packages = parse(text, warn=record, rules=rules)
    return ParsedListing(
        packages=packages,
        total_lines=len(lines),
        excluded_lines=excluded,
        skipped_records=skipped,
    )
