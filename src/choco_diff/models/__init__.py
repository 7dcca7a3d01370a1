"""Data models for parsed listings and their comparison."""

from __future__ import annotations

from .package import (
    STATUS_DIFFERENT,
    STATUS_LEFT_ONLY,
    STATUS_RIGHT_ONLY,
    STATUS_SAME,
    ComparisonEntry,
    InstalledVersion,
    Package,
)
from .version import Version, VersionComponent

__all__ = [
    "STATUS_DIFFERENT",
    "STATUS_LEFT_ONLY",
    "STATUS_RIGHT_ONLY",
    "STATUS_SAME",
    "ComparisonEntry",
    "InstalledVersion",
    "Package",
    "Version",
    "VersionComponent",
]
