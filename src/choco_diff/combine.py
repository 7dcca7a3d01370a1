"""Merge two parsed listings into a single name-sorted comparison."""

from __future__ import annotations

from collections.abc import Iterable

from .models import ComparisonEntry, InstalledVersion, Package


def combine_packages(left: Iterable[Package], right: Iterable[Package]) -> list[ComparisonEntry]:
    """Return one entry per package name found in either listing.

    When a name repeats within one side the last occurrence wins. Entries are
    sorted by name in code-point order.
    """
    sides: dict[str, dict[str, InstalledVersion]] = {}
    for side, packages in (("left", left), ("right", right)):
        for package in packages:
            sides.setdefault(package.name, {})[side] = package.installed

    return [
        ComparisonEntry(name=name, left=found.get("left"), right=found.get("right"))
        for name, found in sorted(sides.items())
    ]
