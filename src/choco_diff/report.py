"""Report aggregation and schema-friendly output."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from typing import Any

from .models import (
    STATUS_DIFFERENT,
    STATUS_LEFT_ONLY,
    STATUS_RIGHT_ONLY,
    STATUS_SAME,
    ComparisonEntry,
)


def aggregate(
    entries: Iterable[ComparisonEntry],
    left_label: str = "left",
    right_label: str = "right",
) -> dict[str, Any]:
    """Aggregate comparison entries into a single schema-compatible report.

    Entries are passed through in the order given (the combiner already sorts
    them by name); each is annotated with its status. Totals count entries per
    status.
    """
    packages: list[dict[str, Any]] = []
    counts: Counter[str] = Counter()
    for entry in entries:
        status = entry.status
        counts[status] += 1
        packages.append({**entry.to_dict(), "status": status})

    report: dict[str, Any] = {
        "version": "1",  # schema requires a string
        "labels": {"left": left_label, "right": right_label},
        "hasDifferences": any(pkg["status"] != STATUS_SAME for pkg in packages),
        "packages": packages,
        "totals": {
            "packages": len(packages),
            "leftOnly": counts[STATUS_LEFT_ONLY],
            "rightOnly": counts[STATUS_RIGHT_ONLY],
            "same": counts[STATUS_SAME],
            "different": counts[STATUS_DIFFERENT],
        },
    }

    return report
