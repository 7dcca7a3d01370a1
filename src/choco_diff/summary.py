"""Human-readable Markdown rendering of a comparison report."""

from __future__ import annotations

from typing import Any

_MISSING = "-"


def _version_cell(side: dict[str, Any] | None) -> str:
    if not side:
        return _MISSING
    return str(side.get("versionStr", _MISSING))


def render_summary(report: dict[str, Any], only_differences: bool = False) -> str:
    """Return a Markdown string with totals and a table of packages."""
    totals = report.get("totals", {})
    labels = report.get("labels", {})
    left_label = labels.get("left", "left")
    right_label = labels.get("right", "right")

    lines = []
    lines.append(f"# Package comparison: {left_label} vs {right_label}")
    lines.append("")
    lines.append(
        f"Packages: {totals.get('packages', 0)} | "
        f"Only in {left_label}: {totals.get('leftOnly', 0)} | "
        f"Only in {right_label}: {totals.get('rightOnly', 0)} | "
        f"Different: {totals.get('different', 0)} | "
        f"Same: {totals.get('same', 0)}"
    )
    lines.append("")
    lines.append(f"| Package | {left_label} | {right_label} | Status |")
    lines.append("| --- | --- | --- | --- |")

    has_rows = False
    for pkg in report.get("packages", []):
        status = pkg.get("status", "")
        if only_differences and status == "same":
            continue
        left = _version_cell(pkg.get("left"))
        right = _version_cell(pkg.get("right"))
        lines.append(f"| {pkg.get('name', '')} | {left} | {right} | {status} |")
        has_rows = True

    if not has_rows:
        lines.append(f"| (no packages to show) | {_MISSING} | {_MISSING} | n/a |")

    return "\n".join(lines) + "\n"
