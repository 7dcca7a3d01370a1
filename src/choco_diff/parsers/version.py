"""Decompose dotted version strings such as ``1.12.0-pre154``."""

from __future__ import annotations

import re

from ..models import Version, VersionComponent

PRE_MARKER = "-pre"

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int_prefix(text: str) -> int | None:
    """Return the integer at the start of ``text``, or None when there is none.

    Leading whitespace and a sign are allowed; anything after the digits is
    ignored, so ``"12abc"`` parses as 12 while ``"abc"`` and ``""`` fail.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # digit runs beyond the interpreter's int conversion limit
        return None


def _parse_segment(segment: str) -> VersionComponent | None:
    if PRE_MARKER not in segment:
        number = parse_int_prefix(segment)
        if number is None:
            return None
        return VersionComponent(number=number)

    # exactly one marker per segment
    parts = segment.split(PRE_MARKER)
    if len(parts) != 2:
        return None

    number = parse_int_prefix(parts[0])
    pre = parse_int_prefix(parts[1])
    if number is None or pre is None:
        return None
    return VersionComponent(number=number, pre=pre)


def parse_version(version_str: str) -> Version | None:
    """Break a version string into one component per dot segment.

    Returns None when any segment is malformed; partial versions are never
    returned.
    """
    components: list[VersionComponent] = []
    for segment in version_str.split("."):
        component = _parse_segment(segment)
        if component is None:
            return None
        components.append(component)
    return Version.from_iterable(components)
