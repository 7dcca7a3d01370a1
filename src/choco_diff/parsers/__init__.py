"""Parsers for package manager listings."""

from .choco_list import ParsedListing, parse, parse_listing
from .version import parse_int_prefix, parse_version

__all__ = [
    "ParsedListing",
    "parse",
    "parse_listing",
    "parse_int_prefix",
    "parse_version",
]
