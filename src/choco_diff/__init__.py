"""choco-diff core package.

Parses Chocolatey package listings and compares two of them package by
package. The command line tool in ``choco_diff.cli`` is a thin wrapper around
``choco_diff.core``.
"""

from .combine import combine_packages
from .parsers import parse, parse_version

__all__ = [
    "combine_packages",
    "parse",
    "parse_version",
]
