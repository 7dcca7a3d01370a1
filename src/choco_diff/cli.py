"""Compare two Chocolatey package listings.

Usage:
  choco-diff before.txt after.txt [--format markdown] [--fail-on-differences]

Listings are the output of ``choco list --local-only``; ``-`` reads one of
them from standard input.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import ConfigError, load_settings
from .core import compare_files
from .summary import render_summary
from .validators.report_schema import validate_report

EXIT_ERROR = 1
EXIT_DIFFERENCES = 10


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="choco-diff",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("left", type=str, help="Listing for the left side (or '-')")
    parser.add_argument("right", type=str, help="Listing for the right side (or '-')")
    parser.add_argument("--config", type=Path, default=None, help="YAML or JSON settings file")
    parser.add_argument("--left-label", default=None, help="Display name of the left side")
    parser.add_argument("--right-label", default=None, help="Display name of the right side")
    parser.add_argument("--format", choices=("json", "markdown"), default="json")
    parser.add_argument("--output", type=Path, default=None, help="Write here instead of stdout")
    parser.add_argument(
        "--only-differences",
        action="store_true",
        help="Omit packages with identical versions from the Markdown table",
    )
    parser.add_argument(
        "--fail-on-differences",
        action="store_true",
        help=f"Exit with status {EXIT_DIFFERENCES} when the listings differ",
    )
    parser.add_argument("--quiet", action="store_true", help="Hide malformed-line warnings")
    return parser.parse_args(argv)


def _configure_logging(quiet: bool) -> None:
    logging.basicConfig(format="%(levelname)s: %(message)s", stream=sys.stderr)
    logging.getLogger("choco_diff").setLevel(logging.ERROR if quiet else logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.quiet)

    try:
        settings = load_settings(args.config).with_labels(args.left_label, args.right_label)
        report = compare_files(args.left, args.right, settings=settings)
        if args.format == "json":
            validate_report(report)
            rendered = json.dumps(report, indent=2) + "\n"
        else:
            rendered = render_summary(report, only_differences=args.only_differences)
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except ValueError as exc:
        print(f"ERROR: Comparison failed: {str(exc).strip()}", file=sys.stderr)
        return EXIT_ERROR

    if args.output is not None:
        args.output.write_text(rendered, encoding="utf-8")
    else:
        sys.stdout.write(rendered)

    if args.fail_on_differences and report.get("hasDifferences"):
        return EXIT_DIFFERENCES
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
