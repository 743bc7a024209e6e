"""Generate the Markdown API reference from `---@class` annotations.

Walks the configured Lua source tree, builds the documentation model from
annotation comments and writes it to the configured Markdown file. With
`--check` the file is only compared, which makes the command usable as a CI
gate for stale documentation.
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from luadocs.run_generation import run_generation


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    ap = argparse.ArgumentParser(
        description="Generate Markdown reference docs from Lua annotations.",
    )
    mode = ap.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Fail (exit 1) if the output file is not up to date",
    )
    mode.add_argument(
        "--stdout",
        action="store_true",
        help="Print the generated document instead of writing it",
    )
    ap.add_argument(
        "--config",
        type=Path,
        help="Path to a YAML configuration file (default: <root>/luadocs.yml)",
    )
    ap.add_argument(
        "--root",
        type=Path,
        default=Path(),
        help="Repository root that configured paths are relative to",
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write a JSON summary of the run to this path",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
