"""Orchestration logic for generating, checking or printing the reference."""

import argparse
import sys
from collections.abc import Iterator
from pathlib import Path

from luadocs.build_docs import build_docs
from luadocs.collect_source_files import collect_source_files
from luadocs.generation_report import GenerationReport
from luadocs.load_config import DEFAULT_CONFIG_NAME, load_config
from luadocs.normalize_path import normalize_path
from luadocs.read_file_if_exists import read_file_if_exists


def run_generation(args: argparse.Namespace) -> int:
    """Execute the pipeline and write, check or print its output."""
    repo_root = args.root.resolve()
    if args.config and not args.config.is_file():
        msg = f"Config file not found: {args.config}"
        raise SystemExit(msg)
    config_path = args.config or repo_root / DEFAULT_CONFIG_NAME
    config = load_config(config_path)

    source_root = repo_root / config["sources"]["root"]
    if not source_root.is_dir():
        msg = f"Source directory not found: {source_root}"
        raise SystemExit(msg)

    files = collect_source_files(source_root, config["sources"]["extensions"])
    report = GenerationReport(config)
    build = build_docs(_read_sources(files, repo_root, report), config)
    markdown = build.markdown

    if args.report:
        report.write(args.report, build)

    if args.stdout:
        sys.stdout.write(markdown)
        return 0

    output_path = repo_root / config["output"]["path"]

    if args.check:
        existing = read_file_if_exists(output_path)
        if existing != markdown:
            print(
                f"[docs] {output_path.name} is out of date. Run: luadocs",
                file=sys.stderr,
            )
            return 1
        print(f"[docs] {output_path.name} is up to date")
        return 0

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(markdown, encoding="utf-8", newline="")
    print(f"[docs] wrote {normalize_path(str(output_path.relative_to(repo_root)))}")
    return 0


def _read_sources(
    files: list[Path], repo_root: Path, report: GenerationReport
) -> Iterator[tuple[str, str]]:
    """Yield (text, repo-relative path) for each source file."""
    for f in files:
        report.add_file()
        relative = normalize_path(str(f.relative_to(repo_root)))
        yield f.read_text(encoding="utf-8"), relative
