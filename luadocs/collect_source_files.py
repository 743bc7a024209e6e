"""Logic for finding annotated source files under a directory."""

from pathlib import Path


def collect_source_files(root: Path, extensions: list[str]) -> list[Path]:
    """Recursively list files ending in one of `extensions`.

    Directory entries are visited in name order, so the result is stable
    across platforms and runs.
    """
    suffixes = tuple(extensions)
    out: list[Path] = []

    def walk(current: Path) -> None:
        for entry in sorted(current.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                walk(entry)
            elif entry.is_file() and entry.name.endswith(suffixes):
                out.append(entry)

    walk(root)
    return out
