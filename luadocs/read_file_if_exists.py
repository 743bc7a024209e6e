"""Utility for reading a file that may not exist yet."""

from pathlib import Path


def read_file_if_exists(path: Path) -> str | None:
    """Return the file contents exactly as stored, or None when it is missing.

    Bytes are decoded without newline translation, so `\\r\\n` endings are
    kept and compare unequal to freshly rendered `\\n` output.
    """
    try:
        return path.read_bytes().decode("utf-8")
    except FileNotFoundError:
        return None
