"""Utility for trimming blank lines around a block of text."""


def trim_edge_blank_lines(lines: list[str]) -> list[str]:
    """Drop leading and trailing blank lines, keeping interior ones."""
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]
