"""Utility for generating Markdown tables."""

from luadocs.normalize_whitespace import normalize_whitespace

EMPTY_CELL = "-"


def escape_table_cell(value: str) -> str:
    """Collapse whitespace and escape pipes so the cell stays on one row."""
    normalized = normalize_whitespace(value)
    if not normalized:
        return EMPTY_CELL
    return normalized.replace("|", "\\|")


def md_table(headers: list[str], rows: list[list[str]]) -> list[str]:
    """Generate Markdown table lines; an empty table gets a row of `-` cells."""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    if not rows:
        rows = [[EMPTY_CELL] * len(headers)]
    out.extend("| " + " | ".join(r) + " |" for r in rows)
    return out
