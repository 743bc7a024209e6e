"""Utility for collapsing runs of whitespace."""

import re


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and strip the ends."""
    return re.sub(r"\s+", " ", text).strip()
