"""Utility for producing forward-slash relative paths."""


def normalize_path(value: str) -> str:
    """Replace Windows separators with forward slashes."""
    return value.replace("\\", "/")
