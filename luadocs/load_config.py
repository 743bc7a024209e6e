"""Logic for loading the generator configuration."""

import copy
from pathlib import Path
from typing import Any

import yaml

from luadocs.deep_merge import deep_merge

DEFAULT_CONFIG_NAME = "luadocs.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "document": {
        "title": "99",
        "tagline": "The AI Neovim experience",
    },
    "sources": {
        "root": "lua/99",
        "extensions": [".lua"],
    },
    "output": {
        "path": "docs/README.md",
    },
    "dedupe": {
        "test_path_markers": ["/test/"],
    },
}


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A missing file, or no path at all, yields the defaults.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
