"""Logic for summarizing a generation run as a JSON report."""

import hashlib
import json
import time
from pathlib import Path
from typing import Any

from luadocs.build_docs import DocsBuild


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return a SHA-256 fingerprint of the settings a run was generated with.

    Key order does not affect the result, so reports from equal configs match.
    """
    canonical = json.dumps(config, sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class GenerationReport:
    """Collects what a run documented, dropped and left unreachable."""

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the report for the given effective configuration."""
        self.config_hash = compute_config_hash(config)
        self.start_time = time.time()
        self.file_count = 0

    def add_file(self) -> None:
        """Count one parsed source file."""
        self.file_count += 1

    def write(self, path: str | Path, build: DocsBuild) -> None:
        """Write the report for `build` to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_files": self.file_count,
                "total_classes": len(build.classes_by_name),
            },
            "documented": build.documented,
            "dropped_duplicates": [
                {"name": c.name, "path": c.file_path, "line": c.line}
                for c in build.dropped
            ],
            "unreachable": self._unreachable(build),
        }
        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _unreachable(self, build: DocsBuild) -> list[str]:
        documented = set(build.documented)
        return sorted(
            name
            for name, cls in build.classes_by_name.items()
            if cls.tags and name not in documented
        )
