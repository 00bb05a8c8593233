"""Scan result dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from depsweep.errors import DeletionError, ListingError
from depsweep.models.clean_rule import CleanRule


@dataclass(slots=True)
class MatchEntry:
    """Single directory matched by a clean rule."""

    path: Path
    rule: CleanRule
    size_bytes: int
    file_count: int = 0

    @property
    def description(self) -> str:
        return self.rule.description


@dataclass(slots=True)
class ScanResult:
    """Result of one scan or clean invocation.

    ``matched_count`` and ``total_bytes`` cover every match in a dry run, and
    only the successful deletions when the scan ran with ``force``.
    """

    root: Path
    force: bool
    entries: list[MatchEntry] = field(default_factory=list)
    failures: list[DeletionError] = field(default_factory=list)
    listing_errors: list[ListingError] = field(default_factory=list)
    matched_count: int = 0
    total_bytes: int = 0

    @property
    def is_clean(self) -> bool:
        """True when nothing matched at all, including failed deletions."""
        return not self.entries and not self.failures

    def to_dict(self) -> dict:
        return {
            "root": str(self.root),
            "force": self.force,
            "matched_count": self.matched_count,
            "total_bytes": self.total_bytes,
            "entries": [
                {
                    "path": str(e.path),
                    "folder_name": e.rule.folder_name,
                    "description": e.description,
                    "size_bytes": e.size_bytes,
                    "file_count": e.file_count,
                }
                for e in self.entries
            ],
            "failures": [{"path": str(f.path), "error": str(f.cause)} for f in self.failures],
            "listing_errors": len(self.listing_errors),
        }
