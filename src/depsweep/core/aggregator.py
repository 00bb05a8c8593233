"""Thread-safe accumulation of scan results."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from depsweep.errors import DeletionError, ListingError
from depsweep.models.scan_result import MatchEntry, ScanResult
from depsweep.utils import bytes_to_human

log = logging.getLogger(__name__)


class ResultAggregator:
    """Collects matches from concurrent workers into one ScanResult.

    All updates are additive and guarded by a single lock, so the final
    totals do not depend on the order in which workers finish.
    """

    def __init__(self, root: Path, force: bool) -> None:
        self._lock = threading.Lock()
        self._result = ScanResult(root=root, force=force)

    def record_match(self, entry: MatchEntry) -> None:
        """Count a match (dry run) or a successful deletion (force)."""
        with self._lock:
            self._result.entries.append(entry)
            self._result.matched_count += 1
            self._result.total_bytes += entry.size_bytes

    def record_failure(self, error: DeletionError) -> None:
        """Record a failed deletion. Its size is never counted."""
        with self._lock:
            self._result.failures.append(error)

    def record_listing_error(self, error: ListingError) -> None:
        with self._lock:
            self._result.listing_errors.append(error)

    def result(self) -> ScanResult:
        """Return a snapshot of the accumulated result."""
        with self._lock:
            r = self._result
            return ScanResult(
                root=r.root,
                force=r.force,
                entries=list(r.entries),
                failures=list(r.failures),
                listing_errors=list(r.listing_errors),
                matched_count=r.matched_count,
                total_bytes=r.total_bytes,
            )


def summary_line(result: ScanResult) -> str:
    """Render the final one-line summary of a scan."""
    if result.is_clean:
        return "Everything looks clean!"
    size = bytes_to_human(result.total_bytes)
    if not result.force:
        return f"Potential space to reclaim: {size}"
    noun = "folder" if result.matched_count == 1 else "folders"
    return f"Reclaimed {size} across {result.matched_count} {noun}"
