"""Directory tree walker that finds and removes cleanable folders."""

from __future__ import annotations

import logging
import os
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path
from typing import Callable

from depsweep.core.aggregator import ResultAggregator
from depsweep.core.indicator import classify
from depsweep.core.rules import DEFAULT_RULES, RuleTable
from depsweep.errors import DeletionError, ListingError, NotADirectoryPathError, PathNotFoundError
from depsweep.models.clean_rule import CleanRule
from depsweep.models.scan_result import MatchEntry, ScanResult
from depsweep.utils import dir_info, remove_tree

log = logging.getLogger(__name__)

MatchCallback = Callable[[MatchEntry], None]
ErrorCallback = Callable[[MatchEntry, DeletionError], None]

# A directory to process: matched folders carry their rule, others are descended into.
WorkItem = tuple[Path, CleanRule | None]


class TreeWalker:
    """Walks a directory tree and reports or deletes folders matched by the rules.

    Subtrees are walked concurrently by a thread pool sized to the CPU
    count. Each task lists one directory and classifies its children
    before handing any of them back, so a matched folder is never entered.
    With a single worker the same tasks run sequentially from a stack.

    Callbacks fire from worker threads:

    - ``on_match(entry)`` for every match, before any deletion attempt
    - ``on_deleted(entry)`` after a successful deletion
    - ``on_error(entry, error)`` after a failed deletion
    """

    def __init__(
        self,
        rules: RuleTable = DEFAULT_RULES,
        workers: int | None = None,
        on_match: MatchCallback | None = None,
        on_deleted: MatchCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self.rules = rules
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        self.on_match = on_match
        self.on_deleted = on_deleted
        self.on_error = on_error

    def scan(self, root: Path | str, force: bool = False) -> ScanResult:
        """Scan *root* for cleanable folders, deleting them when *force* is set.

        Raises:
            PathNotFoundError: *root* does not exist.
            NotADirectoryPathError: *root* is not a directory.
        """
        root = Path(root)
        if not root.exists():
            raise PathNotFoundError(root)
        if not root.is_dir():
            raise NotADirectoryPathError(root)
        root = root.resolve()

        log.info("Scanning %s (%s, %d workers)", root, "force" if force else "dry run", self.workers)
        aggregator = ResultAggregator(root, force)
        start: WorkItem = (root, classify(root, self.rules))

        if self.workers > 1:
            self._scan_parallel(start, force, aggregator)
        else:
            self._scan_sequential(start, force, aggregator)

        result = aggregator.result()
        log.info(
            "Scan of %s finished: %d matches, %d bytes, %d failures",
            root,
            result.matched_count,
            result.total_bytes,
            len(result.failures),
        )
        return result

    def _scan_sequential(self, start: WorkItem, force: bool, aggregator: ResultAggregator) -> None:
        """Process directories one at a time from an explicit stack."""
        stack: list[WorkItem] = [start]
        while stack:
            stack.extend(self._process(stack.pop(), force, aggregator))

    def _scan_parallel(self, start: WorkItem, force: bool, aggregator: ResultAggregator) -> None:
        """Process directories concurrently, submitting children as they are found."""
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            pending: set[Future[list[WorkItem]]] = {
                executor.submit(self._process, start, force, aggregator)
            }
            while pending:
                done, pending = wait(pending, return_when=FIRST_COMPLETED)
                for future in done:
                    for item in future.result():
                        pending.add(executor.submit(self._process, item, force, aggregator))

    def _process(self, item: WorkItem, force: bool, aggregator: ResultAggregator) -> list[WorkItem]:
        """Handle one work item and return the follow-up items."""
        path, rule = item
        if rule is not None:
            self._handle_match(path, rule, force, aggregator)
            return []
        return self._descend(path, aggregator)

    def _descend(self, path: Path, aggregator: ResultAggregator) -> list[WorkItem]:
        """List *path* and classify each child directory.

        Symlinks are never followed. Hidden directories are dropped unless a
        rule matches them; unmatched hidden directories are not descended into.
        """
        items: list[WorkItem] = []
        try:
            with os.scandir(path) as it:
                for entry in it:
                    try:
                        if not entry.is_dir(follow_symlinks=False):
                            continue
                    except OSError:
                        continue
                    hidden = entry.name.startswith(".")
                    if hidden and entry.name not in self.rules:
                        continue
                    child = Path(entry.path)
                    rule = classify(child, self.rules)
                    if hidden and rule is None:
                        continue
                    items.append((child, rule))
        except OSError as e:
            error = ListingError(path, e)
            log.debug("%s", error)
            aggregator.record_listing_error(error)
        return items

    def _handle_match(self, path: Path, rule: CleanRule, force: bool, aggregator: ResultAggregator) -> None:
        """Size a matched folder and count it, deleting it first when *force* is set."""
        size, file_count = dir_info(path)
        entry = MatchEntry(path=path, rule=rule, size_bytes=size, file_count=file_count)
        log.debug("Matched %s (%s): %d bytes", path, rule.folder_name, size)
        if self.on_match:
            self.on_match(entry)

        if not force:
            aggregator.record_match(entry)
            return

        try:
            remove_tree(path)
        except DeletionError as e:
            log.warning("Failed to delete %s: %s", path, e.cause)
            aggregator.record_failure(e)
            if self.on_error:
                self.on_error(entry, e)
            return

        aggregator.record_match(entry)
        if self.on_deleted:
            self.on_deleted(entry)


def scan(
    root: Path | str,
    force: bool = False,
    rules: RuleTable = DEFAULT_RULES,
    workers: int | None = None,
) -> ScanResult:
    """Scan *root* with a default-configured TreeWalker."""
    return TreeWalker(rules, workers=workers).scan(root, force=force)
