"""Rule table of cleanable folders."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from depsweep.models.clean_rule import CleanRule

log = logging.getLogger(__name__)


class RuleTable:
    """Ordered, immutable collection of clean rules.

    Built once and shared by every worker of a scan. Several rules may use
    the same folder name; they are tried in table order.
    """

    def __init__(self, rules: Iterable[CleanRule]) -> None:
        self._rules: tuple[CleanRule, ...] = tuple(rules)
        by_name: dict[str, list[CleanRule]] = {}
        for rule in self._rules:
            by_name.setdefault(rule.folder_name, []).append(rule)
        self._by_name: dict[str, tuple[CleanRule, ...]] = {
            name: tuple(rules) for name, rules in by_name.items()
        }
        log.debug("Built rule table with %d rules", len(self._rules))

    @property
    def names(self) -> frozenset[str]:
        """All folder names that some rule can match."""
        return frozenset(self._by_name)

    def rules_for(self, folder_name: str) -> tuple[CleanRule, ...]:
        """Rules whose folder name equals *folder_name*, in table order."""
        return self._by_name.get(folder_name, ())

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[CleanRule]:
        return iter(self._rules)

    def __contains__(self, folder_name: object) -> bool:
        return folder_name in self._by_name


DEFAULT_RULES = RuleTable(
    [
        CleanRule("node_modules", "package.json", "Node.js dependencies"),
        CleanRule("target", "Cargo.toml", "Rust build artifacts"),
        CleanRule("vendor", "composer.json", "PHP dependencies"),
        CleanRule("venv", None, "Python virtual environment"),
        CleanRule(".venv", None, "Python virtual environment"),
        CleanRule("bin", "*.csproj", ".NET build output"),
        CleanRule("obj", "*.csproj", ".NET intermediate output"),
    ]
)
