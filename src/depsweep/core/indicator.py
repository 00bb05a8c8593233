"""Project indicator checks for candidate folders."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from depsweep.core.rules import RuleTable
from depsweep.models.clean_rule import CleanRule

log = logging.getLogger(__name__)

_GLOB_PREFIX = "*."


def matches_indicator(parent_dir: Path, indicator: str | None) -> bool:
    """Decide whether *parent_dir* looks like the root of a known project.

    ``None`` always matches. An exact filename matches when that file exists
    directly inside *parent_dir*. A ``*.ext`` glob matches when any direct
    child has the (case-sensitive) extension ``ext``. A directory that cannot
    be listed never matches.
    """
    if indicator is None:
        return True

    if not indicator.startswith(_GLOB_PREFIX):
        return (parent_dir / indicator).exists()

    suffix = indicator[1:]
    try:
        with os.scandir(parent_dir) as it:
            for entry in it:
                if os.path.splitext(entry.name)[1] == suffix:
                    return True
    except OSError:
        log.debug("Cannot list %s for indicator %s", parent_dir, indicator)
    return False


def classify(path: Path, rules: RuleTable) -> CleanRule | None:
    """Return the first rule matching directory *path*, or None.

    Rules are looked up by ``path.name`` and their indicators are checked
    against ``path.parent``, not against *path* itself.
    """
    candidates = rules.rules_for(path.name)
    if not candidates:
        return None
    parent = path.parent
    for rule in candidates:
        if matches_indicator(parent, rule.project_indicator):
            return rule
    return None
