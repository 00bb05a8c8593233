"""depsweep data models."""

from depsweep.models.clean_rule import CleanRule
from depsweep.models.scan_result import MatchEntry, ScanResult

__all__ = [
    "CleanRule",
    "MatchEntry",
    "ScanResult",
]
