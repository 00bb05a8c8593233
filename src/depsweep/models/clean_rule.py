"""Clean rule dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CleanRule:
    """A folder name that is safe to remove when its project indicator is present.

    ``project_indicator`` is either ``None`` (the folder name alone is enough),
    an exact filename expected next to the folder, or a ``*.ext`` glob matched
    against the files next to the folder.
    """

    folder_name: str
    project_indicator: str | None
    description: str

