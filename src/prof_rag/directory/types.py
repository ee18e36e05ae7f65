"""Types shared by directory sources and the expander."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DirectoryRecord:
    """One searchable name variant of a professor.

    Several records share the same ``id``: the expander emits one per
    distinct spelling of the name. Only ``full_name`` differs between them.
    """

    id: str
    full_name: str
    normalized_name: str
    simplified_name: str
    department: str = ""
    subject: str = ""


@dataclass
class DirectoryPage:
    """One page of raw directory entries.

    Entries look like ``{"id": ..., "metadata": {"name": ..., "department":
    ..., "subject": ...}}``. ``next_token`` is None on the last page.
    """

    entries: list[dict[str, Any]] = field(default_factory=list)
    next_token: str | None = None
