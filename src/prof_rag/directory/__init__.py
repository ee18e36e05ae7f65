"""Professor directory: raw sources and name-variant expansion."""

from prof_rag.directory.types import DirectoryPage, DirectoryRecord
from prof_rag.directory.sources import (
    DirectorySource,
    PineconeDirectorySource,
    StaticDirectorySource,
)
from prof_rag.directory.expander import (
    DIRECTORY_CACHE_KEY,
    DirectoryExpander,
    expand_entries,
    expand_entry,
)
from prof_rag.directory.faculty import (
    FACULTY,
    SUBJECTS,
    faculty_entries,
    get_professor_suggestions,
    professor_id,
)

__all__ = [
    # Types
    "DirectoryPage",
    "DirectoryRecord",
    # Sources
    "DirectorySource",
    "PineconeDirectorySource",
    "StaticDirectorySource",
    # Expansion
    "DIRECTORY_CACHE_KEY",
    "DirectoryExpander",
    "expand_entries",
    "expand_entry",
    # Seed faculty
    "FACULTY",
    "SUBJECTS",
    "faculty_entries",
    "get_professor_suggestions",
    "professor_id",
]
