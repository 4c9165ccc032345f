"""
Key-File Selector - Picks the documentation-relevant files of a listing.
"""

from typing import Iterable, List

from repodoc.models.schemas import FileEntry


# Canonical filenames, compared against the lowercased entry name
KEY_FILE_NAMES = frozenset({
    "package.json",
    "readme.md",
    "requirements.txt",
    "setup.py",
    "dockerfile",
    "docker-compose.yml",
    ".gitignore",
    "license",
    "contributing.md",
    "changelog.md",
})

# Documentation, structured-data and YAML configuration
KEY_FILE_EXTENSIONS = (".md", ".json", ".yml", ".yaml")

DEFAULT_MAX_KEY_FILES = 10


def is_key_file(entry: FileEntry) -> bool:
    """True when ``entry`` is a file on the allow-list."""
    if entry.type != "file":
        return False
    return (
        entry.name.lower() in KEY_FILE_NAMES
        or entry.name.endswith(KEY_FILE_EXTENSIONS)
    )


def select_key_files(
    listing: Iterable[FileEntry],
    limit: int = DEFAULT_MAX_KEY_FILES,
) -> List[FileEntry]:
    """
    Filter a contents listing down to at most ``limit`` key files.

    Listing order is kept; nothing is re-sorted.
    """
    selected: List[FileEntry] = []
    if limit <= 0:
        return selected
    for entry in listing:
        if is_key_file(entry):
            selected.append(entry)
            if len(selected) >= limit:
                break
    return selected
