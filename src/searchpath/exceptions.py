"""Exception classes for the searchpath package."""

from typing import List, Optional


class SearchPathError(Exception):
    """Base exception for all searchpath errors."""
    pass


class InvalidEntryError(SearchPathError):
    """
    Raised when an entry cannot be added to, or kept in, a search path.

    Attributes:
        entry: The first offending entry
        entries: Every offending entry, in search order
    """

    def __init__(self, message: str, entry: Optional[str] = None, entries: Optional[List[str]] = None):
        super().__init__(message)
        self.entries = list(entries) if entries else ([entry] if entry is not None else [])
        self.entry = entry if entry is not None else (self.entries[0] if self.entries else None)


class MalformedURLError(InvalidEntryError):
    """Raised when a string is not a syntactically valid URL."""
    pass


class NotFoundError(SearchPathError):
    """Raised when a lookup exhausts every entry without a match."""

    def __init__(self, message: str, filename: str, file_type=None, search_path: Optional[str] = None):
        super().__init__(message)
        self.filename = filename
        self.file_type = file_type
        self.search_path = search_path


class FeatureDisabledError(SearchPathError):
    """Raised when a remote locator operation is used with URLs disabled."""
    pass


class ConfigurationError(SearchPathError):
    """Raised when settings parsing or validation fails."""
    pass
