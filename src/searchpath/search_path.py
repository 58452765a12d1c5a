"""
Search path collections for the searchpath package.

This module provides the SearchPath class: an ordered, de-duplicated list of
directories (and optionally remote URL locators) built from an environment
variable such as PATH or LD_LIBRARY_PATH, or incrementally, and searched in
order to resolve a named file, directory or resource.
"""

import os
import logging
from pathlib import Path, PurePath
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union
from urllib.parse import unquote
from pydantic import AnyUrl, ValidationError

from .exceptions import (
    FeatureDisabledError,
    InvalidEntryError,
    MalformedURLError,
    NotFoundError,
)
from .models.location import (
    FileType,
    FoundEntry,
    LocalDirectory,
    Location,
    RemoteLocator,
    normalize_path,
    parse_url,
)
from .models.settings import SearchPathSettings, validate_separator


logger = logging.getLogger(__name__)


class SearchPath:
    """
    Ordered collection of locations searched in sequence.

    Entries keep their insertion order and are unique by normalized value.
    They are only ever appended, never removed. A SearchPath has no internal
    locking; callers sharing one between threads must synchronize access.
    Search paths compare by value but are mutable, so they are unhashable.
    """

    def __init__(self, name: str, separator: Optional[str] = None,
                 settings: Optional[SearchPathSettings] = None):
        """
        Create an empty search path.

        Args:
            name: Label for the search path, usually an environment variable name
            separator: Character used to split environment values (defaults to
                the settings separator, which defaults to os.pathsep)
            settings: Options controlling URL support and environment parsing

        Raises:
            ValueError: If the separator is not a single character
        """
        self._settings = settings or SearchPathSettings()
        self._name = name
        self._separator = validate_separator(separator) if separator is not None else self._settings.separator
        self._entries: List[Location] = []

    @classmethod
    def from_env(cls, name: str, separator: Optional[str] = None,
                 settings: Optional[SearchPathSettings] = None) -> 'SearchPath':
        """
        Create a search path from the environment variable `name`.

        An unset or empty variable gives an empty search path.
        """
        search_path = cls(name, separator=separator, settings=settings)
        search_path.add_from_env(name)
        return search_path

    @property
    def name(self) -> str:
        return self._name

    @property
    def separator(self) -> str:
        return self._separator

    @property
    def settings(self) -> SearchPathSettings:
        return self._settings

    def directories(self) -> Tuple[Path, ...]:
        """Snapshot of the local directories, in search order."""
        return tuple(entry.path for entry in self._entries if isinstance(entry, LocalDirectory))

    def urls(self) -> Tuple[str, ...]:
        """Snapshot of the remote locators, in search order."""
        return tuple(entry.value for entry in self._entries if isinstance(entry, RemoteLocator))

    def entries(self) -> Tuple[Location, ...]:
        return tuple(self._entries)

    def add_directory(self, path: Union[str, Path]) -> bool:
        """
        Append a local directory unless it is already present.

        Args:
            path: Absolute path, or path relative to the working directory

        Returns:
            True if the directory was appended, False if it was already present

        Raises:
            InvalidEntryError: If the path does not exist, is not a directory
                or is not readable
        """
        return self._append(self._check_directory(path))

    def add_url(self, url: Union[str, AnyUrl]) -> bool:
        """
        Append a remote locator unless it is already present.

        Only URL syntax is checked; the resource is not contacted.

        Raises:
            FeatureDisabledError: If URL support is disabled in settings
            MalformedURLError: If the string is not a valid URL
        """
        if not self._settings.enable_urls:
            raise FeatureDisabledError(
                f"Cannot add URL '{url}' to search path '{self._name}': URL support is disabled"
            )
        return self._append(RemoteLocator(url=self._parse_url(str(url))))

    def add(self, entry: str) -> bool:
        """
        Append an entry, deciding from its form whether it is a URL or a directory.

        With URL support enabled, strings whose scheme is one of the configured
        remote schemes become remote locators and 'file' URLs name a local
        directory. Everything else is treated as a directory path.

        Raises:
            InvalidEntryError: If a directory entry fails validation
        """
        return self._append(self._resolve_entry(entry))

    def add_from_env(self, name: str, separator: Optional[str] = None,
                     strict: Optional[bool] = None) -> int:
        """
        Append every entry listed in the environment variable `name`.

        In the default lenient mode invalid entries are skipped and the rest
        are appended. In strict mode every entry is checked before anything
        is appended, and the first invalid entry aborts the whole operation.

        Args:
            name: Environment variable to read
            separator: Separator for this variable (defaults to the search path's)
            strict: Override the skip_invalid_env_entries setting

        Returns:
            Number of entries appended

        Raises:
            InvalidEntryError: In strict mode, for the first invalid entry
        """
        separator = validate_separator(separator) if separator is not None else self._separator
        if strict is None:
            strict = not self._settings.skip_invalid_env_entries

        tokens = split_env_value(os.environ.get(name, ''), separator)
        if not tokens:
            logger.debug(f"Environment variable {name} is unset or empty")
            return 0

        if strict:
            locations = [self._resolve_entry(token) for token in tokens]
            return sum(1 for location in locations if self._append(location))

        added = 0
        for token in tokens:
            try:
                if self.add(token):
                    added += 1
            except InvalidEntryError as e:
                logger.debug(f"Skipping entry from {name}: {e}")
        return added

    def contains(self, entry: Union[str, Path]) -> bool:
        """Check whether an entry equal to the normalized value is present."""
        if not str(entry).strip():
            return False

        candidates = set()
        try:
            candidates.add(str(normalize_path(entry)))
        except (RuntimeError, OSError, ValueError):
            pass

        if self._settings.enable_urls and isinstance(entry, str):
            try:
                candidates.add(str(parse_url(entry)))
            except ValidationError:
                pass

        return any(location.value in candidates for location in self._entries)

    def find(self, filename: str) -> Path:
        """
        Find the first regular file called `filename` in the local directories.

        Raises:
            NotFoundError: If no directory contains such a file
        """
        return self.find_type(filename, FileType.FILE).as_path()

    def find_type(self, filename: str, file_type: Union[FileType, str] = FileType.ANY) -> FoundEntry:
        """
        Find the first entry of the requested kind called `filename`.

        Local directories are searched in order for FILE and DIRECTORY. For
        RESOURCE the first remote locator yields `url + "/" + filename`
        without checking that it is reachable. ANY tries the local
        directories first, then remote locators. Names must stay inside each
        entry: absolute names and names with ".." components never match.

        Raises:
            NotFoundError: If nothing of the requested kind matches
        """
        file_type = FileType(file_type)

        if is_entry_relative(filename):
            if file_type in (FileType.FILE, FileType.DIRECTORY, FileType.ANY):
                for directory in self.directories():
                    candidate = directory / filename
                    if file_type in (FileType.FILE, FileType.ANY) and candidate.is_file():
                        return FoundEntry(file_type=FileType.FILE, location=str(candidate))
                    if file_type in (FileType.DIRECTORY, FileType.ANY) and candidate.is_dir():
                        return FoundEntry(file_type=FileType.DIRECTORY, location=str(candidate))

            if file_type in (FileType.RESOURCE, FileType.ANY):
                for entry in self._entries:
                    if isinstance(entry, RemoteLocator):
                        return FoundEntry(file_type=FileType.RESOURCE, location=entry.join(filename))

        raise NotFoundError(
            f"Could not find {file_type.value} '{filename}' in search path '{self._name}'",
            filename=filename,
            file_type=file_type,
            search_path=self._name
        )

    def validate(self) -> None:
        """
        Check that every local directory still exists and is readable.

        All entries are checked; the error names every one that failed.

        Raises:
            InvalidEntryError: If any directory is missing or unreadable
        """
        problems = []
        for directory in self.directories():
            problem = directory_problem(directory)
            if problem:
                problems.append((str(directory), problem))

        if problems:
            details = "; ".join(f"{entry} ({problem})" for entry, problem in problems)
            raise InvalidEntryError(
                f"Search path '{self._name}' has invalid entries: {details}",
                entries=[entry for entry, _ in problems]
            )

        logger.debug(f"Validated {len(self.directories())} directories in search path '{self._name}'")

    def to_env_value(self, separator: Optional[str] = None) -> str:
        """Join the entries into an environment-variable style string."""
        separator = validate_separator(separator) if separator is not None else self._separator
        return separator.join(entry.value for entry in self._entries)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the search path to a dictionary representation."""
        return {
            'name': self._name,
            'separator': self._separator,
            'entries': [entry.model_dump(mode='json') for entry in self._entries]
        }

    def _check_directory(self, path: Union[str, Path]) -> LocalDirectory:
        if not str(path).strip():
            raise InvalidEntryError("Directory path cannot be empty", entry=str(path))

        try:
            directory = normalize_path(path)
        except (RuntimeError, OSError, ValueError) as e:
            raise InvalidEntryError(f"Invalid directory '{path}': {e}", entry=str(path)) from e

        problem = directory_problem(directory)
        if problem:
            raise InvalidEntryError(f"Invalid directory '{path}': {problem}", entry=str(path))

        return LocalDirectory(path=directory)

    def _parse_url(self, url: str) -> AnyUrl:
        try:
            return parse_url(url)
        except ValidationError as e:
            reason = e.errors()[0]['msg'] if e.errors() else str(e)
            raise MalformedURLError(f"Malformed URL '{url}': {reason}", entry=url) from e

    def _resolve_entry(self, entry: str) -> Location:
        """Turn an entry string into a validated location without storing it."""
        if self._settings.enable_urls:
            try:
                url = parse_url(entry)
            except ValidationError:
                url = None

            if url is not None:
                if self._settings.is_remote_scheme(url.scheme):
                    return RemoteLocator(url=url)
                if url.scheme == 'file':
                    return self._check_directory(unquote(url.path or ''))

        return self._check_directory(entry)

    def _append(self, location: Location) -> bool:
        if any(existing.value == location.value for existing in self._entries):
            logger.debug(f"Entry already in search path '{self._name}': {location.value}")
            return False

        self._entries.append(location)
        logger.debug(f"Added {location.kind} to search path '{self._name}': {location.value}")
        return True

    def __contains__(self, entry) -> bool:
        return self.contains(entry)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SearchPath):
            return NotImplemented
        return (
            self._name == other._name
            and self._separator == other._separator
            and self._entries == other._entries
        )

    def __str__(self) -> str:
        """Entries joined by the platform list separator, for display only."""
        return os.pathsep.join(entry.value for entry in self._entries)

    def __repr__(self) -> str:
        entries = ", ".join(repr(entry.value) for entry in self._entries)
        return f"SearchPath(name={self._name!r}, separator={self._separator!r}, entries=[{entries}])"


def split_env_value(value: str, separator: str) -> List[str]:
    """Split an environment value into its non-empty entries."""
    if not value:
        return []
    return [token for token in value.split(separator) if token.strip()]


def directory_problem(path: Path) -> Optional[str]:
    """
    Describe why a path cannot be used as a search directory.

    Returns:
        A short reason, or None if the path is a readable directory
    """
    if not path.exists():
        return "does not exist"
    if not path.is_dir():
        return "not a directory"
    if not os.access(path, os.R_OK | os.X_OK):
        return "not readable or not searchable"
    return None


def is_entry_relative(filename: str) -> bool:
    """Check that a filename names something inside a search directory."""
    if not filename or not filename.strip():
        return False
    name = PurePath(filename)
    return not name.anchor and '..' not in name.parts


def create(name: str, separator: Optional[str] = None,
           settings: Optional[SearchPathSettings] = None) -> SearchPath:
    """
    Convenience function to create a search path from an environment variable.

    Args:
        name: Environment variable to read; also the search path's name
        separator: Separator for the variable (defaults to os.pathsep)
        settings: Options controlling URL support and environment parsing

    Returns:
        SearchPath populated from the variable, empty if it is unset
    """
    return SearchPath.from_env(name, separator=separator, settings=settings)
