"""
Location data models for the searchpath package.

A search path holds an ordered list of locations. Each location is either a
local directory or, when the remote locator feature is enabled, a URL that
files are resolved against without any network access.
"""

from typing import Annotated, Any, Dict, Literal, Optional, Union
from pathlib import Path
from enum import Enum
from pydantic import BaseModel, Field, AnyUrl, TypeAdapter, field_validator


_URL_ADAPTER = TypeAdapter(AnyUrl)


class FileType(Enum):
    """Kinds of entry that a lookup can match."""
    FILE = "file"
    DIRECTORY = "directory"
    RESOURCE = "resource"
    ANY = "any"


class LocalDirectory(BaseModel):
    """
    A directory on the local filesystem.

    Attributes:
        kind: Discriminator, always "directory"
        path: Absolute, user-expanded and resolved directory path
    """

    kind: Literal["directory"] = "directory"
    path: Path = Field(..., description="Normalized directory path")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: Path) -> Path:
        """Expand the user directory and resolve against the working directory."""
        return normalize_path(v)

    @property
    def value(self) -> str:
        """Normalized string form used for comparison and display."""
        return str(self.path)

    def __str__(self) -> str:
        return self.value


class RemoteLocator(BaseModel):
    """
    A remote location identified by URL.

    Only the syntax of the URL is checked; the resource is never contacted.
    """

    kind: Literal["url"] = "url"
    url: AnyUrl = Field(..., description="Base URL files are resolved against")

    @property
    def value(self) -> str:
        return str(self.url)

    def join(self, filename: str) -> str:
        """Build the locator for a file under this URL."""
        return f"{self.value.rstrip('/')}/{filename}"

    def __str__(self) -> str:
        return self.value


Location = Annotated[Union[LocalDirectory, RemoteLocator], Field(discriminator="kind")]


class FoundEntry(BaseModel):
    """
    Result of a typed lookup.

    Attributes:
        file_type: The kind of entry that matched (never ANY)
        location: Full filesystem path or URL of the match
    """

    file_type: FileType
    location: str

    def is_remote(self) -> bool:
        return self.file_type == FileType.RESOURCE

    def as_path(self) -> Optional[Path]:
        """Return the match as a Path, or None for remote resources."""
        if self.is_remote():
            return None
        return Path(self.location)

    def to_dict(self) -> Dict[str, Any]:
        data = self.model_dump()
        data['file_type'] = self.file_type.value
        return data

    def __str__(self) -> str:
        return f"{self.file_type.value}: {self.location}"


def normalize_path(path: Union[str, Path]) -> Path:
    """Normalize a directory path the way entries are stored."""
    return Path(path).expanduser().resolve()


def parse_url(url: str) -> AnyUrl:
    """
    Parse a URL string.

    Raises:
        pydantic.ValidationError: If the string is not a syntactically valid URL
    """
    return _URL_ADAPTER.validate_python(url)
