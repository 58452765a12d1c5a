"""
searchpath - Core Package

Ordered search paths, in the manner of PATH or LD_LIBRARY_PATH, built from
environment variables and searched in order to find files, directories and
remote resources.
"""

from .exceptions import (
    SearchPathError,
    InvalidEntryError,
    MalformedURLError,
    NotFoundError,
    FeatureDisabledError,
    ConfigurationError
)
from .models import FileType, LocalDirectory, RemoteLocator, Location, FoundEntry, SearchPathSettings
from .search_path import SearchPath, create

__version__ = "0.1.0"

__all__ = [
    'SearchPath',
    'create',
    'FileType',
    'LocalDirectory',
    'RemoteLocator',
    'Location',
    'FoundEntry',
    'SearchPathSettings',
    'SearchPathError',
    'InvalidEntryError',
    'MalformedURLError',
    'NotFoundError',
    'FeatureDisabledError',
    'ConfigurationError'
]
