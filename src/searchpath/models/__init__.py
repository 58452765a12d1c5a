"""
Data models for the searchpath package.

This module contains the location, lookup result and settings structures.
"""

from .location import FileType, LocalDirectory, RemoteLocator, Location, FoundEntry
from .settings import SearchPathSettings

__all__ = [
    'FileType',
    'LocalDirectory',
    'RemoteLocator',
    'Location',
    'FoundEntry',
    'SearchPathSettings'
]
