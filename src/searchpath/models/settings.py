"""
Settings data models for the searchpath package.

This module defines the options that shape how search paths are built:
the separator used to split environment values, whether remote URL
locators are enabled, and how invalid environment entries are handled.
"""

import os
from typing import Dict, List, Any
from pydantic import BaseModel, Field, field_validator


DEFAULT_SEPARATOR = os.pathsep


class SearchPathSettings(BaseModel):
    """
    Options for building and using search paths.

    Attributes:
        separator: Single character used to split environment variable values
        enable_urls: Whether remote URL locators may be stored
        remote_schemes: URL schemes that `add` treats as remote locators
        skip_invalid_env_entries: Skip invalid environment entries instead of
            failing the whole operation
    """

    separator: str = Field(DEFAULT_SEPARATOR, description="Environment value separator")
    enable_urls: bool = Field(False, description="Allow remote URL locators")
    remote_schemes: List[str] = Field(
        default_factory=lambda: ["http", "https"],
        description="URL schemes treated as remote locators"
    )
    skip_invalid_env_entries: bool = Field(True, description="Skip invalid environment entries")

    @field_validator('separator')
    @classmethod
    def validate_separator(cls, v: str) -> str:
        """Ensure the separator is exactly one character."""
        return validate_separator(v)

    @field_validator('remote_schemes', mode='before')
    @classmethod
    def validate_remote_schemes(cls, v) -> List[str]:
        """Normalize schemes to lowercase without a trailing '://'."""
        if isinstance(v, str):
            v = [v]

        normalized = []
        for scheme in v:
            if not isinstance(scheme, str) or not scheme.strip():
                raise ValueError(f"Invalid URL scheme: {scheme!r}")
            scheme = scheme.strip().lower()
            if scheme.endswith('://'):
                scheme = scheme[:-3]
            if scheme == 'file':
                raise ValueError("The 'file' scheme always names a local directory")
            if scheme not in normalized:
                normalized.append(scheme)

        if not normalized:
            raise ValueError("At least one remote URL scheme must be specified")

        return normalized

    def is_remote_scheme(self, scheme: str) -> bool:
        return scheme.lower() in self.remote_schemes

    def validate_settings(self) -> List[str]:
        """
        Check for settings that are valid but probably unintended.

        Returns:
            List of warning messages
        """
        warnings = []

        if self.separator != DEFAULT_SEPARATOR:
            warnings.append(
                f"Separator '{self.separator}' differs from the platform default '{DEFAULT_SEPARATOR}'"
            )

        if self.enable_urls and self.separator == ':':
            warnings.append("URLs contain ':' and cannot be listed in a ':'-separated environment variable")

        if not self.enable_urls and self.remote_schemes != ["http", "https"]:
            warnings.append("remote_schemes has no effect while enable_urls is false")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchPathSettings':
        """Create settings from dictionary representation."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        parts = [f"Separator: '{self.separator}'"]
        parts.append(f"URLs: {'enabled' if self.enable_urls else 'disabled'}")
        parts.append(f"Skip invalid env entries: {self.skip_invalid_env_entries}")
        return " | ".join(parts)


def validate_separator(separator: str) -> str:
    """
    Check that a separator is a single character.

    Raises:
        ValueError: If the separator is empty or longer than one character
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"Separator must be a single character, got {separator!r}")
    return separator
