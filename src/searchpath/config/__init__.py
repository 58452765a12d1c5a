"""
Settings management package for searchpath.

This package provides settings file parsing, validation and templates.
"""

from .parser import (
    SettingsParser,
    SettingsParseResult,
    load_settings,
    validate_settings_file,
    create_settings_template
)
from ..exceptions import ConfigurationError

__all__ = [
    'SettingsParser',
    'SettingsParseResult',
    'ConfigurationError',
    'load_settings',
    'validate_settings_file',
    'create_settings_template'
]
