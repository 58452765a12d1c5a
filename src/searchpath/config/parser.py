"""
YAML settings parser for the searchpath package.

This module loads, parses and validates YAML settings files. It handles
settings file discovery, falls back to defaults when no file is found, and
reports configuration problems as ConfigurationError.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass
from pydantic import ValidationError

from ..exceptions import ConfigurationError
from ..models.settings import SearchPathSettings


logger = logging.getLogger(__name__)


@dataclass
class SettingsParseResult:
    """
    Result of a settings parsing operation.

    Attributes:
        settings: The parsed and validated settings
        warnings: List of non-fatal warnings
        config_path: Path to the settings file used
        is_default: Whether default settings were used
    """
    settings: SearchPathSettings
    warnings: List[str]
    config_path: Optional[Path]
    is_default: bool


class SettingsParser:
    """
    YAML settings parser with validation and error handling.

    Loads settings files, validates their contents and converts them to
    SearchPathSettings objects.
    """

    DEFAULT_CONFIG_NAMES = [
        '.searchpath.yaml',
        '.searchpath.yml',
        'searchpath.yaml',
        'searchpath.yml'
    ]

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the settings parser.

        Args:
            strict_mode: If True, treat warnings as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_settings(self, config_path: Optional[Union[str, Path]] = None) -> SettingsParseResult:
        """
        Load and parse settings from file or use defaults.

        Args:
            config_path: Path to settings file. If None, searches default locations.

        Returns:
            SettingsParseResult containing parsed settings and metadata

        Raises:
            ConfigurationError: If settings are invalid or the file cannot be read
        """
        if config_path:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationError(f"Settings file not found: {config_path}")

            config_data = self._load_yaml_file(config_path)
            is_default = False
        else:
            config_path, config_data = self._find_and_load_settings()
            is_default = config_data is None
            if is_default:
                config_data = {}

        settings = self._validate_settings_data(config_data)

        warnings = settings.validate_settings()
        if is_default:
            warnings.append("No settings file found, using default settings")

        if self.strict_mode and warnings:
            raise ConfigurationError(f"Settings warnings in strict mode: {'; '.join(warnings)}")

        self.logger.info(f"Settings loaded from {config_path or 'defaults'}")

        return SettingsParseResult(
            settings=settings,
            warnings=warnings,
            config_path=config_path,
            is_default=is_default
        )

    def _find_and_load_settings(self) -> tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """
        Find and load a settings file from the default locations.

        Returns:
            Tuple of (config_path, config_data) or (None, None) if not found
        """
        search_dirs = [
            Path.cwd(),
            Path.home(),
            Path.home() / '.config' / 'searchpath',
        ]

        for search_dir in search_dirs:
            for config_name in self.DEFAULT_CONFIG_NAMES:
                config_file = search_dir / config_name
                if config_file.is_file():
                    try:
                        config_data = self._load_yaml_file(config_file)
                        self.logger.info(f"Found settings file: {config_file}")
                        return config_file, config_data
                    except ConfigurationError as e:
                        self.logger.warning(f"Failed to load {config_file}: {e}")
                        continue

        self.logger.info("No settings file found, using defaults")
        return None, None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse a YAML file.

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Cannot read settings file {file_path}: {e}") from e

        if not content.strip():
            self.logger.warning(f"Settings file is empty: {file_path}")
            return {}

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e

        if data is None:
            return {}

        if not isinstance(data, dict):
            raise ConfigurationError(f"Settings file must contain a YAML object, got {type(data).__name__}")

        return data

    def _validate_settings_data(self, config_data: Dict[str, Any]) -> SearchPathSettings:
        """
        Validate raw settings data.

        Raises:
            ConfigurationError: If the data has unknown keys or invalid values
        """
        unknown = sorted(set(config_data) - set(SearchPathSettings.model_fields))
        if unknown:
            raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")

        try:
            return SearchPathSettings.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Settings validation failed: {e}") from e

    def save_settings(self, settings: SearchPathSettings, output_path: Union[str, Path]) -> None:
        """
        Save settings to a YAML file.

        Raises:
            ConfigurationError: If the file cannot be written
        """
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(self._generate_yaml_with_comments(settings.to_dict()))
        except OSError as e:
            raise ConfigurationError(f"Cannot write settings file {output_path}: {e}") from e

        self.logger.info(f"Settings saved to {output_path}")

    def _generate_yaml_with_comments(self, settings_dict: Dict[str, Any]) -> str:
        lines = [
            "# searchpath settings",
            "",
        ]

        sections = [
            ("separator", "Character separating entries in environment variables"),
            ("enable_urls", "Allow remote URL locators in search paths"),
            ("remote_schemes", "URL schemes treated as remote locators"),
            ("skip_invalid_env_entries", "Skip invalid environment entries instead of failing"),
        ]

        for key, comment in sections:
            if key in settings_dict:
                lines.append(f"# {comment}")
                lines.append(yaml.safe_dump({key: settings_dict[key]}, default_flow_style=False,
                                            sort_keys=False).rstrip())
                lines.append("")

        return "\n".join(lines)

    def validate_settings_file(self, config_path: Union[str, Path]) -> List[str]:
        """
        Validate a settings file.

        Returns:
            List of validation errors (empty if valid)
        """
        config_path = Path(config_path)
        if not config_path.exists():
            return [f"Settings file not found: {config_path}"]

        try:
            self._validate_settings_data(self._load_yaml_file(config_path))
        except ConfigurationError as e:
            return [str(e)]

        return []

    def get_settings_template(self) -> str:
        """Get a template settings file with every option and its default."""
        return self._generate_yaml_with_comments(SearchPathSettings().to_dict())


def load_settings(config_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> SettingsParseResult:
    """
    Convenience function to load settings.

    Raises:
        ConfigurationError: If settings are invalid
    """
    parser = SettingsParser(strict_mode=strict_mode)
    return parser.load_settings(config_path)


def validate_settings_file(config_path: Union[str, Path]) -> List[str]:
    """Convenience function to validate a settings file."""
    parser = SettingsParser()
    return parser.validate_settings_file(config_path)


def create_settings_template(output_path: Union[str, Path]) -> None:
    """
    Create a template settings file.

    Raises:
        ConfigurationError: If the template cannot be written
    """
    parser = SettingsParser()
    template_content = parser.get_settings_template()

    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(template_content)
    except OSError as e:
        raise ConfigurationError(f"Cannot create template file {output_path}: {e}") from e
