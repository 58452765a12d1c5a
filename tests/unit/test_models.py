"""
Unit tests for location and settings data models.
"""

import os
from pathlib import Path
import pytest
from pydantic import TypeAdapter, ValidationError

from searchpath.models import (
    FileType,
    FoundEntry,
    LocalDirectory,
    Location,
    RemoteLocator,
    SearchPathSettings,
)
from searchpath.models.location import normalize_path, parse_url


class TestLocalDirectory:
    """Test cases for LocalDirectory model."""

    def test_path_is_normalized(self, tmp_path):
        directory = LocalDirectory(path=tmp_path / "x" / "..")
        assert directory.path == tmp_path.resolve()
        assert directory.value == str(tmp_path.resolve())
        assert directory.kind == "directory"

    def test_user_directory_expanded(self):
        directory = LocalDirectory(path="~")
        assert directory.path == Path.home().resolve()

    def test_str(self, tmp_path):
        assert str(LocalDirectory(path=tmp_path)) == str(tmp_path.resolve())


class TestRemoteLocator:
    """Test cases for RemoteLocator model."""

    def test_valid_url(self):
        locator = RemoteLocator(url="https://example.com/lib")
        assert locator.kind == "url"
        assert locator.value == "https://example.com/lib"

    def test_invalid_url(self):
        with pytest.raises(ValidationError):
            RemoteLocator(url="not a url")

    def test_join(self):
        assert RemoteLocator(url="https://example.com").join("a.txt") == "https://example.com/a.txt"
        assert RemoteLocator(url="https://example.com/lib/").join("a.txt") == "https://example.com/lib/a.txt"

    def test_parse_url(self):
        assert parse_url("http://example.com/x").scheme == "http"
        with pytest.raises(ValidationError):
            parse_url("relative/path")


class TestLocationUnion:
    """Test cases for the discriminated Location union."""

    def test_discriminator_selects_variant(self, tmp_path):
        adapter = TypeAdapter(Location)

        directory = adapter.validate_python({'kind': 'directory', 'path': str(tmp_path)})
        locator = adapter.validate_python({'kind': 'url', 'url': 'https://example.com/'})

        assert isinstance(directory, LocalDirectory)
        assert isinstance(locator, RemoteLocator)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            TypeAdapter(Location).validate_python({'kind': 'socket', 'path': '/tmp'})


class TestFoundEntry:
    """Test cases for FoundEntry model."""

    def test_local_entry(self, tmp_path):
        found = FoundEntry(file_type=FileType.FILE, location=str(tmp_path / "f"))
        assert not found.is_remote()
        assert found.as_path() == tmp_path / "f"
        assert str(found) == f"file: {tmp_path / 'f'}"

    def test_remote_entry(self):
        found = FoundEntry(file_type="resource", location="https://example.com/f")
        assert found.is_remote()
        assert found.as_path() is None
        assert found.to_dict() == {'file_type': 'resource', 'location': 'https://example.com/f'}


class TestSearchPathSettings:
    """Test cases for SearchPathSettings model."""

    def test_defaults(self):
        settings = SearchPathSettings()
        assert settings.separator == os.pathsep
        assert settings.enable_urls is False
        assert settings.remote_schemes == ["http", "https"]
        assert settings.skip_invalid_env_entries is True
        assert settings.validate_settings() == []

    def test_separator_must_be_single_character(self):
        with pytest.raises(ValidationError, match="single character"):
            SearchPathSettings(separator="")

        with pytest.raises(ValidationError, match="single character"):
            SearchPathSettings(separator=", ")

    def test_remote_schemes_normalized(self):
        settings = SearchPathSettings(remote_schemes=["HTTPS", "ftp://", "https"])
        assert settings.remote_schemes == ["https", "ftp"]
        assert settings.is_remote_scheme("FTP")
        assert not settings.is_remote_scheme("http")

    def test_remote_schemes_single_string(self):
        assert SearchPathSettings(remote_schemes="s3").remote_schemes == ["s3"]

    def test_remote_schemes_invalid(self):
        with pytest.raises(ValidationError):
            SearchPathSettings(remote_schemes=[])

        with pytest.raises(ValidationError, match="local directory"):
            SearchPathSettings(remote_schemes=["file"])

        with pytest.raises(ValidationError):
            SearchPathSettings(remote_schemes=[""])

    def test_warnings(self):
        other = ";" if os.pathsep == ":" else ":"
        warnings = SearchPathSettings(separator=other).validate_settings()
        assert any("differs from the platform default" in w for w in warnings)

        warnings = SearchPathSettings(separator=":", enable_urls=True).validate_settings()
        assert any("cannot be listed" in w for w in warnings)

        warnings = SearchPathSettings(remote_schemes=["ftp"]).validate_settings()
        assert any("no effect" in w for w in warnings)

    def test_dict_round_trip(self):
        settings = SearchPathSettings(separator=",", enable_urls=True)
        assert SearchPathSettings.from_dict(settings.to_dict()) == settings

    def test_str(self):
        text = str(SearchPathSettings(separator=",", enable_urls=True))
        assert "Separator: ','" in text
        assert "URLs: enabled" in text


def test_normalize_path_relative(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert normalize_path("sub") == tmp_path.resolve() / "sub"
