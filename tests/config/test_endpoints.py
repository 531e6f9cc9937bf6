"""Tests for the endpoint configuration record."""

from __future__ import annotations

from pathlib import Path

import pytest
import toml

from cinevault.config.endpoints import EndpointConfiguration
from cinevault.shared.errors import ApplicationError, ErrorCode
from cinevault.shared.models import CacheLevel


class TestDefaults:
    """Test cases for default values."""

    def test_with_defaults(self):
        config = EndpointConfiguration.with_defaults("abc")

        assert config.api_key == "abc"
        assert config.use_secure_connection is True
        assert config.base_url == "https://api.themoviedb.org/3"
        assert config.methods.get_movie == "movie/{0}"
        assert config.parameters.min_vote_count == "vote_count.gte"
        assert config.values.and_char == ";"
        assert config.values.or_char == "|"
        assert config.cache_level is CacheLevel.DEFAULT

    def test_restore_defaults_in_place(self):
        """Test that every modified field is reset."""
        # Given
        config = EndpointConfiguration.with_defaults("abc")
        config.api_url = "http://example.invalid"
        config.methods.get_movie = "films/{0}"
        config.values.sort_order_asc = "ASC"

        # When
        config.restore_defaults("xyz")

        # Then
        assert config == EndpointConfiguration.with_defaults("xyz")

    def test_restore_defaults_without_key(self):
        config = EndpointConfiguration.with_defaults("abc")

        config.restore_defaults()

        assert config.api_key == ""

    def test_insecure_base_url(self):
        config = EndpointConfiguration.with_defaults()
        config.use_secure_connection = False

        assert config.base_url == "http://api.themoviedb.org/3"

    def test_repr_masks_api_key(self):
        config = EndpointConfiguration.with_defaults("super-secret")

        assert "super-secret" not in repr(config)
        assert "****" in repr(config)


class TestSerialization:
    """Test cases for TOML persistence."""

    def test_round_trip_defaults(self):
        """Test that the default configuration survives a round trip."""
        config = EndpointConfiguration.with_defaults("abc")

        restored = EndpointConfiguration.deserialize(config.serialize())

        assert restored == config

    def test_round_trip_keeps_empty_strings(self):
        """Test that empty string fields are preserved, not defaulted."""
        # Given
        config = EndpointConfiguration.with_defaults()
        config.api_key = ""
        config.json_date_pattern = ""
        config.methods.jobs = ""
        config.parameters.language = ""
        config.values.or_char = ""

        # When
        restored = EndpointConfiguration.deserialize(config.serialize())

        # Then
        assert restored == config
        assert restored.methods.jobs == ""
        assert restored.values.or_char == ""

    def test_round_trip_custom_values(self):
        config = EndpointConfiguration.with_defaults("k")
        config.timeout = 2.5
        config.cache_level = CacheLevel.NO_CACHE_NO_STORE
        config.values.and_char = ","

        restored = EndpointConfiguration.deserialize(config.serialize())

        assert restored.timeout == 2.5
        assert restored.cache_level is CacheLevel.NO_CACHE_NO_STORE
        assert restored.values.and_char == ","

    def test_missing_field_is_rejected(self):
        """Test that a document lacking a field fails at load time."""
        document = toml.loads(EndpointConfiguration.with_defaults().serialize())
        del document["methods"]["get_movie"]

        with pytest.raises(ApplicationError) as exc_info:
            EndpointConfiguration.deserialize(toml.dumps(document))

        assert exc_info.value.code == ErrorCode.CONFIG_ERROR

    def test_invalid_toml_is_rejected(self):
        with pytest.raises(ApplicationError):
            EndpointConfiguration.deserialize("api_key = [unterminated")

    def test_file_round_trip(self, tmp_path: Path):
        config = EndpointConfiguration.with_defaults("k")
        path = tmp_path / "nested" / "endpoints.toml"

        config.to_toml_file(path)

        assert EndpointConfiguration.from_toml_file(path) == config

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            EndpointConfiguration.from_toml_file(tmp_path / "nope.toml")
