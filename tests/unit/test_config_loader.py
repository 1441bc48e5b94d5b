"""Unit tests for application configuration loading.

These tests verify:
- Loading valid configuration files and defaults
- Error types for missing files, bad JSON and schema violations
- Share origin and path validation
"""

from pathlib import Path

import pytest

from everwood.application import ConfigError, load_config, load_config_from_dict
from everwood.application.config import EverwoodConfiguration

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


class TestLoadConfig:
    """Tests for load_config."""

    def test_valid_config(self) -> None:
        config = load_config(FIXTURES_PATH / "valid_app_config.json")
        assert config.schema_version == "1.0"
        assert config.share.origin == "https://everwood.example.com"
        assert config.share.path == "/order"
        assert config.logging.level == "INFO"

    def test_file_not_found(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "nonexistent.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "not found" in str(exc_info.value)

    def test_invalid_json(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "invalid_json.json")
        assert exc_info.value.error_type == "json_parse"
        assert exc_info.value.details[0]["line"] > 0

    def test_unknown_field(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "unknown_field.json")
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "share.host"

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(FIXTURES_PATH / "unsupported_version.json")
        assert exc_info.value.error_type == "validation"
        assert "Unsupported schema version" in str(exc_info.value)

    def test_directory_is_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.error_type == "file_read_error"


class TestLoadConfigFromDict:
    """Tests for load_config_from_dict and schema defaults."""

    def test_empty_dict_uses_defaults(self) -> None:
        config = load_config_from_dict({})
        assert config == EverwoodConfiguration()
        assert config.share.origin == ""
        assert config.share.path == "/order"
        assert config.logging.level == "WARNING"
        assert config.logging.format == "text"

    def test_origin_requires_scheme(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"share": {"origin": "everwood.example.com"}})
        assert exc_info.value.details[0]["path"] == "share.origin"

    def test_path_requires_leading_slash(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"share": {"path": "order"}})
        assert exc_info.value.details[0]["path"] == "share.path"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"logging": {"level": "LOUD"}})
        assert exc_info.value.error_type == "validation"
        assert exc_info.value.path is None
