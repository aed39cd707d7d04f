"""Tests for errchain configuration."""

import logging

import pytest

from errchain import (
    CAUSE_ONLY_CONFIG,
    DEFAULT_CONFIG,
    ErrChainError,
    InvalidConfigError,
    TraversalConfig,
)


class TestTraversalConfig:
    """Test TraversalConfig dataclass."""

    def test_default_values(self):
        """Test default configuration values."""
        config = TraversalConfig()
        assert config.follow_context is True
        assert config.max_depth == 1000

    def test_presets(self):
        """Test preset configurations."""
        assert DEFAULT_CONFIG == TraversalConfig()
        assert CAUSE_ONLY_CONFIG.follow_context is False
        assert CAUSE_ONLY_CONFIG.max_depth == DEFAULT_CONFIG.max_depth

    @pytest.mark.parametrize("max_depth", [0, -1])
    def test_max_depth_too_small(self, max_depth):
        """Test that max_depth below 1 is rejected."""
        with pytest.raises(InvalidConfigError) as exc_info:
            TraversalConfig(max_depth=max_depth)
        assert exc_info.value.field == "max_depth"

    @pytest.mark.parametrize("max_depth", ["10", 1.5, True])
    def test_max_depth_wrong_type(self, max_depth):
        """Test that non-int max_depth is rejected."""
        with pytest.raises(InvalidConfigError, match="max_depth"):
            TraversalConfig(max_depth=max_depth)

    def test_follow_context_wrong_type(self):
        """Test that non-bool follow_context is rejected."""
        with pytest.raises(InvalidConfigError, match="follow_context"):
            TraversalConfig(follow_context="yes")

    def test_invalid_config_is_errchain_error(self):
        """Test exception hierarchy."""
        with pytest.raises(ErrChainError):
            TraversalConfig(max_depth=0)

    def test_frozen(self):
        """Test that configs cannot be mutated."""
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.max_depth = 5

    def test_with_overrides(self):
        """Test with_overrides returns a new validated config."""
        config = DEFAULT_CONFIG.with_overrides(max_depth=10)
        assert config.max_depth == 10
        assert config.follow_context is True
        assert DEFAULT_CONFIG.max_depth == 1000

        with pytest.raises(InvalidConfigError):
            DEFAULT_CONFIG.with_overrides(max_depth=0)


class TestConfigLoading:
    """Test dict and YAML loading."""

    def test_to_dict(self):
        """Test serialization to dict."""
        assert TraversalConfig(follow_context=False, max_depth=5).to_dict() == {
            "follow_context": False,
            "max_depth": 5,
        }

    def test_from_dict(self):
        """Test loading from dict, ignoring unknown keys."""
        config = TraversalConfig.from_dict({"max_depth": 20, "unknown": "x"})
        assert config == TraversalConfig(max_depth=20)

    def test_from_dict_empty(self):
        """Test that an empty dict yields defaults."""
        assert TraversalConfig.from_dict({}) == DEFAULT_CONFIG

    def test_from_yaml(self, tmp_path, caplog):
        """Test loading from a YAML file."""
        path = tmp_path / "errchain.yaml"
        path.write_text("follow_context: false\nmax_depth: 50\n", encoding="utf-8")

        with caplog.at_level(logging.DEBUG, logger="errchain.config"):
            config = TraversalConfig.from_yaml(path)

        assert config == TraversalConfig(follow_context=False, max_depth=50)
        assert "Loaded traversal config" in caplog.text

    def test_from_yaml_empty_file(self, tmp_path):
        """Test that an empty YAML file yields defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert TraversalConfig.from_yaml(str(path)) == DEFAULT_CONFIG

    def test_from_yaml_not_mapping(self, tmp_path):
        """Test that a non-mapping document is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError, match="must contain a mapping"):
            TraversalConfig.from_yaml(path)

    def test_from_yaml_invalid_value(self, tmp_path):
        """Test that invalid values in YAML are rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("max_depth: 0\n", encoding="utf-8")
        with pytest.raises(InvalidConfigError):
            TraversalConfig.from_yaml(path)
