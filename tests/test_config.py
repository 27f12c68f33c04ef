"""Tests for flattener configuration."""

import dataclasses
import pytest
from json_flattener import FlattenerConfig, PlainArrayFormatting, SurroundedArrayFormatting


class TestFlattenerConfig:
    """Tests for FlattenerConfig class."""

    def test_defaults(self):
        """Test default configuration values."""
        config = FlattenerConfig()

        assert config.key_separator == "."
        assert config.array_formatting == PlainArrayFormatting()
        assert config.preserve_empty_arrays is False
        assert config.preserve_empty_objects is False
        assert config.infer_types is False

    def test_surrounded_defaults(self):
        """Test surrounded formatting defaults to square brackets."""
        formatting = SurroundedArrayFormatting()

        assert formatting.start == "["
        assert formatting.end == "]"

    def test_config_is_immutable(self):
        """Test configuration cannot be mutated in place."""
        config = FlattenerConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.key_separator = "/"

    def test_with_methods_chain(self):
        """Test fluent updates return new configurations."""
        base = FlattenerConfig()

        config = (base
                  .with_key_separator("_")
                  .with_array_formatting(SurroundedArrayFormatting("(", ")"))
                  .with_preserve_empty_arrays()
                  .with_preserve_empty_objects(True)
                  .with_infer_types())

        assert config == FlattenerConfig(
            key_separator="_",
            array_formatting=SurroundedArrayFormatting("(", ")"),
            preserve_empty_arrays=True,
            preserve_empty_objects=True,
            infer_types=True,
        )
        assert base == FlattenerConfig()
        assert config.with_preserve_empty_arrays(False).preserve_empty_arrays is False

    def test_no_validation(self):
        """Test unusual separators are accepted as is."""
        assert FlattenerConfig().with_key_separator("").key_separator == ""

    def test_join_key(self):
        """Test member key building."""
        config = FlattenerConfig(key_separator="::")

        assert config.join_key(None, "a") == "a"
        assert config.join_key(None, "") == ""
        assert config.join_key("", "a") == "::a"
        assert config.join_key("", "") == "::"
        assert config.join_key("a", "b") == "a::b"
        assert config.join_key("a", "") == "a::"

    def test_array_key_plain(self):
        """Test plain array index keys."""
        config = FlattenerConfig(key_separator="-")

        assert config.array_key("a", 0) == "a-0"
        assert config.array_key("a", 12) == "a-12"

    def test_array_key_surrounded(self):
        """Test surrounded array index keys ignore the separator."""
        config = FlattenerConfig(
            key_separator="-",
            array_formatting=SurroundedArrayFormatting("{", "}")
        )

        assert config.array_key("a", 3) == "a{3}"
