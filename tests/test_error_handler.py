"""Tests for error handler."""

import logging
from json_flattener.error_handler import ErrorHandler
from json_flattener.types import (
    ErrorType,
    InputMustBeObjectError,
    JsonType,
    KeyCollisionError,
)


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid(self):
        """Test validation of non-empty input."""
        result = self.error_handler.validate_input('{"a": 1}')

        assert result.is_valid
        assert result.errors == []
        assert result.warnings == []

    def test_validate_input_empty(self):
        """Test validation of empty input."""
        result = self.error_handler.validate_input("  ")

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.SYNTAX
        assert result.errors[0].location == "input"

    def test_handle_input_type_error(self):
        """Test response for a non-object root."""
        response = self.error_handler.handle_flatten_error(InputMustBeObjectError(JsonType.ARRAY))

        assert not response.can_recover
        assert "JSON object" in response.suggested_action

    def test_handle_key_collision_error(self):
        """Test response for a key collision."""
        response = self.error_handler.handle_flatten_error(KeyCollisionError("a.b"))

        assert not response.can_recover
        assert "separator" in response.suggested_action

    def test_handle_error_logs(self, caplog):
        """Test handled errors are logged."""
        with caplog.at_level(logging.ERROR):
            self.error_handler.handle_flatten_error(KeyCollisionError("a.b"))

        assert "key_collision" in caplog.text
        assert "'a.b'" in caplog.text

    def test_error_context(self):
        """Test errors expose their details."""
        error = KeyCollisionError("x")

        assert error.context == {"key": "x"}
        assert InputMustBeObjectError(JsonType.NULL).context == {"found_type": "null"}
