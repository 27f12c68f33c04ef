"""Error handling implementation for the JSON Flattener."""

import logging
from typing import Optional
from .types import (
    ErrorResponse,
    ErrorType,
    FlattenError,
    ValidationError,
    ValidationResult,
)


class ErrorHandler:
    """
    Input validation and error reporting for flatten operations.

    Flattening is deterministic, so no error is recoverable by retrying;
    responses instead tell the caller what to change.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate raw JSON text before parsing.

        Args:
            input_data: JSON text to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        if not input_data.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=[]
        )

    def handle_flatten_error(self, error: FlattenError) -> ErrorResponse:
        """
        Log a flatten error and describe how to avoid it.

        Args:
            error: FlattenError to handle

        Returns:
            ErrorResponse with the suggested action
        """
        self.logger.error(f"Flatten error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.INPUT_TYPE:
            action = "Supply a JSON object as the top-level value."
        elif error.error_type == ErrorType.KEY_COLLISION:
            action = ("Choose a different key separator or array formatting, "
                      "or rename the source fields so their paths stay distinct.")
        else:
            action = "Fix the JSON syntax of the input."

        return ErrorResponse(can_recover=False, suggested_action=action)
