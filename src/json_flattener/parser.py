"""JSON text parsing and serialization around the flattener."""

import json
import logging
from typing import Any, Iterable, Iterator, Optional, Tuple
from .error_handler import ErrorHandler


def _reject_constant(name: str):
    raise ValueError(f"{name} is not a valid JSON value")


class JSONParser:
    """
    Converts between JSON text and decoded values.

    Supports whole documents and JSON Lines input, where every
    non-blank line holds one document.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Any:
        """
        Parse a JSON document.

        Args:
            json_string: JSON text to parse

        Returns:
            Decoded JSON value

        Raises:
            ValueError: If the text is empty or not valid JSON
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise ValueError(f"Invalid JSON input: {'; '.join(error_messages)}")

        try:
            data = json.loads(json_string, parse_constant=_reject_constant)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON parsing failed: {e.msg} at line {e.lineno}, column {e.colno}")
        except ValueError as e:
            raise ValueError(f"JSON parsing failed: {e}")

        self.logger.debug(f"Parsed JSON document of type {type(data).__name__}")
        return data

    def parse_lines(self, lines: Iterable[str]) -> Iterator[Tuple[int, Any]]:
        """
        Parse JSON Lines input lazily.

        Args:
            lines: Iterable of text lines

        Yields:
            Tuples of (1-based line number, decoded value); blank lines are skipped

        Raises:
            ValueError: If a line is not valid JSON
        """
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                data = json.loads(line, parse_constant=_reject_constant)
            except json.JSONDecodeError as e:
                raise ValueError(f"JSON parsing failed on line {line_number}: {e.msg} at column {e.colno}")
            except ValueError as e:
                raise ValueError(f"JSON parsing failed on line {line_number}: {e}")
            yield line_number, data

    def serialize(self, data: Any, indent: Optional[int] = None) -> str:
        """
        Serialize a value to JSON text, keeping non-ASCII characters.

        Raises:
            ValueError: If the value holds NaN or infinite floats
        """
        return json.dumps(data, ensure_ascii=False, indent=indent, allow_nan=False)
