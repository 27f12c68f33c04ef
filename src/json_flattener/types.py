"""Core type definitions for the JSON Flattener."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class JsonType(Enum):
    """Enumeration of JSON value kinds."""
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


class ErrorType(Enum):
    """Enumeration of error types."""
    SYNTAX = "syntax"
    INPUT_TYPE = "input_type"
    KEY_COLLISION = "key_collision"


@dataclass(frozen=True)
class PlainArrayFormatting:
    """Array index appended after the key separator, e.g. ``a.0``."""


@dataclass(frozen=True)
class SurroundedArrayFormatting:
    """Array index wrapped in bracket strings, e.g. ``a[0]``."""
    start: str = "["
    end: str = "]"


ArrayFormatting = Union[PlainArrayFormatting, SurroundedArrayFormatting]


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


@dataclass
class ErrorResponse:
    """Response for error handling."""
    can_recover: bool
    suggested_action: str


class FlattenError(Exception):
    """Base exception for flattening failures."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}


class InputMustBeObjectError(FlattenError):
    """Raised when the root value handed to the flattener is not an object."""

    def __init__(self, found_type: JsonType):
        super().__init__(
            f"Input must be a JSON object, found {found_type.value}",
            ErrorType.INPUT_TYPE,
            {"found_type": found_type.value},
        )
        self.found_type = found_type


class KeyCollisionError(FlattenError):
    """Raised when two source paths flatten to the same key."""

    def __init__(self, key: str):
        super().__init__(
            f"Flattened key collision: {key!r}",
            ErrorType.KEY_COLLISION,
            {"key": key},
        )
        self.key = key


@dataclass
class FlattenResult:
    """Result of flatten operation."""
    success: bool
    value: Optional[Dict[str, Any]] = None
    error: Optional[FlattenError] = field(default=None, compare=False)

    @classmethod
    def ok(cls, value: Dict[str, Any]) -> "FlattenResult":
        return cls(success=True, value=value)

    @classmethod
    def failure(cls, error: FlattenError) -> "FlattenResult":
        return cls(success=False, error=error)

    def unwrap(self) -> Dict[str, Any]:
        """
        Return the flattened object or raise the carried error.

        Raises:
            FlattenError: If the flatten operation failed
        """
        if self.error is not None:
            raise self.error
        return self.value
