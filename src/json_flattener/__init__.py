"""
JSON Flattener - Flatten nested JSON objects into single-level objects.

Keys of the flat object encode the path to each leaf value, using a
configurable separator and array index notation.
"""

from .config import FlattenerConfig
from .flattener import Flattener, flatten
from .types import (
    ArrayFormatting,
    FlattenError,
    FlattenResult,
    InputMustBeObjectError,
    JsonType,
    KeyCollisionError,
    PlainArrayFormatting,
    SurroundedArrayFormatting,
)

__version__ = "1.0.0"
__all__ = [
    "Flattener",
    "FlattenerConfig",
    "flatten",
    "ArrayFormatting",
    "PlainArrayFormatting",
    "SurroundedArrayFormatting",
    "FlattenResult",
    "FlattenError",
    "InputMustBeObjectError",
    "KeyCollisionError",
    "JsonType",
]
