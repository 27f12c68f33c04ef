"""Flattening of nested JSON objects into single-level objects."""

import logging
import math
import re
from typing import Any, Dict, Iterator, List, Optional, Tuple
from .config import FlattenerConfig
from .data_type_detector import DataTypeDetector
from .types import (
    FlattenResult,
    InputMustBeObjectError,
    JsonType,
    KeyCollisionError,
)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

Entry = Tuple[str, Any]


def infer_scalar(text: str) -> Any:
    """
    Convert a string holding a number or boolean literal to that value.

    Integers must fit in a signed 64-bit range, otherwise they are read as
    floats. Non-finite floats and anything else are returned unchanged.
    """
    if _INT_PATTERN.fullmatch(text):
        # longer digit runs are out of int64 range anyway
        digits = text.lstrip("+-").lstrip("0")
        if len(digits) <= 19:
            number = int(digits or "0")
            if text.startswith("-"):
                number = -number
            if _INT64_MIN <= number <= _INT64_MAX:
                return number
    if _FLOAT_PATTERN.fullmatch(text):
        number = float(text)
        if math.isfinite(number):
            return number
        return text
    if text == "true":
        return True
    if text == "false":
        return False
    return text


class Flattener:
    """
    Flattens a JSON object into a single-level object.

    Keys of the output encode the path to each leaf, built with the
    configured separator and array formatting. The traversal is depth-first
    and keeps insertion order. A flattener holds no per-call state, so one
    instance can be reused and shared between threads.
    """

    def __init__(self, config: Optional[FlattenerConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the flattener.

        Args:
            config: Flattening policy (defaults to ``FlattenerConfig()``)
            logger: Optional logger instance
        """
        self.config = config or FlattenerConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.detector = DataTypeDetector(self.logger)

    def flatten(self, value: Any) -> FlattenResult:
        """
        Flatten a JSON object.

        Args:
            value: Decoded JSON value; must be an object

        Returns:
            FlattenResult holding the flat object, or the
            InputMustBeObjectError / KeyCollisionError that stopped it
        """
        root_type = self.detector.detect_element_type(value)
        if root_type is not JsonType.OBJECT:
            self.logger.debug(f"Rejecting non-object root of type {root_type.value}")
            return FlattenResult.failure(InputMustBeObjectError(root_type))

        self.logger.debug(f"Flattening object with {len(value)} top-level keys")

        output: Dict[str, Any] = {}
        stack: List[Iterator[Entry]] = [self._object_entries(None, value)]

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            key, element = entry
            element_type = self.detector.detect_element_type(element)

            if element_type is JsonType.OBJECT:
                if element:
                    stack.append(self._object_entries(key, element))
                    continue
                if not self.config.preserve_empty_objects:
                    continue
                leaf = {}
            elif element_type is JsonType.ARRAY:
                if element:
                    stack.append(self._array_entries(key, element))
                    continue
                if not self.config.preserve_empty_arrays:
                    continue
                leaf = []
            elif element_type is JsonType.STRING and self.config.infer_types:
                leaf = infer_scalar(element)
            else:
                leaf = element

            if key in output:
                self.logger.debug(f"Aborting flatten on duplicate key {key!r}")
                return FlattenResult.failure(KeyCollisionError(key))
            output[key] = leaf

        self.logger.debug(f"Flattened into {len(output)} keys")
        return FlattenResult.ok(output)

    def _object_entries(self, prefix: Optional[str], obj: Dict[str, Any]) -> Iterator[Entry]:
        for key, element in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings, got {type(key).__name__}")
            yield self.config.join_key(prefix, key), element

    def _array_entries(self, prefix: str, array: List[Any]) -> Iterator[Entry]:
        for index, element in enumerate(array):
            yield self.config.array_key(prefix, index), element


def flatten(value: Any, config: Optional[FlattenerConfig] = None) -> FlattenResult:
    """Flatten ``value`` with a one-off Flattener."""
    return Flattener(config).flatten(value)
