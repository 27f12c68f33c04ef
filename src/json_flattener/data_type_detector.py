"""JSON value kind detection."""

import logging
from typing import Any, Optional
from .types import JsonType


class DataTypeDetector:
    """
    Maps decoded Python values onto the closed set of JSON kinds.

    ``bool`` is checked before numbers since it subclasses ``int``.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def detect_element_type(self, element: Any) -> JsonType:
        """
        Detect the JSON kind of a single element.

        Args:
            element: Decoded JSON value

        Returns:
            JsonType of the element

        Raises:
            TypeError: If the element is not a JSON value
        """
        if element is None:
            return JsonType.NULL
        elif isinstance(element, bool):
            return JsonType.BOOL
        elif isinstance(element, (int, float)):
            return JsonType.NUMBER
        elif isinstance(element, str):
            return JsonType.STRING
        elif isinstance(element, list):
            return JsonType.ARRAY
        elif isinstance(element, dict):
            return JsonType.OBJECT
        raise TypeError(f"Unsupported JSON value type: {type(element).__name__}")

