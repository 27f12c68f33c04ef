"""Flattener configuration."""

from dataclasses import dataclass, field, replace
from typing import Optional
from .types import ArrayFormatting, PlainArrayFormatting, SurroundedArrayFormatting


@dataclass(frozen=True)
class FlattenerConfig:
    """
    Immutable flattening policy.

    Values are not validated: any separator, including the empty string,
    is accepted. Use the ``with_*`` methods to derive modified copies.
    """
    key_separator: str = "."
    array_formatting: ArrayFormatting = field(default_factory=PlainArrayFormatting)
    preserve_empty_arrays: bool = False
    preserve_empty_objects: bool = False
    infer_types: bool = False

    def with_key_separator(self, key_separator: str) -> "FlattenerConfig":
        return replace(self, key_separator=key_separator)

    def with_array_formatting(self, array_formatting: ArrayFormatting) -> "FlattenerConfig":
        return replace(self, array_formatting=array_formatting)

    def with_preserve_empty_arrays(self, preserve: bool = True) -> "FlattenerConfig":
        return replace(self, preserve_empty_arrays=preserve)

    def with_preserve_empty_objects(self, preserve: bool = True) -> "FlattenerConfig":
        return replace(self, preserve_empty_objects=preserve)

    def with_infer_types(self, infer: bool = True) -> "FlattenerConfig":
        return replace(self, infer_types=infer)

    def join_key(self, prefix: Optional[str], key: str) -> str:
        """
        Build the key of an object member.

        At the root (``prefix`` is None) the member key is used as is. Below
        the root the separator is always inserted, so an empty parent key
        still leaves its separator in the path.
        """
        if prefix is None:
            return key
        return f"{prefix}{self.key_separator}{key}"

    def array_key(self, prefix: str, index: int) -> str:
        """Build the key of an array element."""
        formatting = self.array_formatting
        if isinstance(formatting, SurroundedArrayFormatting):
            return f"{prefix}{formatting.start}{index}{formatting.end}"
        return f"{prefix}{self.key_separator}{index}"
