#!/usr/bin/env python3
"""
Example usage of the JSON Flattener.

This script demonstrates flattening a nested JSON document with the
default configuration and with bracketed array indices, and shows how
key collisions are reported.
"""

import json
from src.json_flattener import (
    Flattener,
    FlattenerConfig,
    SurroundedArrayFormatting,
)


def main():
    """Main example function."""
    print("JSON Flattener Example")
    print("=" * 50)

    sample_data = {
        "a": {
            "b": [1, 2.0, "c", None, True, {}, []],
            "": "my_key_is_empty"
        },
        "": "my_key_is_also_empty"
    }

    print("\nInput:")
    print(json.dumps(sample_data, indent=2))

    # Default configuration: "." separator, plain indices, empty containers skipped
    result = Flattener().flatten(sample_data)
    print("\nDefault configuration:")
    print(json.dumps(result.value, indent=2))

    config = (FlattenerConfig()
              .with_array_formatting(SurroundedArrayFormatting("[", "]"))
              .with_preserve_empty_arrays()
              .with_preserve_empty_objects())
    result = Flattener(config).flatten(sample_data)
    print("\nBracketed indices, empty containers preserved:")
    print(json.dumps(result.value, indent=2))

    colliding = {"a": {"b": 1}, "a.b": 2}
    result = Flattener().flatten(colliding)
    print("\nColliding input:")
    print(json.dumps(colliding))
    if not result.success:
        print(f"❌ {result.error}")


if __name__ == "__main__":
    main()
