#!/usr/bin/env python3
"""Basic usage example for vdfbin.

This example demonstrates:
1. Building a value tree
2. Encoding to binary VDF
3. Decoding back and converting to JSON
4. Calculating entry sizes
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from vdfbin import (
    MapNode,
    NumberNode,
    StringNode,
    decode,
    encode,
    encoded_size,
    field_sizes,
    to_python,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("vdfbin Basic Usage Example")
    print("=" * 60)
    print()

    # Build a tree
    print("1. Building a value tree...")
    tree = {
        "key1": StringNode("value1"),
        "key2": NumberNode(3),
        "key3": MapNode({"key4": StringNode("value2"), "key5": StringNode("value3")}),
    }
    print(f"   {len(tree)} top-level entries")
    print()

    # Analyze entry sizes
    print("2. Analyzing entry sizes...")
    for key, size in field_sizes(tree).items():
        print(f"   {key}: {size} bytes")
    print(f"   Total: {encoded_size(tree)} bytes (including map end)")
    print()

    # Encode
    print("3. Encoding to binary VDF...")
    data = encode(tree)
    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print()

    # Decode
    print("4. Decoding and converting to JSON...")
    decoded = decode(data)
    print(json.dumps(to_python(decoded), indent=2))
    print()

    # Verify round-trip
    print("5. Verifying round-trip...")
    if decoded == tree:
        print("   ✓ Round-trip successful! Trees match.")
    else:
        print("   ✗ Round-trip failed! Trees don't match.")
    print()

    # Optionally write the result
    if len(sys.argv) > 1:
        out_path = Path(sys.argv[1])
        out_path.write_bytes(data)
        print(f"6. Wrote {len(data)} bytes to {out_path}")
        print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
