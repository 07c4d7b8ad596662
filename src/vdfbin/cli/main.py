"""Main CLI entry point for vdfbin."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from .. import __version__
from ..codec import CodecConfig, decode, encode
from ..codec.config import DEFAULT_MAX_DEPTH
from ..exceptions import VdfError
from ..models import from_python, to_python

logger = logging.getLogger("vdfbin.cli")


def dump_file(file_path: Path, config: CodecConfig) -> str:
    """Decode a binary VDF file and render it as indented JSON."""
    data = file_path.read_bytes()
    logger.info("Read %d bytes from %s", len(data), file_path)

    tree = decode(data, config=config)
    # ASCII output keeps surrogate escapes of non-UTF-8 bytes printable as \udcXX
    return json.dumps(to_python(tree, config=config), indent=2)


def convert_json_file(json_path: Path, output_path: Path, config: CodecConfig) -> int:
    """Encode a JSON object as binary VDF.

    Returns:
        Number of bytes written
    """
    obj = json.loads(json_path.read_text(encoding="utf-8"))
    data = encode(from_python(obj, config=config), config=config)

    output_path.write_bytes(data)
    logger.info("Wrote %d bytes to %s", len(data), output_path)
    return len(data)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the vdfbin CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="vdfbin: Binary VDF Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vdfbin --dump shortcuts.vdf                      Print a binary VDF file as JSON
  vdfbin --from-json tree.json --output out.vdf    Convert JSON to binary VDF
  vdfbin --version                                 Show version
        """,
    )

    parser.add_argument(
        "--dump",
        metavar="FILE",
        type=str,
        help="Decode a binary VDF file and print it as JSON",
    )

    parser.add_argument(
        "--from-json",
        metavar="FILE",
        type=str,
        help="Encode a JSON object as binary VDF (requires --output)",
    )

    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        type=str,
        help="Output path for --from-json",
    )

    parser.add_argument(
        "--max-depth",
        metavar="N",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum map nesting depth (default {DEFAULT_MAX_DEPTH})",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"vdfbin {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = CodecConfig(max_depth=args.max_depth)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Handle --dump
    if args.dump:
        file_path = Path(args.dump)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            print(dump_file(file_path, config))
            return 0
        except VdfError as e:
            print(f"Error decoding {file_path}: {e}", file=sys.stderr)
            return 1
        except (OSError, UnicodeError) as e:
            print(f"Error: Cannot dump {file_path}: {e}", file=sys.stderr)
            return 1

    # Handle --from-json
    if args.from_json:
        json_path = Path(args.from_json)
        if not json_path.exists():
            print(f"Error: File not found: {json_path}", file=sys.stderr)
            return 1
        if not args.output:
            print("Error: --from-json requires --output", file=sys.stderr)
            return 1

        try:
            convert_json_file(json_path, Path(args.output), config)
            return 0
        except json.JSONDecodeError as e:
            print(f"Error: Invalid JSON in {json_path}: {e}", file=sys.stderr)
            return 1
        except VdfError as e:
            print(f"Error encoding {json_path}: {e}", file=sys.stderr)
            return 1
        except (OSError, UnicodeError) as e:
            print(f"Error: Cannot convert {json_path}: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
