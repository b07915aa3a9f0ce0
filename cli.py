# Parity v1.2.0
#!/usr/bin/env python3
"""
Parity CLI

Command-line interface for structural comparison of JSON documents.
"""
import argparse
import json
import logging
import sys
from collections import OrderedDict


def load_json(path: str, ordered_maps: bool = False):
    """Load a JSON file, optionally decoding objects as OrderedDicts."""
    with open(path, encoding="utf-8") as f:
        if ordered_maps:
            return json.load(f, object_pairs_hook=OrderedDict)
        return json.load(f)


def compare_files(before_path: str, after_path: str, ordered_maps: bool = False) -> int:
    """Compare two JSON files and print whether they are structurally equal."""
    from parity import classify, deep_equal

    before = load_json(before_path, ordered_maps)
    after = load_json(after_path, ordered_maps)

    print(f"\nComparing: {before_path} vs {after_path}")
    print("=" * 60)
    print(f"  Before: {classify(before).value}")
    print(f"  After:  {classify(after).value}")

    if deep_equal(before, after):
        print("Files are structurally equal")
        return 0

    print("Files differ")
    return 1


def show_keys(path: str, ordered_maps: bool = False) -> int:
    """Print the canonical key list of a map-like JSON document."""
    from parity import get_map_like_keys

    value = load_json(path, ordered_maps)
    keys = get_map_like_keys(value)

    print(f"\nKeys of {path} ({len(keys)}):")
    print("-" * 60)
    for key in keys:
        print(f"  {json.dumps(key)}")
    return 0


def show_classification(path: str, ordered_maps: bool = False) -> int:
    """Print the classification of a JSON document."""
    from parity import classify

    value = load_json(path, ordered_maps)
    print(classify(value).value)
    return 0


def run_server(host: str = "127.0.0.1", port: int = 8000, reload: bool = False):
    """Run the FastAPI server."""
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=host,
        port=port,
        reload=reload
    )


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Parity structural equality CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # compare
    compare_parser = subparsers.add_parser("compare", help="Compare two JSON files")
    compare_parser.add_argument("before", help="Before/baseline file")
    compare_parser.add_argument("after", help="After/new file")
    compare_parser.add_argument("--ordered-maps", action="store_true",
                                help="Treat JSON objects as key/value containers")

    # keys
    keys_parser = subparsers.add_parser("keys", help="Print the canonical key list of a JSON file")
    keys_parser.add_argument("file", help="JSON file (object or list of pairs)")
    keys_parser.add_argument("--ordered-maps", action="store_true",
                             help="Treat JSON objects as key/value containers")

    # classify
    classify_parser = subparsers.add_parser("classify", help="Print the classification of a JSON file")
    classify_parser.add_argument("file", help="JSON file")
    classify_parser.add_argument("--ordered-maps", action="store_true",
                                 help="Treat JSON objects as key/value containers")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s - %(name)s - %(message)s'
    )

    if not args.command:
        parser.print_help()
        return 0

    from parity import ParityError

    try:
        if args.command == "compare":
            return compare_files(args.before, args.after, args.ordered_maps)
        elif args.command == "keys":
            return show_keys(args.file, args.ordered_maps)
        elif args.command == "classify":
            return show_classification(args.file, args.ordered_maps)
        elif args.command == "serve":
            run_server(args.host, args.port, args.reload)
            return 0
    except (ParityError, json.JSONDecodeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
