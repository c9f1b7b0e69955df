"""CLI entry point for Adaptogen."""

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import load_settings
from .parsers.errors import ParseError
from .registry import ParserRegistry, create_default_registry


def parse_response(registry: ParserRegistry, source: TextIO, indent: int = 2) -> int:
    """Normalize one raw response read from ``source`` and print it as JSON."""
    raw_response = source.read()
    try:
        frame = registry.parse(raw_response)
    except ParseError as e:
        print(f"Error ({e.kind}): {e}", file=sys.stderr)
        return 1

    print(frame.model_dump_json(indent=indent or None))
    return 0


def list_models(registry: ParserRegistry) -> int:
    """List every registered model identifier."""
    models = registry.list_models()

    print("Registered Models:")
    print("-" * 50)
    for model, parser_name in models.items():
        print(f"{model} ({parser_name})")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function."""
    parser = argparse.ArgumentParser(description="Adaptogen response normalizer")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    parse_parser = subparsers.add_parser('parse', help='Normalize a raw provider response')
    parse_parser.add_argument('file', nargs='?', help='JSON file to read (default: stdin)')
    parse_parser.add_argument('--indent', type=int, default=2, help='JSON indent (0 for compact)')

    subparsers.add_parser('list-models', help='List registered model identifiers')

    args = parser.parse_args(argv)

    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")
    registry = create_default_registry(settings)

    if args.command == 'parse':
        if args.file and args.file != '-':
            try:
                fh = open(args.file, encoding="utf-8")
            except OSError as e:
                print(f"Error: {e}", file=sys.stderr)
                return 1
            with fh:
                return parse_response(registry, fh, args.indent)
        return parse_response(registry, sys.stdin, args.indent)
    elif args.command == 'list-models':
        return list_models(registry)

    parser.print_help()
    return 2


if __name__ == "__main__":
    sys.exit(main())
