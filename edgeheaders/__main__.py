"""
edge-headers CLI
"""
import argparse
import asyncio
import sys

import yaml

from edgeheaders.config.loader import get_settings
from edgeheaders.headers.builder import build_headers
from edgeheaders.headers.errors import HeadersParseError
from edgeheaders.headers.io import (
    load_csp_config,
    load_integrity_manifest,
    read_and_parse,
    write_headers,
)
from edgeheaders.headers.serializer import serialize_headers
from edgeheaders.logging_config import setup_logging


def build_parser():
    """Create the argument parser"""
    parser = argparse.ArgumentParser(
        prog="edgeheaders",
        description="edge-headers - _headers file checker and CSP header generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a headers file
  python -m edgeheaders check dist/_headers

  # Normalise a headers file in place
  python -m edgeheaders format dist/_headers --output dist/_headers

  # Generate per-page CSP headers from an SRI manifest
  python -m edgeheaders build --sri-hashes sriHashes.json --output dist/_headers
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    check_parser = subparsers.add_parser('check', help='Validate a headers file')
    check_parser.add_argument('path', nargs='?', help='Path to the headers file (default: settings)')

    format_parser = subparsers.add_parser('format', help='Parse and re-serialize a headers file')
    format_parser.add_argument('path', nargs='?', help='Path to the headers file (default: settings)')
    format_parser.add_argument('--output', help='Output file (default: stdout)')

    build_parser_ = subparsers.add_parser('build', help='Generate per-page CSP headers')
    build_parser_.add_argument('--sri-hashes', help='SRI manifest JSON file')
    build_parser_.add_argument('--csp-config', help='YAML file with the base CSP')
    build_parser_.add_argument('--no-csp', action='store_true',
                               help='Ignore any configured CSP')
    build_parser_.add_argument('--output', help='Output file (default: stdout)')

    return parser


def main(argv=None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == 'check':
            return cmd_check(args)
        elif args.command == 'format':
            return cmd_format(args)
        elif args.command == 'build':
            return cmd_build(args)
    except (HeadersParseError, OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cmd_check(args):
    """Execute check command"""
    path = args.path or get_settings().headers_file
    document = asyncio.run(read_and_parse(path, missing_ok=False))
    headers = sum(len(block.directives) for block in document.blocks)
    print(
        f"{path}: {len(document.blocks)} path block(s), {headers} header(s), "
        f"indent {document.indent_unit!r}"
    )
    return 0


def cmd_format(args):
    """Execute format command"""
    path = args.path or get_settings().headers_file
    document = asyncio.run(read_and_parse(path, missing_ok=False))
    if args.output:
        asyncio.run(write_headers(args.output, document))
    else:
        sys.stdout.write(serialize_headers(document))
    return 0


def cmd_build(args):
    """Execute build command"""
    settings = get_settings()
    manifest = load_integrity_manifest(args.sri_hashes or settings.sri_hashes_file)
    csp_config = None
    if not args.no_csp:
        csp_config = load_csp_config(args.csp_config or settings.csp_config_file)

    document = build_headers(csp_config, manifest.per_page_sri_hashes)

    if args.output:
        asyncio.run(write_headers(args.output, document))
    else:
        sys.stdout.write(serialize_headers(document))
    return 0


if __name__ == '__main__':
    sys.exit(main())
