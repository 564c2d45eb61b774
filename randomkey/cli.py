#!/usr/bin/env python3
"""
RandomKey CLI
=============
Command-line interface for resolving properties through an environment
with the random key source registered first.

Usage:
    randomkey get randomKey.key "randomKey.key[16]"
    randomkey --seed 42 get "randomKey.key[12]" --json
    randomkey get app.name --properties app-props.yaml
    randomkey demo
    randomkey sources
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.table import Table

from randomkey import __version__
from randomkey.config import RandomKeyConfig
from randomkey.environment import Environment
from randomkey.errors import BadPropertyNameError
from randomkey.settings import get_setting, use_config
from randomkey.sources import (
    SYSTEM_ENVIRONMENT_PROPERTY_SOURCE_NAME,
    SystemEnvironmentPropertySource,
    YamlPropertySource,
    add_to_environment,
)
from randomkey.sources.random_key import TRACE

logger = logging.getLogger(__name__)

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False, soft_wrap=True)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def value(self, text: str):
        # Values are printed even in quiet mode; they are the command's result.
        print(text)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list, title: str = None):
        if self.quiet:
            return
        table = Table(title=title)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def configure_logging(verbosity: int):
    if verbosity >= 2:
        level = TRACE
    elif verbosity == 1:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    fmt = get_setting('logging.format', '%(levelname)s %(name)s: %(message)s')
    logging.basicConfig(level=level, format=fmt, stream=sys.stderr)


def build_environment(args) -> Environment:
    """Environment chain: randomKey, then --properties file, then OS env."""
    config = RandomKeyConfig(
        seed=args.seed,
        alphabet=args.alphabet,
        strict=True if args.strict else None,
    )

    env = Environment()
    env.property_sources.add_last(SystemEnvironmentPropertySource())
    properties = getattr(args, 'properties', None)
    if properties:
        env.property_sources.add_before(
            SYSTEM_ENVIRONMENT_PROPERTY_SOURCE_NAME,
            YamlPropertySource('properties', properties),
        )
    add_to_environment(env, config)
    return env


# =============================================================================
# Commands
# =============================================================================

def cmd_get(args, out: Output):
    """Resolve property names."""
    env = build_environment(args)

    results = {}
    missing = []
    for name in args.names:
        try:
            value = env.get_property(name)
        except BadPropertyNameError as e:
            out.error(str(e))
            return 2
        results[name] = value
        if value is None:
            missing.append(name)

    if args.json:
        out.value(json.dumps(results, indent=2))
    else:
        for name, value in results.items():
            if value is None:
                out.error(f"'{name}' not found")
            elif args.values_only:
                out.value(str(value))
            else:
                out.value(f"{name} = {value}")

    return 1 if missing else 0


def cmd_demo(args, out: Output):
    """Resolve the two configured demo properties."""
    env = build_environment(args)

    names = {
        'value1': get_setting('demo.value1', 'randomKey.key'),
        'value2': get_setting('demo.value2', 'randomKey.key[16]'),
    }
    values = {label: env.require_property(name) for label, name in names.items()}

    if args.json or out.quiet:
        out.value(json.dumps(values, indent=2))
        return 0

    out.table(
        ['Field', 'Property', 'Value'],
        [(label, names[label], values[label]) for label in names],
        title='Injected values',
    )
    return 0


def cmd_sources(args, out: Output):
    """List property sources in resolution order."""
    env = build_environment(args)
    rows = [
        (i + 1, source.name, type(source).__name__)
        for i, source in enumerate(env.property_sources)
    ]
    if args.json:
        out.value(json.dumps([{'order': r[0], 'name': r[1], 'type': r[2]} for r in rows], indent=2))
        return 0
    out.table(['#', 'Name', 'Type'], rows, title='Property sources')
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='randomkey',
        description='RandomKey - random values for configuration properties',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s get randomKey.key
  %(prog)s --seed 42 get "randomKey.key[12]"
  %(prog)s --alphabet balanced get "randomKey.key[32]" --json
  %(prog)s get app.name --properties props.yaml
  %(prog)s demo
  %(prog)s sources
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Log debug output (-vv for trace)')
    parser.add_argument('--config', help='Alternate settings YAML (default: bundled app.yaml)')
    parser.add_argument('--seed', type=int, help='Seed for reproducible values')
    parser.add_argument('--alphabet', help="'reference', 'balanced' or literal characters")
    parser.add_argument('--strict', action='store_true', help='Only accept randomKey.key[N]')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- get ---
    p = subparsers.add_parser('get', aliases=['g'], help='Resolve property names')
    p.add_argument('names', nargs='+', help='Property names to resolve')
    p.add_argument('--properties', '-p', help='YAML properties file consulted after randomKey')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')
    p.add_argument('--values-only', action='store_true', help='Print values without names')

    # --- demo ---
    p = subparsers.add_parser('demo', help='Show the configured demo values')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- sources ---
    p = subparsers.add_parser('sources', help='List property sources in order')
    p.add_argument('--properties', '-p', help='YAML properties file to include')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {'g': 'get'}
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=args.quiet)

    try:
        use_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        out.error(str(e))
        return 1

    configure_logging(args.verbose)

    commands = {
        'get': cmd_get,
        'demo': cmd_demo,
        'sources': cmd_sources,
    }

    handler = commands.get(command)
    if handler:
        try:
            return handler(args, out)
        except KeyboardInterrupt:
            out.print("\nCancelled.")
            return 130
        except Exception as e:
            out.error(str(e))
            if args.verbose:
                import traceback
                traceback.print_exc()
            return 1

    parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
