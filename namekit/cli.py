#!/usr/bin/env python3
"""
namekit CLI
===========
Command-line interface for Markov chain name generation.

Usage:
    namekit generate -n 10 --theme fantasy --category town_names
    namekit generate -n 5 --name-seed 100 --min-length 5 --max-length 9
    namekit themes
"""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from namekit import __version__
from namekit.generators.markov_name_generator import MAX_TRIES_MARGIN
from namekit.settings import get_setting

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output with quiet mode support."""

    def __init__(self, quiet: bool = False):
        self.quiet = quiet
        self.console = Console(highlight=False)

    def print(self, *args, **kwargs):
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)

    def table(self, headers: list, rows: list):
        """Print a formatted table."""
        if self.quiet:
            return

        table = Table(show_edge=False)
        for header in headers:
            table.add_column(str(header))
        for row in rows:
            table.add_row(*(str(c) for c in row))
        self.console.print(table)


def setup_logging(level: str = None):
    """Route log records through rich, at the configured level."""
    level = (level or get_setting('logging.level', 'WARNING')).upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def generation_bounds(kind: str, min_length: int = None, max_length: int = None) -> dict:
    """
    Length bounds for ``next_name`` / ``get_name`` calls.

    Command-line values win over ``generation.<kind>`` in app.yaml; bounds
    set in neither place are left to the generator's own defaults.
    """
    configured = get_setting(f'generation.{kind}', {}) or {}
    bounds = {
        'min_length': min_length if min_length is not None else configured.get('min_length'),
        'max_length': max_length if max_length is not None else configured.get('max_length'),
    }
    return {k: int(v) for k, v in bounds.items() if v is not None}


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args, out: Output):
    """Generate names."""
    from namekit import MarkovNameGenerator, load_theme

    theme_name = args.theme or get_setting('themes.default', 'fantasy')
    category = args.category or get_setting('themes.default_category', 'town_names')

    if args.count < 0:
        raise ValueError(f"--count must be >= 0, got {args.count}")

    theme = load_theme(theme_name)
    margin = get_setting('generation.max_tries_margin', MAX_TRIES_MARGIN)
    gen = MarkovNameGenerator.from_theme(theme, category, args.seed,
                                         max_tries_margin=int(margin))

    kind = 'get_name' if args.name_seed is not None else 'next_name'
    bounds = generation_bounds(kind, args.min_length, args.max_length)

    if not args.json:
        out.print(f"Generating {args.count} names from '{theme_name}/{category}'...")

    results = []
    for i in range(args.count):
        if args.name_seed is not None:
            seed = args.name_seed + i
            result = gen.get_result(seed, **bounds)
        else:
            seed = None
            result = gen.next_result(**bounds)
        results.append((seed, result))

    if args.json:
        print(json.dumps([
            {'name': r.name, 'seed': seed, 'truncated': r.truncated, 'tries': r.tries}
            for seed, r in results
        ], indent=2))
        return 0

    if not results:
        out.print("No names generated.")
        return 0

    out.print()
    if args.verbose:
        rows = [[i, r.name, '-' if seed is None else seed, r.tries,
                 'yes' if r.truncated else '']
                for i, (seed, r) in enumerate(results, 1)]
        out.table(['#', 'Name', 'Seed', 'Tries', 'Truncated'], rows)
    else:
        rows = [[i, r.name] for i, (_, r) in enumerate(results, 1)]
        out.table(['#', 'Name'], rows)
    return 0


def cmd_themes(args, out: Output):
    """List bundled themes."""
    from namekit import list_themes, load_theme

    rows = []
    for name in list_themes():
        theme = load_theme(name)
        for category in theme.category_names:
            rows.append([name, category, len(theme.names(category))])

    if args.json:
        print(json.dumps([
            {'theme': t, 'category': c, 'examples': n} for t, c, n in rows
        ], indent=2))
        return 0

    out.table(['Theme', 'Category', 'Examples'], rows)
    return 0


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='namekit',
        description='namekit - Markov chain name generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s generate -n 10 --theme nordic --category lake_names
  %(prog)s generate -n 5 --seed 42 --min-length 5 --max-length 9 -v
  %(prog)s generate -n 3 --name-seed 1000 --json
  %(prog)s themes
"""
    )

    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--quiet', '-q', action='store_true', help='Suppress non-essential output')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Logging level (default: from app.yaml)')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # --- generate ---
    p = subparsers.add_parser('generate', aliases=['gen', 'g'], help='Generate names')
    p.add_argument('-n', '--count', type=int, default=10, help='Number of names (default: 10)')
    p.add_argument('--theme', '-t', help='Theme to learn from (default: from app.yaml)')
    p.add_argument('--category', '-c', help='Theme category, e.g. town_names or lake_names')
    p.add_argument('--seed', type=int, default=0, help='Seed for the generator stream (default: 0)')
    p.add_argument('--name-seed', type=int,
                   help='Derive each name from its own seed, counting up from this value')
    p.add_argument('--min-length', type=int, help='Minimal name length')
    p.add_argument('--max-length', type=int, help='Maximal name length')
    p.add_argument('--verbose', '-v', action='store_true', help='Show seeds, tries and truncation')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    # --- themes ---
    p = subparsers.add_parser('themes', help='List available themes and categories')
    p.add_argument('--json', '-j', action='store_true', help='Output as JSON')

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    cmd_map = {'gen': 'generate', 'g': 'generate'}
    command = cmd_map.get(args.command, args.command)

    out = Output(quiet=getattr(args, 'quiet', False))

    commands = {
        'generate': cmd_generate,
        'themes': cmd_themes,
    }

    handler = commands.get(command)
    if handler is None:
        parser.print_help()
        return 0

    try:
        setup_logging(args.log_level)
        return handler(args, out)
    except KeyboardInterrupt:
        out.print("\nCancelled.")
        return 130
    except (ValueError, FileNotFoundError) as e:
        out.error(str(e))
        logger.debug("command failed", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
