#!/usr/bin/env python3
"""
Command-line interface for reedstyle.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from reedstyle.managers import ManagerFactory
from reedstyle.utils.config import LOG_FILE, VERSION
from reedstyle.utils.error import ReedStyleError
from reedstyle.utils.logging import get_logger, setup_logging
from reedstyle.utils.ui import UserInterface

logger = get_logger(__name__)

def parse_color_argument(argument: str) -> Tuple[str, str]:
    """Split ``name=#3b82f6`` into its name and color literal."""
    name, sep, color = argument.partition('=')
    if not sep or not name.strip() or not color.strip():
        raise argparse.ArgumentTypeError(f"Expected NAME=COLOR, got {argument!r}")
    return name.strip(), color.strip()

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='reedstyle',
        description='Optimize generated CSS and build color palettes'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )
    parser.add_argument(
        '-q', '--quiet',
        help='Only print errors',
        action='store_true'
    )
    parser.add_argument(
        '--log-file',
        help=f'Also write log messages to a file (default: {LOG_FILE})',
        nargs='?',
        const=LOG_FILE,
        type=Path
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    minify = subparsers.add_parser('minify', help='Optimize a CSS file')
    minify.add_argument('input', help='CSS file to optimize', type=Path)
    minify.add_argument(
        '-o', '--output',
        help='Output file (default: stdout)',
        type=Path
    )
    minify.add_argument(
        '--no-minify',
        help='Copy the input unchanged',
        action='store_true'
    )
    minify.add_argument(
        '--stats',
        help='Print optimization statistics',
        action='store_true'
    )
    minify.add_argument(
        '--format',
        help='Statistics format',
        choices=['text', 'json'],
        default='text'
    )

    palette = subparsers.add_parser('palette', help='Build color scales')
    palette.add_argument(
        'colors',
        help='Colors as NAME=COLOR, e.g. brand-a=#3b82f6',
        nargs='+',
        type=parse_color_argument
    )
    palette.add_argument(
        '--format',
        help='Output format',
        choices=['css', 'text', 'json'],
        default='css'
    )
    palette.add_argument(
        '--no-neutral',
        help='Leave out the built-in neutral scale',
        action='store_true'
    )

    return parser.parse_args(argv)

def run_minify(args: argparse.Namespace, factory: ManagerFactory, ui: UserInterface) -> int:
    if not args.input.is_file():
        raise FileNotFoundError(f"File not found: {args.input}")

    optimizer = factory.create_optimizer(minify=not args.no_minify)
    css_text = args.input.read_text(encoding='utf-8')
    output = optimizer.optimize(css_text)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output, encoding='utf-8')
        ui.print_success(f"Written: {args.output}")
    else:
        sys.stdout.write(output)
        sys.stdout.write('\n')

    if args.stats:
        ui.set_output_format(args.format)
        print(ui.format_output(optimizer.get_stats()), file=ui.stream)
    return 0

def run_palette(args: argparse.Namespace, factory: ManagerFactory, ui: UserInterface) -> int:
    palette = factory.create_palette_manager(include_neutral=not args.no_neutral)
    for name, color in args.colors:
        palette.add_color(name, color)

    if args.format == 'css':
        print(palette.to_css())
    else:
        ui.set_output_format(args.format)
        print(ui.format_output(palette.to_dict()))

    stats = palette.get_stats()
    if stats['fallbacks']:
        ui.print_warning(
            f"{stats['fallbacks']} color(s) used the neutral scale: "
            f"{', '.join(stats['fallback_names'])}")
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    setup_logging(level, str(args.log_file) if args.log_file else None)

    ui = UserInterface()
    ui.set_verbosity(args.verbose, args.quiet)

    try:
        with ManagerFactory() as factory:
            if args.command == 'minify':
                return run_minify(args, factory, ui)
            return run_palette(args, factory, ui)
    except (ReedStyleError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        ui.print_error(str(e))
        return 1

if __name__ == '__main__':
    sys.exit(main())
