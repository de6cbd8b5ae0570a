#!/usr/bin/env python3
"""
HL7 Field Derivation - Main Entrypoint

Applies field derivation rules from the command line, either to a single set
of values or to every row of a CSV file.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .core.derivation_service import DerivationService
from .core.registry import FUNCTION_REGISTRY, evaluate, list_functions
from .reporting.audit_logger import generate_derivation_quality_report


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else getattr(logging, Config.LOG_LEVEL, logging.INFO)
    format_str = '%(asctime)s - %(levelname)s - %(message)s'

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def parse_argument(value: str, null_token: str) -> Optional[str]:
    """Command line text to a field value; the null token means absent."""
    if value == null_token:
        return None
    return value


def coerce_positional(function_name: str, args: List[Optional[str]]) -> List[object]:
    """Integer arguments for functions that take an index."""
    if function_name == 'split' and len(args) == 3 and args[2] is not None:
        try:
            return [args[0], args[1], int(args[2])]
        except ValueError:
            logging.warning(f"Index '{args[2]}' is not an integer")
    return args


def format_result(result: object) -> str:
    """Printable form of a derived value; None prints as an empty line."""
    if result is None:
        return ''
    if isinstance(result, list):
        return '\n'.join(result)
    return str(result)


def print_function_list():
    """Print the registered derivation functions."""
    for entry in list_functions():
        alias = f" ({entry['alias']})" if entry['alias'] else ''
        print(f"{entry['id']:<36}{alias:<36} {entry['description']}")


def run_batch(args) -> int:
    """Run one derivation function over a CSV file."""
    if not Path(args.csv).exists():
        print(f"Error: CSV file not found: {args.csv}", file=sys.stderr)
        return 1
    if not args.function:
        print("Error: --csv requires a function name", file=sys.stderr)
        return 1
    if not args.columns:
        print("Error: --csv requires --columns", file=sys.stderr)
        return 1

    columns = [c.strip() for c in args.columns.split(',') if c.strip()]
    service = DerivationService(args.function, columns, args.output_column)

    output_file = None if args.audit_only else args.output
    stats = service.process_file(args.csv, output_file)

    print(generate_derivation_quality_report(stats, service.get_undefined_rows()), file=sys.stderr)
    print(f"Derivation rate: {stats.get_derivation_rate():.1%}", file=sys.stderr)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entrypoint for the field derivation command."""
    parser = argparse.ArgumentParser(
        description="HL7 Field Derivation - apply derivation rules to extracted field values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s extractHigh "<0.50 IU/mL"
  %(prog)s getFormattedTelecomNumberValue NULL NULL 650 5551234 NULL NULL
  %(prog)s diffDateMin 202401010000 202401010130
  %(prog)s --csv fields.csv --function generateName --columns prefix,given,middle,family,suffix
  %(prog)s --list
        """
    )

    parser.add_argument('function', nargs='?', help='Derivation function name')
    parser.add_argument('values', nargs='*', help=f'Field values ({Config.NULL_TOKEN} for absent)')
    parser.add_argument('--list', action='store_true', help='List derivation functions')
    parser.add_argument('--csv', help='Apply the function to every row of this CSV file')
    parser.add_argument('--columns', help='Comma separated input columns, in argument order')
    parser.add_argument('--output-column', default='derived_value',
                        help='Column receiving the derived value (default: derived_value)')
    parser.add_argument('-o', '--output', help='Output CSV file (default: none)')
    parser.add_argument('--audit-only', action='store_true',
                        help='Generate audit report only, no output file')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose logging')

    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(args.verbose)

    if args.list:
        print_function_list()
        return 0

    try:
        if args.csv:
            return run_batch(args)

        if not args.function:
            parser.print_usage(sys.stderr)
            return 1
        if args.function not in FUNCTION_REGISTRY:
            print(f"Error: unknown derivation function: {args.function}", file=sys.stderr)
            return 1

        values = [parse_argument(v, Config.NULL_TOKEN) for v in args.values]
        result = evaluate(args.function, *coerce_positional(args.function, values))
        print(format_result(result))
        return 0

    except Exception as e:
        logging.error(f"Processing failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
