#!/usr/bin/env python3
# Path: data_exporter/main.py
"""
data_exporter - Command-Line Entry Point

Exports records stored in a JSON file to one or more formats.

Data Flow:
    INPUT:   JSON file holding one record or a list of records
    PROCESS: Validation, flattening, formatting
    OUTPUT:  Files in the output directory, or text on stdout

Usage:
    data-exporter people.json                        # JSON + CSV to ./exports
    data-exporter people.json -f csv --stdout        # CSV to stdout
    data-exporter people.json -f csv --delimiter ";" --filename people.csv
    data-exporter people.json --stats                # Dataset statistics
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config_loader import ConfigLoader
from .constants import (
    EXPORTER_ID,
    FORMAT_CSV,
    FORMAT_JSON,
    MENU_HEADER,
    MENU_SEPARATOR,
    STATUS_FAIL,
    STATUS_INFO,
    STATUS_OK,
)
from .core.logger import get_input_logger, setup_ipo_logging
from .output import DataExporter, DatasetStats


logger = get_input_logger('cli')


def print_banner() -> None:
    """Print application banner."""
    print()
    print(MENU_HEADER)
    print(f"  {EXPORTER_ID}")
    print("  Record export to JSON, CSV and custom formats")
    print(MENU_HEADER)
    print()


def print_dataset_stats(stats: DatasetStats) -> None:
    """
    Print dataset statistics.

    Args:
        stats: DatasetStats from DataExporter.describe_dataset
    """
    print("  Dataset statistics:")
    print(f"  {MENU_SEPARATOR}")
    for key, value in stats.to_dict().items():
        print(f"  {key:<20} {value}")
    print()


def load_dataset(path: Path) -> Any:
    """
    Load a dataset from a JSON file.

    Args:
        path: Input file path

    Returns:
        Parsed JSON content

    Raises:
        ValueError: If the file is missing or not valid JSON
    """
    if not path.is_file():
        raise ValueError(f"Input file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Input file is not valid JSON: {path} ({e})") from e

    logger.info(f"Loaded dataset from {path}")
    return data


def initialize_system() -> ConfigLoader:
    """
    Load configuration and set up logging.

    Returns:
        ConfigLoader instance
    """
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True),
    )

    return config


def build_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate parsed arguments into export options."""
    options: Dict[str, Any] = {}

    if args.stdout:
        options['output_dir'] = None
    elif args.output_dir:
        options['output_dir'] = args.output_dir
    if args.filename:
        options['filename'] = args.filename
    if args.no_timestamp:
        options['create_timestamp'] = False
    if args.delimiter:
        options['delimiter'] = args.delimiter
    if args.compact:
        options['prettify'] = False

    return options


def export_formats(
    exporter: DataExporter,
    data: Any,
    formats: List[str],
    options: Dict[str, Any],
    to_stdout: bool = False,
) -> int:
    """
    Export data to each requested format and report the outcome.

    Args:
        exporter: DataExporter instance
        data: Loaded dataset
        formats: Format identifiers
        options: Shared export options
        to_stdout: Print content instead of status lines

    Returns:
        Exit code (0 when every format succeeded)
    """
    results = exporter.export_many(data, formats, **options)
    failed = 0

    for format_id, result in results.items():
        if isinstance(result, dict) and 'error' in result:
            failed += 1
            print(
                f"{STATUS_FAIL} {format_id}: {result['error']}",
                file=sys.stderr if to_stdout else sys.stdout,
            )
        elif to_stdout:
            print(result)
        else:
            print(f"{STATUS_OK} {format_id}: {result}")

    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for data_exporter.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description='data_exporter - export records to JSON, CSV and more',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  data-exporter people.json                     Export JSON and CSV to ./exports
  data-exporter people.json -f csv --stdout     Print CSV
  data-exporter people.json --stats             Show dataset statistics
        """
    )

    parser.add_argument('input', type=Path, help='JSON file with records')
    parser.add_argument(
        '--format', '-f',
        nargs='+',
        default=[FORMAT_JSON, FORMAT_CSV],
        help='Formats to export (default: json csv)'
    )
    parser.add_argument('--output-dir', '-o', type=Path, help='Output directory')
    parser.add_argument('--filename', help='Output filename (requires a single --format)')
    parser.add_argument(
        '--stdout',
        action='store_true',
        help='Print exported content instead of writing files'
    )
    parser.add_argument(
        '--no-timestamp',
        action='store_true',
        help='Do not add a timestamp to generated filenames'
    )
    parser.add_argument('--delimiter', help='CSV delimiter')
    parser.add_argument(
        '--compact',
        action='store_true',
        help='Write compact JSON'
    )
    parser.add_argument(
        '--stats',
        action='store_true',
        help='Print dataset statistics before exporting'
    )
    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner'
    )

    args = parser.parse_args(argv)

    if args.filename and len(args.format) > 1:
        parser.error('--filename applies to a single --format')

    if not (args.quiet or args.stdout):
        print_banner()

    try:
        config = initialize_system()
        exporter = DataExporter(config)
        data = load_dataset(args.input)

        if args.stats:
            print_dataset_stats(exporter.describe_dataset(data))

        if not args.stdout and not args.quiet:
            print(
                f"{STATUS_INFO} Formats: "
                f"{', '.join(args.format)}"
            )

        return export_formats(
            exporter, data, args.format, build_options(args),
            to_stdout=args.stdout,
        )

    except ValueError as e:
        print(f"\n{STATUS_FAIL} Error: {e}", file=sys.stderr)
        return 1

    except OSError as e:
        print(f"\n{STATUS_FAIL} Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
