"""
Main entry point for the csvToJson package when run as a module.

Uses Python 3.10+ type annotations.
"""

import sys
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from csvToJson.config import ConfigManager, get_config, get_output_options, set_config_manager
from csvToJson.converter import CSVConverter
from csvToJson.error_formatter import format_error, get_error_summary
from csvToJson.errors import CsvToJsonError
from csvToJson.exporters import JsonExporter
from csvToJson.logging_config import configure_logging
from csvToJson.session import SAMPLE_CSV, ConverterSession, Notification, load_csv_upload

# Set up logger
logger = logging.getLogger("csvToJson")


def setup_argparse():
    """
    Set up command-line argument parsing.
    """
    import argparse

    parser = argparse.ArgumentParser(
        prog="csvtojson",
        description="Convert CSV text into a formatted JSON array of objects"
    )
    
    # Input options
    parser.add_argument(
        "files",
        nargs="*",
        help="CSV files to convert ('-' reads standard input)"
    )
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read CSV text from standard input"
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Convert the built-in sample data"
    )
    
    # Output options
    parser.add_argument(
        "--output", "-o",
        type=Path,
        help="Write JSON to this .json file instead of standard output (single input only)"
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Write <name>.json for each input file into this directory"
    )
    parser.add_argument(
        "--highlight",
        choices=["none", "ansi", "html"],
        default="none",
        help="Syntax highlighting for JSON printed to standard output (default: none)"
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        help="Also copy the JSON output to the clipboard"
    )
    
    # Configuration file parameters
    parser.add_argument(
        "--config",
        help="Path to configuration file (YAML or JSON)"
    )
    parser.add_argument(
        "--profile",
        default="default",
        help="Configuration profile to use"
    )
    parser.add_argument(
        "--env-file",
        help="Path to a .env file with CSVTOJSON_* settings"
    )
    
    # Logging options
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        default="warning",
        help="Set logging level (default: warning)"
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Output logs in JSON format"
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to specified file"
    )
    
    return parser


def check_input_arguments(parser, args) -> None:
    """
    Reject input combinations where one source would silently win over another.
    
    Exits through parser.error() on a conflict.
    """
    if args.sample and (args.stdin or args.files):
        parser.error("--sample cannot be combined with --stdin or input files")
    if args.stdin and args.files:
        parser.error("--stdin cannot be combined with input files")
    if "-" in args.files and len(args.files) > 1:
        parser.error("'-' reads standard input and cannot be combined with other inputs")


def _print_error(error: Exception) -> None:
    print(format_error(error, use_colors=sys.stderr.isatty()), file=sys.stderr)


def _configured_dir(key: str) -> Optional[Path]:
    value = get_config(key)
    return Path(value) if value else None


def _report(notification: Notification) -> None:
    """Show destructive notifications on stderr; log the rest."""
    if notification.variant == "destructive":
        print(f"{notification.title}: {notification.description}", file=sys.stderr)
    else:
        logger.info("%s: %s", notification.title, notification.description)


def convert_single(args, csv_text: str, options: dict) -> int:
    """
    Convert one block of CSV text and write it to stdout or --output.
    
    Returns:
        Exit code (0 for success, 1 for failure)
    """
    output: Optional[Path] = args.output
    exporter = JsonExporter(
        export_dir=output.parent if output else None,
        filename=output.name if output else options["download_filename"],
        encoding=options["encoding"]
    )
    session = ConverterSession(
        csv_input=csv_text,
        exporter=exporter,
        notify=_report,
        indent=options["indent"],
        delay=options["delay"],
        encoding=options["encoding"]
    )
    
    if not session.parse():
        print(f"Error: {session.error}", file=sys.stderr)
        return 1
        
    if output:
        if session.download() is None:
            return 1
    else:
        print(session.render(args.highlight))
        
    if args.copy and not session.copy():
        return 1
        
    return 0


def convert_files(args, paths: Sequence[Path], options: dict) -> int:
    """
    Convert CSV files to <name>.json files.
    
    Returns:
        Exit code (0 if every file converted, 1 otherwise)
    """
    converter = CSVConverter(
        output_dir=args.output_dir or _configured_dir("export_dir"),
        encoding=options["encoding"],
        indent=options["indent"]
    )
    
    failures = 0
    for path in paths:
        try:
            json_path = converter.convert_file(path)
            print(json_path)
        except CsvToJsonError as e:
            failures += 1
            logger.info("Failed to convert %s", path, extra={"error": get_error_summary(e)})
            _print_error(e)
            
    logger.info("Converted %d of %d files", len(paths) - failures, len(paths))
    return 1 if failures else 0


def handle_convert_command(args) -> int:
    """
    Convert the requested inputs.
    
    Args:
        args: Command-line arguments
        
    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        options = get_output_options()
    except CsvToJsonError as e:
        _print_error(e)
        return 1
        
    read_stdin = args.stdin or args.files == ["-"]
    paths = [Path(f) for f in args.files if f != "-"]
    
    if args.sample:
        return convert_single(args, SAMPLE_CSV, options)
        
    if read_stdin:
        return convert_single(args, sys.stdin.read(), options)
        
    if not paths:
        logger.error("No input given. Pass CSV files, '-' or --stdin, or --sample.")
        return 1
        
    if len(paths) == 1 and not args.output_dir:
        try:
            csv_text = load_csv_upload(paths[0], options["encoding"])
        except CsvToJsonError as e:
            _print_error(e)
            return 1
        return convert_single(args, csv_text, options)
        
    if args.output:
        logger.error("--output accepts a single input; use --output-dir for several files")
        return 1
        
    return convert_files(args, paths, options)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the csvToJson module.
    
    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = setup_argparse()
    args = parser.parse_args(argv)
    check_input_arguments(parser, args)
    
    configure_logging(
        level=args.log_level.upper(),
        json_output=args.json_logs,
        log_file=args.log_file
    )
    
    if args.env_file:
        load_dotenv(dotenv_path=args.env_file)
    else:
        load_dotenv()
    
    if args.config or args.profile != "default":
        set_config_manager(ConfigManager(config_file=args.config, profile=args.profile))
        
        if args.config:
            logger.info("Using configuration file: %s (profile: %s)", args.config, args.profile)
        else:
            logger.info("Using configuration profile: %s", args.profile)
    
    try:
        return handle_convert_command(args)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        return 130  # Standard Unix exit code for SIGINT
    except Exception as e:
        logger.critical("Unhandled exception: %s", str(e), exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
