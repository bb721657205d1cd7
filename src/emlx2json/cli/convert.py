"""
Command-line interface for message conversion.

Converts Apple Mail .emlx (or .eml) files to JSON.

Usage:
    # Single file
    emlx2json 12345.emlx

    # Legacy flat shape with summary
    emlx2json 12345.emlx --flat --summary

    # Directory batch processing
    emlx2json ~/Library/Mail/V10/ --output messages.jsonl
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from emlx2json.config import settings
from emlx2json.logging_config import setup_logging
from emlx2json.parsing.emlx_parser import parse_file
from emlx2json.summary import summarize

logger = structlog.get_logger(__name__)


def process_single_file(
    message_path: Path,
    flat: bool = False,
    include_summary: bool = False,
    verbose: bool = False,
) -> dict:
    """
    Parse a single message file into a JSON-ready dict.

    Args:
        message_path: Path to .emlx/.eml file
        flat: Render headers at top level next to "parts"
        include_summary: Attach a "summary" entry
        verbose: Enable verbose output

    Returns:
        Parsed message as dict

    Raises:
        OSError: If the file cannot be read
    """
    if verbose:
        logger.info("processing_file", path=str(message_path))

    message = parse_file(message_path)
    result = message.to_flat_dict() if flat else message.model_dump()

    if include_summary:
        result["summary"] = summarize(message).model_dump()

    if verbose:
        logger.info(
            "file_parsed",
            path=str(message_path),
            headers_count=len(message.headers),
            parts_count=len(message.parts),
        )

    return result


def find_message_files(dir_path: Path) -> List[Path]:
    """
    Find message files below a directory, sorted by path.

    Args:
        dir_path: Directory path

    Returns:
        Paths whose suffix is one of settings.allowed_extensions
    """
    extensions = settings.extension_list()
    return sorted(
        path for path in dir_path.rglob("*")
        if path.is_file() and path.suffix.lower() in extensions
    )


def process_directory(
    dir_path: Path,
    flat: bool = False,
    include_summary: bool = False,
    verbose: bool = False,
) -> List[dict]:
    """
    Parse all message files in a directory.

    Files that cannot be read are logged and skipped.

    Args:
        dir_path: Directory path
        flat: Render headers at top level next to "parts"
        include_summary: Attach a "summary" entry
        verbose: Enable verbose output

    Returns:
        List of parsed messages
    """
    message_files = find_message_files(dir_path)

    if not message_files:
        logger.warning("no_message_files_found", directory=str(dir_path))
        return []

    logger.info("processing_directory", files_count=len(message_files))

    results = []
    errors = []

    for idx, message_file in enumerate(message_files, 1):
        try:
            if verbose:
                print(f"[{idx}/{len(message_files)}] Processing {message_file.name}...", file=sys.stderr)

            results.append(
                process_single_file(
                    message_path=message_file,
                    flat=flat,
                    include_summary=include_summary,
                    verbose=verbose,
                )
            )

        except OSError as e:
            logger.error("file_processing_failed", file=str(message_file), error=str(e))
            errors.append({"file": str(message_file), "error": str(e)})

    logger.info(
        "directory_processing_completed",
        total=len(message_files),
        success=len(results),
        errors=len(errors),
    )

    return results


def write_output(results: List[dict], output_path: Optional[Path], format: str = "jsonl"):
    """
    Write results to file or stdout.

    Args:
        results: List of parsed messages
        output_path: Output file path (None for stdout)
        format: Output format ("json" or "jsonl")
    """
    if not output_path:
        if format == "jsonl":
            for result in results:
                print(json.dumps(result, ensure_ascii=False))
        else:
            print(json.dumps(results, ensure_ascii=False, indent=2))
        return

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        if format == "jsonl":
            for result in results:
                f.write(json.dumps(result, ensure_ascii=False) + "\n")
        else:
            json.dump(results, f, ensure_ascii=False, indent=2)

    logger.info("output_written", path=str(output_path), count=len(results))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="emlx2json",
        description="Convert Apple Mail .emlx/.eml messages to JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file
  %(prog)s 12345.emlx

  # Whole mailbox, one JSON document per line
  %(prog)s ~/Library/Mail/V10/ --output messages.jsonl

  # Legacy flat shape with summaries
  %(prog)s 12345.emlx --flat --summary
        """,
    )

    parser.add_argument(
        "input",
        type=str,
        help="Path to a message file or a directory containing message files",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output file path (default: stdout). Format auto-detected from extension (.json or .jsonl)",
    )
    parser.add_argument(
        "--format",
        "-f",
        type=str,
        choices=["json", "jsonl"],
        default="jsonl",
        help="Output format (default: jsonl)",
    )
    parser.add_argument(
        "--flat",
        action="store_true",
        help="Put header fields at the top level next to 'parts'",
    )
    parser.add_argument(
        "--summary",
        "-s",
        action="store_true",
        help="Attach a summary (uuid, UTC date, contacts, preview)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    input_path = Path(args.input)

    if not input_path.exists():
        print(f"Error: Path not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    try:
        if input_path.is_file():
            results = [
                process_single_file(
                    message_path=input_path,
                    flat=args.flat,
                    include_summary=args.summary,
                    verbose=args.verbose,
                )
            ]

        elif input_path.is_dir():
            results = process_directory(
                dir_path=input_path,
                flat=args.flat,
                include_summary=args.summary,
                verbose=args.verbose,
            )

        else:
            print(f"Error: Invalid input path: {input_path}", file=sys.stderr)
            sys.exit(1)

        output_path = Path(args.output) if args.output else None

        # Auto-detect format from file extension
        if output_path and args.format == "jsonl" and output_path.suffix == ".json":
            format = "json"
        else:
            format = args.format

        write_output(results, output_path, format)

        if args.verbose:
            print(f"\nProcessed {len(results)} messages", file=sys.stderr)

    except Exception as e:
        logger.error("cli_failed", error=str(e), exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
