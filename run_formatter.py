#!/usr/bin/env python3
# run_formatter.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Command-line interface for trigger point formatting with configurable logging levels

import sys
import argparse
from typing import Optional, Sequence

from core import format_trigger_point
from parser.exceptions import ParseError
from renderer.exceptions import RenderError
from utils.document_reader import (
    read_document,
    write_output,
    DocumentReadError,
    STDIN_MARKER,
)
from utils.logger import configure_logging, get_logger

EXIT_OK = 0
EXIT_RENDER_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_FILE_ERROR = 3
EXIT_INTERRUPTED = 4
EXIT_UNEXPECTED = 5


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="trigpoint",
        description="Render a trigger point document as a readable boolean expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_formatter.py trigger_point.xml
  python run_formatter.py trigger_point.xml -o expression.txt
  cat trigger_point.xml | python run_formatter.py
  python run_formatter.py trigger_point.xml --strict-markers --debug

Document format:
  <TriggerPoint>
    <ConditionTypeCNF>1</ConditionTypeCNF>
    <SPT>
      <Group>0</Group>
      <Method>INVITE</Method>
    </SPT>
  </TriggerPoint>
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        default=STDIN_MARKER,
        help="Path to the trigger point document (default: standard input)",
    )

    parser.add_argument(
        "-o",
        "--output",
        default=STDIN_MARKER,
        help="Write the expression to this file (default: standard output)",
    )

    parser.add_argument(
        "--strict-markers",
        action="store_true",
        help="Require exactly one ConditionTypeCNF/ConditionTypeDNF marker with value 1",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the trigger point formatter.

    Args:
        argv: Command line arguments, sys.argv[1:] when None

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        content = read_document(args.input)
        origin = "standard input" if args.input == STDIN_MARKER else args.input
        logger.info(f"📋 Document loaded from {origin}")

        expression = format_trigger_point(content, strict_markers=args.strict_markers)
        write_output(expression, args.output)

        logger.info("✅ Expression rendered")
        return EXIT_OK

    except ParseError as e:
        logger.error("Failed to parse trigger point document")
        logger.debug(f"Parse error detail: {e}")
        return EXIT_PARSE_ERROR

    except RenderError as e:
        logger.error(f"Cannot render trigger point: {e}")
        return EXIT_RENDER_ERROR

    except DocumentReadError as e:
        logger.error(f"Document file error: {e}")
        return EXIT_FILE_ERROR

    except KeyboardInterrupt:
        logger.error("Formatting interrupted by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        traceback.print_exc()
        return EXIT_UNEXPECTED


if __name__ == "__main__":
    sys.exit(main())
