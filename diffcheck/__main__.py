"""
diffcheck Entry Point
=====================

Command-line interface: loads two documents, aligns them and prints the
result.

Usage:
    python -m diffcheck <source_a> [source_b] [--case-sensitive]
        [--ignore-whitespace] [--format unified|json|html] [--output PATH]
        [--no-line-numbers] [--stats] [-v|--verbose]

Exit status is 0 when the documents match under the chosen options, 1 when
they differ and 2 when the input cannot be read.
"""
import argparse
import logging
import sys

from .engine import DiffEngine
from .exceptions import DiffCheckError
from .input_controller import InputController
from .visualizer import HTMLVisualizer, format_json, format_stats, format_unified

# Default Configuration
DEFAULT_CONFIG = {
    "case_sensitive": False,
    "ignore_whitespace": False,
    "format": "unified",
    "line_numbers": True,
}

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="diffcheck",
        description="diffcheck: line-by-line text comparison")
    parser.add_argument("source_a", help="Original file, or a single combined/xml file")
    parser.add_argument("source_b", nargs="?", help="Modified file (optional)")
    parser.add_argument("--case-sensitive", action="store_true",
                        default=DEFAULT_CONFIG["case_sensitive"],
                        help="Treat lines differing only in case as different")
    parser.add_argument("--ignore-whitespace", action="store_true",
                        default=DEFAULT_CONFIG["ignore_whitespace"],
                        help="Collapse whitespace runs and trim lines before comparing")
    parser.add_argument("--format", choices=("unified", "json", "html"),
                        default=DEFAULT_CONFIG["format"], help="Output format")
    parser.add_argument("-o", "--output", help="Write the output to this file instead of stdout")
    parser.add_argument("--no-line-numbers", dest="line_numbers", action="store_false",
                        default=DEFAULT_CONFIG["line_numbers"],
                        help="Hide line numbers in unified and html output")
    parser.add_argument("--stats", action="store_true",
                        help="Print comparison statistics to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _write_output(args, result):
    if args.format == "html":
        visualizer = HTMLVisualizer(show_line_numbers=args.line_numbers)
        if args.output:
            path = visualizer.generate(result, args.output)
            print(f"Report written to {path}", file=sys.stderr)
        else:
            print(visualizer.render(result))
        return

    if args.format == "json":
        output = format_json(result)
    else:
        output = format_unified(result, show_line_numbers=args.line_numbers)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output + "\n")
    else:
        print(output)


def main(argv=None) -> int:
    """
    Main execution function.

    1. Parses command line arguments.
    2. Loads both documents.
    3. Aligns them under the requested options.
    4. Renders the result to stdout or --output.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        left_text, right_text = InputController().parse(args.source_a, args.source_b)
        engine = DiffEngine({
            "case_sensitive": args.case_sensitive,
            "ignore_whitespace": args.ignore_whitespace,
        })
        result = engine.compare(left_text, right_text)
    except DiffCheckError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        _write_output(args, result)
    except OSError as e:
        print(f"Error: cannot write output: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.stats:
        print(format_stats(result), file=sys.stderr)

    return EXIT_SAME if result.identical else EXIT_DIFFERENT


if __name__ == "__main__":
    sys.exit(main())
