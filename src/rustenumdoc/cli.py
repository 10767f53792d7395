"""Command-line interface for rustenumdoc."""

import argparse
import pathlib
import sys
from typing import TextIO

from rustenumdoc.constants import TARGET_FILE_NAME
from rustenumdoc.file_operations import build_ignore_spec
from rustenumdoc.output_generators import generate_docs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rustenumdoc",
        description=(
            "Generate Markdown tables of the string mappings found in "
            "`impl From<Type> for &str` blocks of Rust types files."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("directory", nargs="?", help="The directory to scan recursively.")
    parser.add_argument(
        "--target-name",
        default=TARGET_FILE_NAME,
        help="Exact file name to look for.",
    )
    parser.add_argument(
        "--balanced-braces",
        action="store_true",
        help="Match block bodies by brace depth instead of stopping at the first '}'.",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Gitignore-style pattern of paths to skip (repeatable).",
    )
    parser.add_argument(
        "--respect-gitignore",
        action="store_true",
        help="Also skip paths matched by the .gitignore in the scanned directory.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed processing information on stderr.",
    )
    return parser


def main(argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
    """Main entry point for the rustenumdoc CLI.

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    stream = stdout if stdout is not None else sys.stdout

    if args.directory is None:
        parser.print_usage(sys.stderr)
        print("Error: Please provide a directory path as an argument.", file=sys.stderr)
        return 1

    try:
        ignore_spec = build_ignore_spec(
            pathlib.Path(args.directory), args.exclude, args.respect_gitignore
        )
        generate_docs(
            args.directory,
            stream,
            target_name=args.target_name,
            balanced=args.balanced_braces,
            ignore_spec=ignore_spec,
            show_progress=args.progress,
            verbose=args.verbose,
        )
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
