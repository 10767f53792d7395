"""Markdown output generation utilities."""

import math
import pathlib
import sys
from typing import TextIO

import pathspec
from tqdm import tqdm

from rustenumdoc.constants import (
    NUM_COLS,
    TABLE_BLANK_HEADER,
    TABLE_FIRST_HEADER,
    TABLE_FIRST_SEPARATOR,
    TABLE_SEPARATOR,
    TARGET_FILE_NAME,
)
from rustenumdoc.extraction import process_file
from rustenumdoc.file_operations import find_target_files
from rustenumdoc.models import FileSection


def format_as_table(mappings: list[str], num_cols: int = NUM_COLS) -> str:
    """Lay out mapping values as a Markdown table.

    Values fill down each column before moving to the next one. Cells past
    the end of `mappings` are left blank.

    Args:
        mappings: Values to lay out, in order
        num_cols: Number of table columns

    Returns:
        Markdown-formatted table as a string

    Examples:
        >>> print(format_as_table(["a", "b", "c", "d"]), end="")
        | Variants | &nbsp; | &nbsp; |
        |-------------------|-----------------------|-----------------------|
        | **a** | **c** | |
        | **b** | **d** | |
    """
    if num_cols < 1:
        raise ValueError(f"num_cols must be at least 1, got {num_cols}")

    headers = [TABLE_FIRST_HEADER] + [TABLE_BLANK_HEADER] * (num_cols - 1)
    separators = [TABLE_FIRST_SEPARATOR] + [TABLE_SEPARATOR] * (num_cols - 1)
    table = "| " + " | ".join(headers) + " |\n"
    table += "|" + "|".join(separators) + "|\n"

    num_rows = math.ceil(len(mappings) / num_cols)
    for row in range(num_rows):
        table += "|"
        for col in range(num_cols):
            index = col * num_rows + row
            if index < len(mappings):
                table += f" **{mappings[index]}** |"
            else:
                table += " |"
        table += "\n"

    return table


def render_section(section: FileSection) -> str:
    """Render the heading and one table per conversion block of a file."""
    output = f"### {section.heading}\n\n"
    for block in section.blocks:
        output += f"#### `{block.display_name}:`\n"
        output += format_as_table(block.mappings)
        output += "\n"
    return output


def generate_docs(
    target_dir: str,
    stream: TextIO,
    target_name: str = TARGET_FILE_NAME,
    balanced: bool = False,
    ignore_spec: pathspec.PathSpec | None = None,
    show_progress: bool = False,
    verbose: bool = False,
) -> list[FileSection]:
    """Scan `target_dir` and write one Markdown block per target file to `stream`.

    Each block is flushed before the next file is read, so output for earlier
    files survives a failure on a later one. Filesystem errors propagate.

    Args:
        target_dir: Directory to scan
        stream: Where the Markdown goes
        target_name: Base name of the files to document
        balanced: Delimit block bodies by brace depth
        ignore_spec: Optional patterns for paths to skip
        show_progress: Draw a progress bar on stderr
        verbose: Print per-file details on stderr

    Returns:
        The extracted sections, in output order
    """
    start_path = pathlib.Path(target_dir)
    file_paths = find_target_files(start_path, target_name, ignore_spec)
    if verbose:
        print(f"✓ Found {len(file_paths)} {target_name} files under {start_path}", file=sys.stderr)

    sections: list[FileSection] = []
    with tqdm(
        total=len(file_paths),
        desc="Processing",
        unit="file",
        file=sys.stderr,
        disable=not show_progress,
    ) as pbar:
        for file_path in file_paths:
            section = process_file(file_path, balanced)
            stream.write(render_section(section) + "\n")
            stream.flush()
            sections.append(section)
            if verbose:
                print(f"  ✓ {file_path} ({len(section.blocks)} blocks)", file=sys.stderr)
            pbar.update(1)

    if verbose:
        total_blocks = sum(len(s.blocks) for s in sections)
        print(f"✅ Documented {total_blocks} blocks from {len(sections)} files", file=sys.stderr)

    return sections
