"""Extraction of enum-to-string mappings from Rust source text."""

import os
import pathlib

from rustenumdoc.constants import FROM_IMPL_HEADER_PATTERN, FROM_IMPL_PATTERN, MAPPING_PATTERN
from rustenumdoc.models import ConversionBlock, FileSection


def extract_mappings(body: str) -> list[str]:
    """Collect the string literals of all `=> "literal"` arms in a block body.

    Examples:
        >>> extract_mappings('A => "a", B => "b",')
        ['a', 'b']
    """
    return MAPPING_PATTERN.findall(body)


def _balanced_body(text: str, start: int) -> tuple[str, int]:
    """Return the text up to the brace matching an already opened one.

    Args:
        text: Full source text
        start: Index just past the opening brace

    Returns:
        Tuple of (body, index just past the closing brace). Unbalanced input
        runs to the end of `text`.
    """
    depth = 1
    for i in range(start, len(text)):
        char = text[i]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:i], i + 1
    return text[start:], len(text)


def _iter_balanced(text: str):
    pos = 0
    while True:
        match = FROM_IMPL_HEADER_PATTERN.search(text, pos)
        if match is None:
            return
        body, pos = _balanced_body(text, match.end())
        yield match.group(1), body


def extract_blocks(text: str, balanced: bool = False) -> list[ConversionBlock]:
    """Find every `impl From<Type> for &str` block in `text`.

    By default the body ends at the first closing brace after the header, so a
    nested `{ ... }` inside the body cuts it short. With `balanced` the body
    runs to the matching closing brace instead.

    Args:
        text: Full contents of a source file
        balanced: Count brace depth instead of stopping at the first `}`

    Returns:
        Conversion blocks in order of appearance
    """
    if balanced:
        pairs = _iter_balanced(text)
    else:
        pairs = (match.groups() for match in FROM_IMPL_PATTERN.finditer(text))

    return [
        ConversionBlock(type_name=type_name, body=body, mappings=extract_mappings(body))
        for type_name, body in pairs
    ]


def section_heading(file_path: str | os.PathLike) -> str:
    """Heading for a file: its parent directory name, first letter upper-cased.

    Examples:
        >>> section_heading("src/kit/types.rs")
        'Kit'
        >>> section_heading("src/object/sound_page/types.rs")
        'Sound_page'
    """
    name = pathlib.Path(os.path.abspath(file_path)).parent.name
    return name[:1].upper() + name[1:]


def process_file(file_path: pathlib.Path, balanced: bool = False) -> FileSection:
    """Read one target file and extract its conversion blocks.

    Invalid UTF-8 bytes are replaced with U+FFFD. Read errors are not caught.
    """
    with open(file_path, encoding="utf-8", errors="replace") as f:
        content = f.read()

    return FileSection(
        path=file_path,
        heading=section_heading(file_path),
        blocks=extract_blocks(content, balanced),
    )
