"""rustenumdoc: Markdown tables for Rust enum-to-string conversions.

This package scans a directory for `types.rs` files, extracts the string
literals of their `impl From<Type> for &str` blocks, and renders them as
Markdown tables.
"""

from rustenumdoc.cli import main
from rustenumdoc.models import ConversionBlock, FileSection

__version__ = "0.1.0"
__all__ = ["main", "ConversionBlock", "FileSection"]
