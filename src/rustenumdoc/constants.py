"""Constants shared across rustenumdoc."""

import re

TARGET_FILE_NAME = "types.rs"

NUM_COLS = 3

# `impl From<Kind> for &str ... { ... }`; the body capture stops at the first `}`
FROM_IMPL_PATTERN = re.compile(r"impl From<(\w+)> for &str[\s\S]*?\{([\s\S]*?)\}")

# Same header, used when the body is delimited by counting braces instead
FROM_IMPL_HEADER_PATTERN = re.compile(r"impl From<(\w+)> for &str[\s\S]*?\{")

MAPPING_PATTERN = re.compile(r'=>\s*"([^"]*)"')

TABLE_FIRST_HEADER = "Variants"
TABLE_BLANK_HEADER = "&nbsp;"
TABLE_FIRST_SEPARATOR = "-" * 19
TABLE_SEPARATOR = "-" * 23
