"""Data models for rustenumdoc."""

import pathlib
from dataclasses import dataclass, field


@dataclass
class ConversionBlock:
    """One `impl From<Type> for &str` block found in a source file.

    Attributes:
        type_name: Type name as written in the source
        body: Raw text captured between the braces
        mappings: String literals from the `=> "..."` arms, in source order
    """

    type_name: str
    body: str
    mappings: list[str] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.type_name.lower()


@dataclass
class FileSection:
    """Everything extracted from a single target file.

    Attributes:
        path: Path of the target file
        heading: Section heading derived from the parent directory name
        blocks: Conversion blocks in order of appearance
    """

    path: pathlib.Path
    heading: str
    blocks: list[ConversionBlock] = field(default_factory=list)
