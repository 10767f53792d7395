"""File system operations: locating target files and ignore handling."""

import os
import pathlib

import pathspec

from rustenumdoc.constants import TARGET_FILE_NAME


def _raise(error: OSError):
    raise error


def build_ignore_spec(
    root_dir: pathlib.Path,
    patterns: list[str] | None = None,
    use_gitignore: bool = False,
) -> pathspec.PathSpec | None:
    """Combine explicit exclude patterns with the root .gitignore.

    Args:
        root_dir: Directory being scanned
        patterns: Gitignore-style patterns given on the command line
        use_gitignore: Whether to also load `root_dir/.gitignore`

    Returns:
        PathSpec of all patterns, or None when there is nothing to ignore
    """
    all_patterns = list(patterns or [])

    if use_gitignore:
        gitignore_path = root_dir / ".gitignore"
        if gitignore_path.is_file():
            with open(gitignore_path, encoding="utf-8", errors="ignore") as f:
                all_patterns.extend(f.readlines())

    if not all_patterns:
        return None
    return pathspec.GitIgnoreSpec.from_lines(all_patterns)


def _is_ignored(
    spec: pathspec.PathSpec, path: pathlib.Path, root: pathlib.Path, is_dir: bool
) -> bool:
    relative = str(path.relative_to(root)).replace(os.sep, "/")
    # Trailing slash so directory patterns like "target/" match
    if is_dir:
        relative += "/"
    return spec.match_file(relative)


def find_target_files(
    start_path: str | os.PathLike,
    target_name: str = TARGET_FILE_NAME,
    ignore_spec: pathspec.PathSpec | None = None,
) -> list[pathlib.Path]:
    """Recursively collect every file named `target_name` under `start_path`.

    Symlinked directories are followed. Every entry is stat-ed, so a dangling
    link or a directory that cannot be listed, including the root itself,
    raises and aborts the walk.

    Args:
        start_path: Directory to start scanning from
        target_name: Exact, case-sensitive base name to match
        ignore_spec: Optional patterns for paths to prune, relative to `start_path`

    Returns:
        Matching file paths in directory enumeration order
    """
    root = pathlib.Path(start_path)
    found = []

    for dirpath, dirs, files in os.walk(root, topdown=True, onerror=_raise, followlinks=True):
        dir_path = pathlib.Path(dirpath)

        if ignore_spec is not None:
            dirs[:] = [d for d in dirs if not _is_ignored(ignore_spec, dir_path / d, root, True)]

        for filename in files:
            file_path = dir_path / filename
            # Dangling links and vanished entries raise here
            file_path.stat()
            if filename != target_name:
                continue
            if ignore_spec is not None and _is_ignored(ignore_spec, file_path, root, False):
                continue
            found.append(file_path)

    return found
