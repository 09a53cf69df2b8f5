"""
File Utilities Module.

Provides reusable functions for file system operations including:
- File extension extraction from names or paths
- Shallow directory listing
- Depth-bounded recursive directory walking

Directory checks follow symbolic links, so a link to a directory counts
as a directory and is excluded from listings.
"""

import os
from pathlib import Path
from typing import Iterator, List, Optional, Set, Union

from filestools.logging_config import get_logger


logger = get_logger(__name__)

PathType = Union[str, os.PathLike]


def get_file_extension(file_path: PathType) -> Optional[str]:
    """
    Get the extension of a file name or path, case preserved.

    Only the final path segment is inspected. Everything after the last
    dot is returned, which may be an empty string when the name ends in
    a dot. A leading dot counts, so dotfiles have an extension.

    Args:
        file_path: Bare file name or full path

    Returns:
        Extension without the dot, or None if the name has no dot

    Example:
        >>> get_file_extension("/path/to/archive.tar.gz")
        'gz'
        >>> get_file_extension("README") is None
        True
        >>> get_file_extension("trailing.")
        ''
    """
    name = os.path.basename(os.fspath(file_path))
    dot_index = name.rfind('.')
    if dot_index == -1:
        return None
    return name[dot_index + 1:]


def list_files_shallow(directory: PathType) -> Set[str]:
    """
    List the names of files directly inside a directory.

    Args:
        directory: Directory to list

    Returns:
        Set of bare file names; subdirectories are excluded

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
        PermissionError: If the directory cannot be listed
    """
    names = {path.name for path in Path(directory).iterdir() if not path.is_dir()}

    logger.debug("listed_files", directory=os.fspath(directory), count=len(names))
    return names


def _walk(path: Path, depth: int, max_depth: int) -> Iterator[Path]:
    """Pre-order walk yielding path, then its children while depth allows."""
    yield path

    if depth >= max_depth or not path.is_dir():
        return

    # Finish listing before descending so only one directory handle is open
    children = list(path.iterdir())

    for child in children:
        yield from _walk(child, depth + 1, max_depth)


def list_files_deep(directory: PathType, max_depth: int) -> List[Path]:
    """
    Walk a directory tree up to max_depth levels and collect file paths.

    The start directory is depth 0, so max_depth=0 yields nothing for a
    directory and max_depth=1 yields only its immediate files. Symbolic
    links are followed. Link cycles are not detected; only max_depth
    bounds the recursion.

    Args:
        directory: Directory to walk
        max_depth: Maximum number of levels to descend

    Returns:
        Paths (joined onto directory) in pre-order walk order

    Raises:
        ValueError: If max_depth is negative
        FileNotFoundError: If the start path does not exist (dangling links are files)
        PermissionError: If a directory cannot be listed

    Example:
        >>> list_files_deep("/data/source", 2)
        [PosixPath('/data/source/a.txt'), PosixPath('/data/source/sub/b.txt')]
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")

    root = Path(directory)
    # Fail on a missing start path even when nothing would be listed;
    # a dangling link is still a path of its own
    try:
        root.stat()
    except FileNotFoundError:
        root.lstat()

    files = [path for path in _walk(root, 0, max_depth) if not path.is_dir()]

    logger.debug(
        "walked_files",
        directory=str(root),
        max_depth=max_depth,
        count=len(files),
    )
    return files
