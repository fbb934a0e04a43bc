"""Recursive directory scan"""

from pathlib import Path
from typing import Iterator, Optional, Union

from ..utils.logger import logger


def scan(root: Union[str, Path], max_depth: Optional[int] = None) -> Iterator[Path]:
    """
    Walk ``root`` depth-first and yield every entry beneath it

    The root itself is yielded first. Children are visited in sorted
    name order so that repeated runs over the same tree yield the same
    sequence. Symlinked directories are yielded but not followed.
    Directories that cannot be listed are skipped, never raised.

    Args:
        root: Directory to start from
        max_depth: Deepest level to descend to (root is depth 0), or None
            for no limit

    Yields:
        Paths of files and directories, in pre-order
    """
    root = Path(root)
    yield root
    yield from _walk(root, 1, max_depth)


def _walk(directory: Path, depth: int, max_depth: Optional[int]) -> Iterator[Path]:
    if max_depth is not None and depth > max_depth:
        return

    try:
        children = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        # Not a directory, permission denied, or removed mid-scan
        if directory.is_dir():
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
        return

    for child in children:
        yield child
        try:
            descend = child.is_dir() and not child.is_symlink()
        except OSError as e:
            logger.debug(f"Skipping unreadable entry {child}: {e}")
            continue
        if descend:
            yield from _walk(child, depth + 1, max_depth)
