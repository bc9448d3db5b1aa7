"""Recursive discovery of archive files."""

import logging
import os
from pathlib import Path

from ..config import ARCHIVE_EXTENSIONS, TraversalError

logger = logging.getLogger(__name__)


def is_archive_file(path: Path) -> bool:
    """Check whether a file looks like an archive, by extension only."""
    return path.suffix.lower() in ARCHIVE_EXTENSIONS


def locate_archives(root_dir: Path) -> list[Path]:
    """Walk root_dir recursively and collect archive paths.

    Directories and files are visited depth-first in sorted order. The walk
    either completes or fails as a whole.

    Args:
        root_dir: Directory to scan

    Returns:
        Archive paths in traversal order

    Raises:
        TraversalError: If root_dir is not a readable directory or any
            directory below it cannot be listed
    """
    root = Path(root_dir)
    if not root.is_dir():
        raise TraversalError(f"Input directory '{root}' does not exist or is not a directory")

    def on_error(err: OSError):
        raise TraversalError(f"Cannot read '{err.filename}': {err.strerror or err}") from err

    archives = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if is_archive_file(path):
                archives.append(path)

    logger.debug("Found %d archives under '%s'", len(archives), root)
    return archives
