"""Directory scanner and index allocator for ADR directories."""

import errno
import logging
import os
import re
import stat

logger = logging.getLogger(__name__)

ADR_EXTENSION = ".md"

_INDEX_PREFIX_RE = re.compile(r'^(\d{4})(?!\d)')

# Indices are written as exactly four digits.
MAX_INDEX = 9999


def file_index(filename: str) -> int | None:
    """Return the 4-digit index prefix of a filename, or None."""
    m = _INDEX_PREFIX_RE.match(filename)
    return int(m.group(1)) if m else None


def is_adr_file(filename: str) -> bool:
    return file_index(filename) is not None and filename.endswith(ADR_EXTENSION)


def _require_directory(directory: str) -> None:
    # os.stat raises FileNotFoundError for a missing path
    if not stat.S_ISDIR(os.stat(directory).st_mode):
        raise NotADirectoryError(errno.ENOTDIR, "Cannot read dir: is not a directory", str(directory))


def current_index(directory: str) -> int:
    """Return the largest index among the directory's files, or 0 if there is none.

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
    """
    _require_directory(directory)
    highest = 0
    with os.scandir(directory) as entries:
        for entry in entries:
            if entry.is_dir():
                continue
            index = file_index(entry.name)
            if index is not None and index > highest:
                highest = index
    logger.debug("Current ADR index in %s is %d", directory, highest)
    return highest


def next_index(directory: str) -> int:
    """Index for the next new ADR. A missing directory starts at 1."""
    try:
        return current_index(directory) + 1
    except FileNotFoundError:
        logger.debug("ADR directory %s does not exist yet", directory)
        return 1


def list_adr_files(directory: str) -> list[str]:
    """Paths of the ADR files in a directory, in filename order."""
    names = sorted(os.listdir(directory))
    return [
        os.path.join(directory, name)
        for name in names
        if is_adr_file(name) and not os.path.isdir(os.path.join(directory, name))
    ]
