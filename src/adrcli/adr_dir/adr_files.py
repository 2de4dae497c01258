"""Create, read, scan and update the ADR files of a directory."""

import logging
import os
import re
import shutil
import tempfile
from dataclasses import dataclass, field
from typing import Optional

from adrcli.adr_dir.scanner import MAX_INDEX, file_index, list_adr_files, next_index
from adrcli.record.parser import STATUS_HEADER, InvalidFormatError, parse
from adrcli.record.record import ADRRecord, StatusEntry
from adrcli.record.renderer import filename_for, render

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScannedRecord:
    path: str
    record: ADRRecord


@dataclass(frozen=True)
class RecordError:
    path: str
    error: Exception

    def __str__(self):
        return f"Failed to parse {self.path}: {self.error}"


@dataclass
class ScanResult:
    records: list[ScannedRecord] = field(default_factory=list)
    errors: list[RecordError] = field(default_factory=list)


def atomic_write(file_path: str, content: str) -> None:
    """Write content to file atomically using temp file + rename."""
    dir_name = os.path.dirname(os.path.abspath(file_path))
    fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(content)
        if os.path.exists(file_path):
            shutil.copymode(file_path, tmp_path)
        os.replace(tmp_path, file_path)
    except Exception:
        os.unlink(tmp_path)
        raise


def create_adr_file(directory: str, title: str, today: str) -> str:
    """Write a new ADR for title into directory and return its path.

    The directory is created if missing. The file gets the next free index.
    """
    title = title.strip()
    if not title:
        raise ValueError("Title must not be empty")
    if "\n" in title or "\r" in title:
        raise ValueError("Title must be a single line")
    os.makedirs(directory, exist_ok=True)
    index = next_index(directory)
    if index > MAX_INDEX:
        raise ValueError(f"No index left in {directory}: {MAX_INDEX} is the highest ADR index")
    path = os.path.join(directory, filename_for(title, index))
    with open(path, "xb") as f:
        f.write(render(title, index, today))
    logger.debug("Created %s with index %d", path, index)
    return path


def read_record(path: str) -> ADRRecord:
    """Parse an ADR file. The index in its title must match its filename."""
    with open(path, "r", encoding="utf-8") as f:
        record = parse(f)
    expected = file_index(os.path.basename(path))
    if expected is not None and record.index != expected:
        raise InvalidFormatError(
            f"title index {record.index} does not match filename index {expected}"
        )
    return record


def scan_records(directory: str, pattern: Optional[re.Pattern] = None) -> ScanResult:
    """Parse every ADR file in directory, optionally only those matching pattern.

    A file that cannot be read or parsed is reported in ``errors`` and the
    scan goes on. Errors listing the directory itself propagate.
    """
    result = ScanResult()
    for path in list_adr_files(directory):
        try:
            if pattern is not None and not _file_matches(path, pattern):
                continue
            result.records.append(ScannedRecord(path, read_record(path)))
        except (InvalidFormatError, OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping %s: %s", path, e)
            result.errors.append(RecordError(path, e))
    return result


def _file_matches(path: str, pattern: re.Pattern) -> bool:
    with open(path, "r", encoding="utf-8") as f:
        return pattern.search(f.read()) is not None


def find_adr_file(directory: str, index: int) -> str:
    """Return the path of the ADR file with the given index.

    Raises ValueError if no file or more than one file has that index.
    """
    matches = [
        path for path in list_adr_files(directory)
        if file_index(os.path.basename(path)) == index
    ]
    if not matches:
        raise ValueError(f"ADR {index} not found in {directory}")
    if len(matches) > 1:
        names = ", ".join(os.path.basename(m) for m in matches)
        raise ValueError(f"ADR {index} is ambiguous: {names}")
    return matches[0]


def append_status(path: str, entry: StatusEntry) -> ADRRecord:
    """Add entry after the last status line of an ADR file.

    The file must parse cleanly first. Returns the updated record.
    """
    read_record(path)
    with open(path, "r", encoding="utf-8") as f:
        lines = f.read().split("\n")
    lines.insert(_status_insert_position(lines), entry.to_line())
    atomic_write(path, "\n".join(lines))
    return read_record(path)


def _status_insert_position(lines: list[str]) -> int:
    header = next(i for i, line in enumerate(lines) if line[:len(STATUS_HEADER)] == STATUS_HEADER)
    last = header
    for i in range(header + 1, len(lines)):
        if not lines[i].strip():
            continue
        if lines[i].startswith('#'):
            break
        last = i
    return last + 1
