"""Parse the lines of an ADR markdown file into an ADRRecord.

The grammar is positional. Ignoring blank lines, a file is read by a
finite-state machine that moves through these states in order:

    EXPECT_TITLE          "# 0001. Title"
    EXPECT_DATE           "2024-01-31" (optionally "Date: 2024-01-31")
    EXPECT_STATUS_HEADER  "## Status"
    COLLECT_STATUS        "2024-01-31 Accepted [optional](link.md)", repeated
    BODY                  everything from the next heading on

Any line that does not fit the current state fails the whole file with
InvalidFormatError.
"""

import enum
import re
from typing import Callable, Iterable, Optional

from adrcli.record.record import ADRRecord, StatusEntry

STATUS_HEADER = '## Status'

_BLANK_LINE_RE = re.compile(r'^\s*$')
_TITLE_RE = re.compile(r'^#\s*(?P<index>\d+)\.\s+(?P<title>\S.*)')
_DATE_RE = re.compile(
    r'^([Dd]ate:?\s+)?(?P<date>\d+-\d+-\d+)'
    r'(\s+(?P<status>\w+)\s*(?P<link>\[.*\]\(.*\))?)?'
)
_TAGS_RE = re.compile(r'^[Tt]ags:(?P<tags>.*)$')


class InvalidFormatError(ValueError):
    """An ADR file's content does not match the expected grammar."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.message = message
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class State(enum.Enum):
    EXPECT_TITLE = 'title line'
    EXPECT_DATE = 'date line'
    EXPECT_STATUS_HEADER = "'## Status' header"
    COLLECT_STATUS = 'status line'
    BODY = 'body'


# States in which the input may legitimately end.
_FINAL_STATES = {State.COLLECT_STATUS, State.BODY}


def parse(lines: Iterable[str]) -> ADRRecord:
    """Parse ADR lines into a record. Raises InvalidFormatError on a bad line."""
    return _RecordParser().run(lines)


def parse_status_line(line: str) -> Optional[StatusEntry]:
    """Parse a single "<date> <status> [link]" line, or return None."""
    m = _DATE_RE.match(line)
    if m is None or not m.group('status'):
        return None
    return StatusEntry(date=m.group('date'), status=m.group('status'), link=m.group('link'))


class _RecordParser:

    def __init__(self):
        self.record = ADRRecord()
        self.state = State.EXPECT_TITLE
        self._transitions: dict[State, Callable[[str], State]] = {
            State.EXPECT_TITLE: self._title,
            State.EXPECT_DATE: self._date,
            State.EXPECT_STATUS_HEADER: self._status_header,
            State.COLLECT_STATUS: self._status,
            State.BODY: self._body,
        }

    def run(self, lines: Iterable[str]) -> ADRRecord:
        line_number = 0
        for line_number, line in enumerate(lines, 1):
            line = line.rstrip('\r\n')
            if _BLANK_LINE_RE.match(line):
                continue
            try:
                self.state = self._transitions[self.state](line)
            except InvalidFormatError as e:
                raise InvalidFormatError(e.message, line_number) from None
        if self.state not in _FINAL_STATES:
            raise InvalidFormatError(
                f"unexpected end of file, expected {self.state.value}", line_number + 1
            )
        return self.record

    def _title(self, line: str) -> State:
        m = _TITLE_RE.match(line)
        if m is None:
            raise InvalidFormatError(f"expected '# <index>. <title>', got {line!r}")
        self.record.index = int(m.group('index'))
        self.record.title = m.group('title')
        return State.EXPECT_DATE

    def _date(self, line: str) -> State:
        m = _DATE_RE.match(line)
        if m is None:
            raise InvalidFormatError(f"expected a creation date, got {line!r}")
        self.record.created_date = m.group('date')
        return State.EXPECT_STATUS_HEADER

    def _status_header(self, line: str) -> State:
        if line[:len(STATUS_HEADER)] != STATUS_HEADER:
            raise InvalidFormatError(f"expected {STATUS_HEADER!r}, got {line!r}")
        return State.COLLECT_STATUS

    def _status(self, line: str) -> State:
        if line.startswith('#'):
            return self._body(line)
        entry = parse_status_line(line)
        if entry is None:
            raise InvalidFormatError(f"expected '<date> <status> [link]', got {line!r}")
        self.record.status_history.append(entry)
        return State.COLLECT_STATUS

    def _body(self, line: str) -> State:
        m = _TAGS_RE.match(line)
        if m:
            self.record.tags = [t.strip() for t in m.group('tags').split(',') if t.strip()]
        return State.BODY
