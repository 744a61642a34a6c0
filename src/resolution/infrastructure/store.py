"""ResolutionStore — CSV persistence for the resolution list.

INVARIANT: The file is the list.  Every command loads the whole file,
transforms it in memory, and (for mutations) overwrites the whole file.
Position is never stored; it is the record's line order.

Consistency model: no locking.  A reader running while another process
rewrites the file can observe a half-written or empty file.  Only one
invoking process at a time is supported.

File format, one record per line (CSV quoting for embedded commas/quotes)::

    <text>,<priority>,<deadline-or-dash>

Whitespace around unquoted fields is insignificant.  A row whose values
start or end with whitespace is written with every field quoted.
"""

from __future__ import annotations

import csv
import io
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from resolution.domain.entry import ResolutionEntry

logger = logging.getLogger(__name__)

_FIELD_COUNT = 3


class StorageError(Exception):
    """The backing file could not be created, read, or written."""


class RecordParseError(StorageError):
    """A stored record is malformed.  Fails the whole load."""

    def __init__(self, path: Path, line: int, reason: str) -> None:
        self.path = path
        self.line = line
        self.reason = reason
        super().__init__(f"{path}:{line}: {reason}")


class ResolutionStore:
    """Load-all / save-all access to one resolution CSV file."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def __repr__(self) -> str:
        return f"ResolutionStore({str(self.path)!r})"

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def load_all(self) -> list[ResolutionEntry]:
        """Parse every record in file order.

        Returns an empty list when the file does not exist.  Blank lines are
        skipped.  Whitespace around an unquoted field is trimmed; a quoted
        field keeps everything between its quotes.

        Raises:
            RecordParseError: A record has the wrong field count, a
                non-integer priority, an unterminated quote, or the file is
                not valid UTF-8.
            StorageError: The file exists but cannot be read.
        """
        if not self.exists:
            logger.debug("Store file %s does not exist, returning empty list", self.path)
            return []

        try:
            data = self.path.read_bytes()
        except OSError as exc:
            msg = f"Cannot read {self.path}: {exc}"
            raise StorageError(msg) from exc

        try:
            raw = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            line = data.count(b"\n", 0, exc.start) + 1
            raise RecordParseError(self.path, line, "not valid UTF-8") from exc

        entries: list[ResolutionEntry] = []
        try:
            for line, fields in _split_records(raw):
                if not any(fields):
                    continue
                entries.append(self._parse_row(fields, line))
        except _UnterminatedQuote as exc:
            raise RecordParseError(self.path, exc.line, "unterminated quoted field") from exc

        logger.debug("Loaded %d entries from %s", len(entries), self.path)
        return entries

    def _parse_row(self, fields: list[str], line: int) -> ResolutionEntry:
        if len(fields) != _FIELD_COUNT:
            raise RecordParseError(
                self.path, line, f"expected {_FIELD_COUNT} fields, got {len(fields)}"
            )
        text, priority, deadline = fields
        try:
            value = int(priority)
        except ValueError as exc:
            raise RecordParseError(self.path, line, f"invalid priority {priority!r}") from exc
        return ResolutionEntry.from_record(text, value, deadline)

    # ------------------------------------------------------------------
    # Writing
    # ------------------------------------------------------------------

    def save_all(self, entries: Iterable[ResolutionEntry]) -> None:
        """Replace the whole file with *entries*, in order.

        The serialization is built before the file is opened, so a failure
        while serializing leaves the previous contents untouched.
        """
        rendered = _serialize(entries)
        self._ensure_file()
        try:
            self.path.write_text(rendered, encoding="utf-8", newline="")
        except OSError as exc:
            msg = f"Cannot write {self.path}: {exc}"
            raise StorageError(msg) from exc
        logger.debug("Rewrote %s", self.path)

    def append_one(self, entry: ResolutionEntry) -> None:
        """Append a single record without rewriting the existing ones."""
        rendered = _serialize([entry])
        self._ensure_file()
        try:
            with self.path.open("a", encoding="utf-8", newline="") as fh:
                fh.write(rendered)
        except OSError as exc:
            msg = f"Cannot append to {self.path}: {exc}"
            raise StorageError(msg) from exc
        logger.debug("Appended entry to %s", self.path)

    def _ensure_file(self) -> None:
        """Create the file and its parent directories if they don't exist."""
        if self.exists:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        except OSError as exc:
            msg = f"Cannot create {self.path}: {exc}"
            raise StorageError(msg) from exc
        logger.debug("Created store file %s", self.path)


def _serialize(entries: Iterable[ResolutionEntry]) -> str:
    buffer = io.StringIO()
    plain = csv.writer(buffer, lineterminator="\n")
    quoted = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_ALL)
    for entry in entries:
        record = entry.to_record()
        # Unquoted padding is trimmed on load, so padded rows are quoted.
        padded = any(value != value.strip() for value in record)
        (quoted if padded else plain).writerow(record)
    return buffer.getvalue()


class _UnterminatedQuote(ValueError):
    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__(f"line {line}: unterminated quoted field")


def _split_records(raw: str) -> Iterator[tuple[int, list[str]]]:
    """Yield ``(line_number, fields)`` for each CSV record in *raw*.

    ``csv.reader`` cannot report whether a field was quoted, and only quoted
    fields may keep surrounding whitespace, so records are split here.  A
    quote opens a quoted field only at the start of a field (after optional
    whitespace); ``""`` inside quotes is a literal quote.  Whitespace after
    the closing quote is dropped.
    """
    fields: list[str] = []
    chars: list[str] = []
    quoted = in_quotes = False
    line = start = 1
    pos, end = 0, len(raw)

    def finish() -> None:
        value = "".join(chars)
        fields.append(value if quoted else value.strip())
        chars.clear()

    while pos < end:
        char = raw[pos]
        pos += 1
        if in_quotes:
            if char != '"':
                if char == "\n":
                    line += 1
                chars.append(char)
            elif raw.startswith('"', pos):
                chars.append('"')
                pos += 1
            else:
                in_quotes = False
        elif char == ",":
            finish()
            quoted = False
        elif char in "\r\n":
            if char == "\r" and raw.startswith("\n", pos):
                pos += 1
            finish()
            yield start, fields
            fields, quoted = [], False
            line += 1
            start = line
        elif char == '"' and not quoted and not "".join(chars).strip():
            chars.clear()
            quoted = in_quotes = True
        elif quoted and char.isspace():
            continue
        else:
            chars.append(char)

    if in_quotes:
        raise _UnterminatedQuote(start)
    if fields or chars or quoted:
        finish()
        yield start, fields
