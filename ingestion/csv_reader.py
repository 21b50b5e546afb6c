"""Streaming CSV reader yielding header-keyed records."""

import csv
import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterator

from notionflow.errors import EmptyHeaderError, MalformedInputError
from notionflow.types import Header, Record

logger = logging.getLogger(__name__)

Source = str | Path | BinaryIO


class CsvRecordStream:
    """Lazy, forward-only sequence of Records read from a CSV source.

    The first non-blank row is the header and is not emitted. `header` is
    set once iteration has started. Cells are trimmed and blank lines are
    skipped. Short rows are padded with ""; a row wider than the header
    raises MalformedInputError.
    """

    def __init__(self, source: Source):
        self._source = source
        self.header: Header | None = None

    def __iter__(self) -> Iterator[Record]:
        if isinstance(self._source, (str, Path)):
            try:
                f = open(self._source, "rb")
            except OSError as e:
                raise MalformedInputError(f"Cannot read {self._source}: {e}") from e
            with f:
                yield from self._read(f)
        else:
            yield from self._read(self._source)

    def _read(self, raw: BinaryIO) -> Iterator[Record]:
        # utf-8-sig accepts and drops a leading BOM
        text = io.TextIOWrapper(raw, encoding="utf-8-sig", newline="")
        try:
            reader = csv.reader(text)
            self.header = self._read_header(reader)
            width = len(self.header)
            logger.debug("Header: %s", self.header)

            for row in reader:
                if _is_blank(row):
                    continue
                cells = [cell.strip() for cell in row]
                if len(cells) > width:
                    raise MalformedInputError(
                        f"Line {reader.line_num} has {len(cells)} cells, header has {width}"
                    )
                cells += [""] * (width - len(cells))
                yield dict(zip(self.header, cells))
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Source is not valid UTF-8 text: {e}") from e
        except csv.Error as e:
            raise MalformedInputError(f"Could not parse CSV: {e}") from e
        finally:
            text.detach()

    @staticmethod
    def _read_header(reader) -> Header:
        for row in reader:
            if _is_blank(row):
                continue
            names = [cell.strip() for cell in row]
            if not any(names):
                raise EmptyHeaderError("CSV file must have at least one column header")
            if "" in names:
                raise MalformedInputError(f"Header column {names.index('') + 1} has no name")
            duplicates = sorted({name for name in names if names.count(name) > 1})
            if duplicates:
                raise MalformedInputError(f"Duplicate header names: {', '.join(duplicates)}")
            return names
        raise EmptyHeaderError("CSV file must have at least one column header")


def _is_blank(row: list[str]) -> bool:
    # An empty or whitespace-only line. A row of empty cells such as "," is data.
    return not row or (len(row) == 1 and not row[0].strip())


def read_records(source: Source) -> Iterator[Record]:
    """Yield records from a CSV source without materializing the file."""
    return iter(CsvRecordStream(source))
