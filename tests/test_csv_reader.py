"""Tests for the streaming CSV reader."""

import io

import pytest

from ingestion.csv_reader import CsvRecordStream, read_records
from notionflow.errors import EmptyHeaderError, MalformedInputError


def stream_of(text: str | bytes) -> io.BytesIO:
    return io.BytesIO(text.encode("utf-8") if isinstance(text, str) else text)


class TestCsvRecordStream:
    def test_header_keyed_records(self):
        stream = CsvRecordStream(stream_of("Name,Age\nA,1\nB,2\n"))
        records = list(stream)
        assert stream.header == ["Name", "Age"]
        assert records == [{"Name": "A", "Age": "1"}, {"Name": "B", "Age": "2"}]

    def test_fields_trimmed(self):
        stream = CsvRecordStream(stream_of(" Name , Age \n  A ,  1 \n"))
        records = list(stream)
        assert stream.header == ["Name", "Age"]
        assert records == [{"Name": "A", "Age": "1"}]

    def test_blank_lines_skipped(self):
        records = list(read_records(stream_of("\n\nName,Age\n\nA,1\n   \n\nB,2\n\n")))
        assert [r["Name"] for r in records] == ["A", "B"]

    def test_row_of_empty_cells_kept(self):
        records = list(read_records(stream_of("Name,Age\nA,1\n,\n , \nB,2\n")))
        assert records == [
            {"Name": "A", "Age": "1"},
            {"Name": "", "Age": ""},
            {"Name": "", "Age": ""},
            {"Name": "B", "Age": "2"},
        ]

    def test_short_row_padded(self):
        records = list(read_records(stream_of("Name,Age,City\nA,1\n")))
        assert records == [{"Name": "A", "Age": "1", "City": ""}]

    def test_long_row_rejected(self):
        with pytest.raises(MalformedInputError, match="Line 3 has 3 cells, header has 2"):
            list(read_records(stream_of("Name,Age\nA,1\nB,2,lost\n")))

    def test_quoted_fields(self):
        records = list(read_records(stream_of('Name,Note\n"Smith, J","said ""hi"""\n')))
        assert records == [{"Name": "Smith, J", "Note": 'said "hi"'}]

    def test_bom_dropped(self):
        stream = CsvRecordStream(stream_of(b"\xef\xbb\xbfName,Age\nA,1\n"))
        list(stream)
        assert stream.header == ["Name", "Age"]

    def test_reads_from_path(self, write_csv):
        csv_file = write_csv(["Name", "Age"], [["A", "1"]])
        assert list(read_records(csv_file)) == [{"Name": "A", "Age": "1"}]

    def test_header_only_yields_nothing(self):
        stream = CsvRecordStream(stream_of("Name,Age\n"))
        assert list(stream) == []
        assert stream.header == ["Name", "Age"]

    def test_lazy(self):
        body = "Name,Age\n" + "".join(f"row{i},{i}\n" for i in range(10_000))
        stream = CsvRecordStream(stream_of(body))
        assert stream.header is None
        records = iter(stream)
        assert next(records) == {"Name": "row0", "Age": "0"}
        assert stream.header == ["Name", "Age"]


class TestMalformedSources:
    def test_empty_header_row(self):
        with pytest.raises(EmptyHeaderError):
            list(read_records(stream_of(" , ,\nA,1\n")))

    def test_empty_source(self):
        with pytest.raises(EmptyHeaderError):
            list(read_records(stream_of("")))

    def test_not_utf8(self):
        with pytest.raises(MalformedInputError, match="UTF-8"):
            list(read_records(stream_of(b"Name,Age\n\xff\xfe\xfa,1\n")))

    def test_duplicate_header(self):
        with pytest.raises(MalformedInputError, match="Duplicate"):
            list(read_records(stream_of("Name,Name\nA,B\n")))

    def test_unnamed_header_column(self):
        with pytest.raises(MalformedInputError, match="column 2"):
            list(read_records(stream_of("Name,,Age\nA,x,1\n")))

    def test_missing_file(self, tmp_path):
        with pytest.raises(MalformedInputError, match="Cannot read"):
            list(read_records(tmp_path / "nope.csv"))
