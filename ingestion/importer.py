"""Import orchestration: select, parse, validate, publish schema, upload rows."""

import logging
from pathlib import Path
from typing import Callable

from ingestion.csv_reader import CsvRecordStream
from ingestion.publisher import publish
from ingestion.schema import infer_schema, table_label
from ingestion.uploader import upload
from notionflow.client import RecordStoreClient
from notionflow.errors import EmptyDatasetError, NotionFlowError, UploadError
from notionflow.types import Header, ImportResult, ImportState, Record, RowFailure

logger = logging.getLogger(__name__)

Selector = Callable[[], Path]


class CsvImporter:
    """Drives one import run and returns its terminal ImportResult.

    Fatal errors end the run in ABORTED with the error on the result; a
    failed row is counted and logged and the next row is attempted.
    Nothing here exits the process.
    """

    def __init__(self, client: RecordStoreClient, parent_id: str, selector: Selector):
        self._client = client
        self._parent_id = parent_id
        self._selector = selector
        self.result = ImportResult()

    def run(self) -> ImportResult:
        try:
            self._run()
        except NotionFlowError as e:
            logger.error("Import aborted during %s :: %s", self.result.state.value, e)
            self.result.error = e
            self.result.state = ImportState.ABORTED
        return self.result

    def _run(self) -> None:
        result = self.result

        result.state = ImportState.SELECTING
        path = self._selector()
        result.source = str(path)

        result.state = ImportState.PARSING
        header, records = self._load(path)

        result.state = ImportState.VALIDATING
        if not records:
            raise EmptyDatasetError("CSV file is empty or contains no valid data")
        logger.info("Parsed %d rows with %d columns from %s", len(records), len(header), path)

        result.state = ImportState.PUBLISHING_SCHEMA
        schema = infer_schema(header)
        result.table_ref = publish(self._client, schema, table_label(path), self._parent_id)

        result.state = ImportState.UPLOADING_ROWS
        for index, record in enumerate(records):
            result.attempted += 1
            try:
                upload(self._client, result.table_ref, record, header)
            except UploadError as e:
                logger.error("%s", e)
                result.failures.append(RowFailure(index, e.row_label, str(e.cause)))
                continue
            result.succeeded += 1

        result.state = ImportState.DONE
        logger.info(
            "CSV processing complete! %d of %d rows added to table %s.",
            result.succeeded,
            result.attempted,
            result.table_ref,
        )

    @staticmethod
    def _load(path: Path) -> tuple[Header, list[Record]]:
        # The field set must be complete before a table is created, so the
        # whole source is drained here.
        stream = CsvRecordStream(path)
        records = list(stream)
        return stream.header or [], records


def run_import(client: RecordStoreClient, parent_id: str, selector: Selector) -> ImportResult:
    """Run one import. See CsvImporter."""
    return CsvImporter(client, parent_id, selector).run()
