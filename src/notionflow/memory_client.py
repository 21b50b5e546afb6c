"""In-memory RecordStoreClient for tests and dry runs."""

import logging
import uuid
from dataclasses import dataclass, field

from notionflow.client import RecordStoreClient
from notionflow.errors import RemoteStoreError
from notionflow.types import Properties, RecordRef, TableRef

logger = logging.getLogger(__name__)


@dataclass
class StoredTable:
    parent_id: str
    title: str
    properties: Properties
    records: list[Properties] = field(default_factory=list)


class InMemoryRecordStore(RecordStoreClient):
    """Keeps tables and records in dicts and records every call.

    Failures can be scripted: fail_table makes create_table raise with that
    message, fail_records maps a 0-based create_record call index to a message.
    """

    def __init__(
        self,
        fail_table: str | None = None,
        fail_records: dict[int, str] | None = None,
    ):
        self.tables: dict[TableRef, StoredTable] = {}
        self.calls: list[tuple[str, dict]] = []
        self._fail_table = fail_table
        self._fail_records = dict(fail_records or {})
        self._record_calls = 0

    def create_table(self, parent_id: str, title: str, properties: Properties) -> TableRef:
        self.calls.append(
            ("create_table", {"parent_id": parent_id, "title": title, "properties": properties})
        )
        if self._fail_table is not None:
            raise RemoteStoreError(self._fail_table, status=400, code="validation_error")
        table_id = str(uuid.uuid4())
        self.tables[table_id] = StoredTable(parent_id, title, properties)
        logger.debug("Stored table %s (%d properties)", table_id, len(properties))
        return table_id

    def create_record(self, table_id: TableRef, properties: Properties) -> RecordRef:
        index = self._record_calls
        self._record_calls += 1
        self.calls.append(("create_record", {"table_id": table_id, "properties": properties}))
        if index in self._fail_records:
            raise RemoteStoreError(self._fail_records[index], status=400, code="validation_error")
        if table_id not in self.tables:
            raise RemoteStoreError(f"Could not find database with ID: {table_id}", 404, "object_not_found")
        self.tables[table_id].records.append(properties)
        return str(uuid.uuid4())

    @property
    def record_calls(self) -> list[Properties]:
        return [args["properties"] for name, args in self.calls if name == "create_record"]

    @property
    def table_calls(self) -> list[dict]:
        return [args for name, args in self.calls if name == "create_table"]
