"""Upload one parsed record as a remote record."""

import logging

from notionflow.client import RecordStoreClient
from notionflow.errors import RemoteStoreError, UploadError
from notionflow.types import FieldKind, Header, Properties, Record, RecordRef, TableRef

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"


def _text_value(content: str) -> list[dict]:
    return [{"type": "text", "text": {"content": content}}]


def build_properties(record: Record, header: Header) -> Properties:
    """Map every header field to its value. Missing values become ""."""
    properties: Properties = {}
    for i, name in enumerate(header):
        kind = FieldKind.PRIMARY if i == 0 else FieldKind.SECONDARY
        properties[name] = {kind.value: _text_value(record.get(name) or "")}
    return properties


def row_label(record: Record, header: Header) -> str:
    return (record.get(header[0]) if header else None) or UNTITLED


def upload(client: RecordStoreClient, table_ref: TableRef, record: Record, header: Header) -> RecordRef:
    """Create one remote record for `record`.

    Raises UploadError naming the row; the caller decides whether to continue.
    """
    label = row_label(record, header)
    try:
        record_ref = client.create_record(table_ref, build_properties(record, header))
    except RemoteStoreError as e:
        raise UploadError(label, e) from e

    logger.info("Added row :: %s", label)
    return record_ref
