"""Remote table schema inferred from a CSV header."""

from pathlib import Path

from notionflow.errors import EmptyHeaderError
from notionflow.types import FieldKind, Header, Schema

TABLE_LABEL_SUFFIX = " Table - Created by NotionFlow"


def infer_schema(header: Header) -> Schema:
    """First column becomes the primary (title) field, the rest are text.

    Values are never inspected: every secondary column is text.
    """
    if not header:
        raise EmptyHeaderError("CSV file must have at least one column header")
    return Schema(
        {name: FieldKind.PRIMARY if i == 0 else FieldKind.SECONDARY for i, name in enumerate(header)}
    )


def table_label(source_path: str | Path) -> str:
    """Title for the remote table: the source's base name plus a provenance marker."""
    return f"{Path(source_path).name}{TABLE_LABEL_SUFFIX}"
