"""Shared types for the notionflow package."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

Header = list[str]
Record = dict[str, str]
Properties = dict[str, Any]
TableRef = str
RecordRef = str


class FieldKind(Enum):
    """Remote column kind. The value is the store's property type."""

    PRIMARY = "title"
    SECONDARY = "rich_text"


@dataclass(frozen=True)
class Schema:
    """Ordered, read-only mapping of field name to FieldKind."""

    fields: Mapping[str, FieldKind]

    def __post_init__(self):
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def primary(self) -> str:
        return next(name for name, kind in self.fields.items() if kind is FieldKind.PRIMARY)

    def to_properties(self) -> Properties:
        """Property definitions in the shape the store expects for table creation."""
        return {name: {kind.value: {}} for name, kind in self.fields.items()}

    def __len__(self) -> int:
        return len(self.fields)


class ImportState(Enum):
    SELECTING = "selecting"
    PARSING = "parsing"
    VALIDATING = "validating"
    PUBLISHING_SCHEMA = "publishing_schema"
    UPLOADING_ROWS = "uploading_rows"
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class RowFailure:
    index: int
    row_label: str
    message: str


@dataclass
class ImportResult:
    """Outcome of one import run. Only DONE and ABORTED are terminal."""

    state: ImportState = ImportState.SELECTING
    source: str | None = None
    table_ref: TableRef | None = None
    attempted: int = 0
    succeeded: int = 0
    failures: list[RowFailure] = field(default_factory=list)
    error: Exception | None = None

    @property
    def failed(self) -> int:
        return self.attempted - self.succeeded

    @property
    def ok(self) -> bool:
        return self.state is ImportState.DONE
