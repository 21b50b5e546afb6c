"""Abstract RecordStoreClient interface."""

from abc import ABC, abstractmethod

from notionflow.types import Properties, RecordRef, TableRef


class RecordStoreClient(ABC):
    """Capability interface for the remote structured-record store.

    Callers program against this ABC, never a concrete backend. Both calls
    raise RemoteStoreError on failure.
    """

    @abstractmethod
    def create_table(self, parent_id: str, title: str, properties: Properties) -> TableRef:
        """Create a table under parent_id with the given property definitions.

        Args:
            parent_id: Identifier of the container that will hold the table.
            title: Human-readable table title.
            properties: Property definitions, e.g. {"Name": {"title": {}}}.

        Returns:
            The new table's identifier.
        """

    @abstractmethod
    def create_record(self, table_id: TableRef, properties: Properties) -> RecordRef:
        """Create one record in table_id and return its identifier."""

    def close(self) -> None:
        """Release any resources held by the client."""
