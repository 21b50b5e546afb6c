"""notionflow: replicate CSV files into a remote record store. Factory and public API."""

from notionflow.client import RecordStoreClient
from notionflow.config import Settings
from notionflow.memory_client import InMemoryRecordStore


def create_client(settings: Settings | None = None, dry_run: bool = False) -> RecordStoreClient:
    """Create a RecordStoreClient.

    - dry_run=True: an InMemoryRecordStore, no credentials needed
    - otherwise: a NotionClient configured from settings
    """
    if dry_run:
        return InMemoryRecordStore()
    if settings is None:
        raise ValueError("settings are required unless dry_run is set")

    from notionflow.notion_client import NotionClient

    return NotionClient(
        settings.token,
        max_retries=settings.max_retries,
        timeout=settings.timeout,
    )


__all__ = ["RecordStoreClient", "InMemoryRecordStore", "Settings", "create_client"]
