"""Publish an inferred schema as a new remote table."""

import logging

from notionflow.client import RecordStoreClient
from notionflow.errors import PublishError, RemoteStoreError
from notionflow.types import Schema, TableRef

logger = logging.getLogger(__name__)


def publish(client: RecordStoreClient, schema: Schema, label: str, parent_id: str) -> TableRef:
    """Create the remote table. Exactly one create_table call, never retried.

    A retry could leave a duplicate table behind, so any failure is raised
    as PublishError for the caller to treat as fatal.
    """
    try:
        table_ref = client.create_table(parent_id, label, schema.to_properties())
    except RemoteStoreError as e:
        logger.error("Error creating table :: %s", e)
        raise PublishError(label, e) from e

    logger.info("Created table :: ID = %s", table_ref)
    return table_ref
