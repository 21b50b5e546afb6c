"""Notion REST implementation of RecordStoreClient."""

import logging
import time

import requests

from notionflow.client import RecordStoreClient
from notionflow.errors import RemoteStoreError
from notionflow.types import Properties, RecordRef, TableRef

logger = logging.getLogger(__name__)

NOTION_BASE_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"


class NotionClient(RecordStoreClient):
    """Notion API client over a requests.Session.

    Only rate-limited responses (HTTP 429) are retried, up to max_retries
    times after the first attempt: the API guarantees the request was not
    applied, so a retry cannot create a duplicate.
    """

    def __init__(
        self,
        token: str,
        max_retries: int = 3,
        base_delay: float = 1.0,
        timeout: float = 30.0,
        base_url: str = NOTION_BASE_URL,
        session: requests.Session | None = None,
    ):
        if max_retries < 0:
            raise ValueError(f"max_retries must be >= 0, got {max_retries}")
        self._max_retries = max_retries
        self._base_delay = base_delay
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "Authorization": f"Bearer {token}",
                "Notion-Version": NOTION_VERSION,
                "Content-Type": "application/json",
            }
        )

    def close(self) -> None:
        self._session.close()

    def create_table(self, parent_id: str, title: str, properties: Properties) -> TableRef:
        body = {
            "parent": {"type": "page_id", "page_id": parent_id},
            "title": [{"type": "text", "text": {"content": title}}],
            "properties": properties,
        }
        return self._post("/databases", body)["id"]

    def create_record(self, table_id: TableRef, properties: Properties) -> RecordRef:
        body = {
            "parent": {"database_id": table_id},
            "properties": properties,
        }
        return self._post("/pages", body)["id"]

    def _post(self, path: str, body: dict) -> dict:
        url = f"{self._base_url}{path}"

        for attempt in range(self._max_retries + 1):
            try:
                resp = self._session.post(url, json=body, timeout=self._timeout)
            except requests.RequestException as e:
                raise RemoteStoreError(f"Request to {path} failed: {e}") from e

            if resp.status_code == 429 and attempt < self._max_retries:
                delay = self._retry_delay(resp, attempt)
                logger.warning(
                    "Rate limited on %s (attempt %d). Retrying in %.1fs...",
                    path,
                    attempt + 1,
                    delay,
                )
                time.sleep(delay)
                continue

            if not resp.ok:
                raise _error_from_response(resp)

            try:
                data = resp.json()
            except ValueError as e:
                raise RemoteStoreError(f"Invalid JSON from {path}: {e}", resp.status_code) from e
            if not isinstance(data, dict) or "id" not in data:
                raise RemoteStoreError(f"Response from {path} has no id", resp.status_code)
            return data

    def _retry_delay(self, resp: requests.Response, attempt: int) -> float:
        retry_after = resp.headers.get("Retry-After")
        if retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass
        return self._base_delay * (2**attempt)


def _error_from_response(resp: requests.Response) -> RemoteStoreError:
    # Notion error bodies look like {"object": "error", "code": ..., "message": ...}
    try:
        data = resp.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}
    message = data.get("message") or resp.reason or "request failed"
    return RemoteStoreError(message, status=resp.status_code, code=data.get("code"))
