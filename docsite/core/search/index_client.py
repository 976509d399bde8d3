"""HTTP client for a Meilisearch-compatible search index."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .errors import BackendUnavailable, ConfigurationError

logger = logging.getLogger(__name__)


class RemoteIndex:
    """One named index on the remote search service."""

    def __init__(self, client: "IndexClient", uid: str):
        self.client = client
        self.uid = uid

    def search(self, query: str, limit: Optional[int] = None) -> List[Dict[str, Any]]:
        """Query the index and return its raw hits in service order."""
        payload = {"q": query}
        if limit is not None:
            payload["limit"] = limit
        body = self.client.post(f"/indexes/{self.uid}/search", payload)
        hits = body.get("hits") if isinstance(body, dict) else None
        if not isinstance(hits, list):
            raise BackendUnavailable(f"Index '{self.uid}' returned no hit list")

        records = [h for h in hits if isinstance(h, dict)]
        if len(records) != len(hits):
            logger.warning(f"Index '{self.uid}' returned {len(hits) - len(records)} non-object hits, dropped")
        return records


class IndexClient:
    """Thin synchronous client, built fresh for every search."""

    def __init__(self, host: str, key: str, timeout: float = 5.0, transport: Optional[httpx.BaseTransport] = None):
        if not host:
            raise ConfigurationError("Remote search host is not configured")
        if not key:
            raise ConfigurationError("Remote search key is not configured")
        self.host = host.rstrip("/")
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {key}",
        }
        self._client = httpx.Client(base_url=self.host, headers=headers, timeout=timeout, transport=transport)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self._client.close()

    def index(self, uid: str) -> RemoteIndex:
        return RemoteIndex(self, uid)

    def post(self, path: str, payload: Dict[str, Any]) -> Any:
        try:
            response = self._client.post(path, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Search index answered {e.response.status_code} for {path}")
            raise BackendUnavailable(
                f"Search index error {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Search index unreachable at {self.host}: {e}")
            raise BackendUnavailable(f"Search index unreachable: {e}") from e
        except ValueError as e:
            raise BackendUnavailable(f"Search index returned invalid JSON: {e}") from e
