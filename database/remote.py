"""Remote document-store data API client.

Failures are reported as values, not exceptions: every call returns
either Ok(data) or Unavailable(reason) so the adapter can pick the
local fallback explicitly.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests

from core.config_loader import RemoteDataConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ok:
    """Successful remote response body."""
    data: Dict[str, Any]


@dataclass(frozen=True)
class Unavailable:
    """Remote call failed; reason is for logging only."""
    reason: str
    status_code: Optional[int] = None


RemoteResult = Union[Ok, Unavailable]


class DataApiClient:
    """
    Client for the document-store data API.

    Responsibilities:
    - Own a requests.Session for connection reuse
    - POST <endpoint>/action/<action> with the api-key header
    - Turn every transport, status and decoding failure into Unavailable
    """

    def __init__(self, config: RemoteDataConfig):
        self.config = config
        self.session = requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
            'api-key': config.api_key,
        })

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def execute(self, action: str, collection: str, payload: Dict[str, Any]) -> RemoteResult:
        if not self.is_configured:
            return Unavailable("remote data API not configured")

        url = f"{self.config.endpoint.rstrip('/')}/action/{action}"
        body = {
            'dataSource': self.config.data_source,
            'database': self.config.database,
            'collection': collection,
            **payload,
        }

        try:
            response = self.session.post(
                url,
                json=body,
                timeout=self.config.request_timeout_seconds
            )
        except requests.RequestException as e:
            return Unavailable(f"request to {url} failed: {e}")

        if not response.ok:
            return Unavailable(
                f"{action} on {collection} returned HTTP {response.status_code}: {response.text[:200]}",
                status_code=response.status_code
            )

        try:
            data = response.json()
        except ValueError as e:
            return Unavailable(f"malformed JSON from {url}: {e}", status_code=response.status_code)

        if not isinstance(data, dict):
            return Unavailable(
                f"expected a JSON object from {url}, got {type(data).__name__}",
                status_code=response.status_code
            )

        return Ok(data)

    def close(self):
        """Close the session and release resources."""
        self.session.close()
        logger.info("DataApiClient session closed")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
