"""Document store client — the resolver's only downstream dependency.

``DocStoreClient`` is the capability the resolver consumes. Anything with
these two methods will do; ``HttpDocStoreClient`` is the production
implementation over the document store's HTTP API.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from placeholder_mapper.errors import DocStoreError

logger = logging.getLogger("placeholder_mapper.docstore")

TRANSACTION_ID_HEADER = "X-Request-Id"


class DocStoreClient(Protocol):
    def content_query(
        self, authority: str, identifier: str, transaction_id: str
    ) -> tuple[int, str]:
        """Return (status code, location URI) for an identifier lookup."""
        ...

    def content_exists(self, uuid: str, transaction_id: str) -> bool:
        """Return whether content with ``uuid`` is stored."""
        ...


class HttpDocStoreClient:
    """Talks to the document store API over HTTP.

    Redirects are never followed: a content query answers with a redirect
    whose ``Location`` header is the result.
    """

    def __init__(self, base_url: str, http_client: httpx.Client) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = http_client

    def content_query(
        self, authority: str, identifier: str, transaction_id: str
    ) -> tuple[int, str]:
        url = f"{self.base_url}/content-query"
        params = {"identifierValue": identifier, "identifierAuthority": authority}
        try:
            response = self._http.get(
                url,
                params=params,
                headers={TRANSACTION_ID_HEADER: transaction_id},
                follow_redirects=False,
            )
        except httpx.HTTPError as exc:
            raise DocStoreError(f"content query to {url} failed: {exc}") from exc
        logger.debug(
            "content-query %s (%s) -> %d [%s]",
            identifier,
            authority,
            response.status_code,
            transaction_id,
        )
        return response.status_code, response.headers.get("Location", "")

    def content_exists(self, uuid: str, transaction_id: str) -> bool:
        url = f"{self.base_url}/content/{uuid}"
        try:
            response = self._http.head(
                url,
                headers={TRANSACTION_ID_HEADER: transaction_id},
                follow_redirects=False,
            )
        except httpx.HTTPError as exc:
            raise DocStoreError(f"existence check at {url} failed: {exc}") from exc
        logger.debug("content %s -> %d [%s]", uuid, response.status_code, transaction_id)
        if response.status_code == 200:
            return True
        if response.status_code == 404:
            return False
        raise DocStoreError(
            f"unexpected status {response.status_code} checking content {uuid}"
        )

    def close(self) -> None:
        self._http.close()
