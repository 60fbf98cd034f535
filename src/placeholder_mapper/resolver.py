"""Identifier resolver — legacy content URL to canonical content UUID.

The resolver owns no state beyond its injected document-store client and
its authority mapping. It performs at most one downstream call per
operation and never logs; surfacing failures is the caller's job.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from urllib.parse import urlsplit

from placeholder_mapper.docstore import DocStoreClient
from placeholder_mapper.errors import (
    InvalidURIError,
    InvalidUUIDError,
    MappingNotFoundError,
    NotFoundError,
    UnexpectedStatusError,
)

AUTHORITY_URI_PREFIX = "http://api.ft.com/system/"

REDIRECT_STATUSES = frozenset({301, 302, 303, 307, 308})

_CONTENT_URI = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*://[^/\s]+/content/([^/?#\s]*)")
_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def extract_hostname(url: str) -> str:
    """Return the host part of ``url`` as written: no userinfo, no port, no case folding.

    Returns an empty string when the URL has no network location or
    cannot be parsed.
    """
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return ""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        return host[: host.find("]") + 1]
    return host.partition(":")[0]


def is_valid_uuid(candidate: str) -> bool:
    """True if ``candidate`` is a hyphenated 8-4-4-4-12 hex UUID."""
    return _UUID.fullmatch(candidate) is not None


def uuid_from_content_uri(location: str) -> str:
    """Pull the UUID out of a ``scheme://host/content/<uuid>`` URI."""
    match = _CONTENT_URI.fullmatch(location)
    if match is None:
        raise InvalidURIError(location)
    candidate = match.group(1)
    if not is_valid_uuid(candidate):
        raise InvalidUUIDError(candidate)
    return candidate


class IdentifierResolver:
    """Resolve legacy URLs to UUIDs through the document store."""

    def __init__(self, client: DocStoreClient, authority_mapping: Mapping[str, str]) -> None:
        self._client = client
        self._authorities = MappingProxyType(dict(authority_mapping))

    @property
    def authorities(self) -> Mapping[str, str]:
        return self._authorities

    def resolve_identifier(self, url: str, post_id: str, transaction_id: str) -> str:
        """Return the canonical UUID for the content published at ``url``.

        ``post_id`` is the legacy numeric id carried alongside the URL; the
        URL alone identifies the content in the document store.

        Raises:
            MappingNotFoundError: the URL's host has no authority.
            NotFoundError: the document store answered 404.
            UnexpectedStatusError: any status other than a redirect or 404.
            InvalidURIError: the location is not a content URI.
            InvalidUUIDError: the content URI does not end in a UUID.

        Exceptions raised by the client propagate unchanged.
        """
        hostname = extract_hostname(url)
        authority = self._authorities.get(hostname)
        if authority is None:
            raise MappingNotFoundError(hostname, url)

        status, location = self._client.content_query(
            AUTHORITY_URI_PREFIX + authority, url, transaction_id
        )
        if status == 404:
            raise NotFoundError(url)
        if status not in REDIRECT_STATUSES:
            raise UnexpectedStatusError(status, url)
        return uuid_from_content_uri(location)

    def content_exists(self, uuid: str, transaction_id: str) -> bool:
        """Ask the document store whether ``uuid`` exists. No local validation."""
        return self._client.content_exists(uuid, transaction_id)
