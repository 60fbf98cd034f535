"""Errors raised while resolving legacy identifiers.

Every failure is terminal: nothing here is retried. Messages carry a
stable substring per category so callers can classify them.
"""

from __future__ import annotations


class MapperError(Exception):
    """Base class for placeholder mapper errors."""


class ConfigError(MapperError):
    """Configuration could not be loaded."""


class MappingNotFoundError(MapperError):
    """The URL's hostname has no entry in the authority mapping."""

    def __init__(self, hostname: str, url: str) -> None:
        super().__init__(
            f"couldn't find authority in mapping table, host={hostname!r} url={url!r}"
        )
        self.hostname = hostname
        self.url = url


class NotFoundError(MapperError):
    """The document store has no content for the queried identifier."""

    def __init__(self, url: str) -> None:
        super().__init__(f"content not found in document store (status 404) for url={url!r}")
        self.url = url


class UnexpectedStatusError(MapperError):
    """The document store answered a content query with an unhandled status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(
            f"unexpected status {status_code} from document store for url={url!r}"
        )
        self.status_code = status_code
        self.url = url


class InvalidURIError(MapperError):
    """The returned location is not a canonical content URI."""

    def __init__(self, location: str) -> None:
        super().__init__(f"invalid FT URI: {location!r}")
        self.location = location


class InvalidUUIDError(MapperError):
    """The trailing segment of the content URI is not a UUID."""

    def __init__(self, candidate: str) -> None:
        super().__init__(f"invalid uuid: {candidate!r}")
        self.candidate = candidate


class DocStoreError(MapperError):
    """The document store could not be reached or misbehaved."""
