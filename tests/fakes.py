"""Test doubles shared by the resolver and gateway tests."""

from __future__ import annotations


class FakeDocStore:
    """Returns canned answers and records every call."""

    def __init__(self, query_result=(301, ""), exists=False, error=None):
        self.query_result = query_result
        self.exists = exists
        self.error = error
        self.queries: list[tuple[str, str, str]] = []
        self.exists_calls: list[tuple[str, str]] = []

    def content_query(self, authority, identifier, transaction_id):
        self.queries.append((authority, identifier, transaction_id))
        if self.error is not None:
            raise self.error
        return self.query_result

    def content_exists(self, uuid, transaction_id):
        self.exists_calls.append((uuid, transaction_id))
        if self.error is not None:
            raise self.error
        return self.exists
