"""FastAPI dependencies for placeholder mapper routes."""

from __future__ import annotations

import secrets
import string

from fastapi import Request

from placeholder_mapper.docstore import TRANSACTION_ID_HEADER
from placeholder_mapper.resolver import IdentifierResolver

_TID_ALPHABET = string.ascii_lowercase + string.digits


def new_transaction_id() -> str:
    return "tid_" + "".join(secrets.choice(_TID_ALPHABET) for _ in range(10))


def get_resolver(request: Request) -> IdentifierResolver:
    """Get the identifier resolver from app state."""
    return request.app.state.resolver


def get_transaction_id(request: Request) -> str:
    """Transaction id of the current request.

    Taken from the X-Request-Id header, or generated once per request and
    remembered on ``request.state`` so the audit middleware can echo it.
    """
    tid = getattr(request.state, "transaction_id", None)
    if tid is None:
        tid = request.headers.get(TRANSACTION_ID_HEADER) or new_transaction_id()
        request.state.transaction_id = tid
    return tid
