"""API key authentication for the placeholder mapper gateway.

An empty configured key means development mode and lets every caller in.
"""

from __future__ import annotations

import logging
import secrets

from fastapi import HTTPException, Request, Security
from fastapi.security import APIKeyHeader

logger = logging.getLogger("placeholder_mapper.auth")

_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def make_api_key_checker(expected_key: str):
    """Build the dependency guarding every router."""

    async def check_api_key(
        request: Request,
        api_key: str | None = Security(_api_key_header),
    ) -> str | None:
        if not expected_key:
            return None
        if api_key is None or not secrets.compare_digest(
            api_key.encode(), expected_key.encode()
        ):
            logger.warning(
                "Rejected %s %s: %s API key",
                request.method,
                request.url.path,
                "missing" if api_key is None else "wrong",
            )
            raise HTTPException(status_code=401, detail="Invalid or missing API key")
        return api_key

    return check_api_key
