"""Placeholder mapper — FastAPI gateway application.

Turns legacy content URLs into canonical content UUIDs by asking the
document store where they moved to.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from placeholder_mapper import __version__
from placeholder_mapper.auth import make_api_key_checker
from placeholder_mapper.config import MapperConfig, load_config
from placeholder_mapper.deps import get_transaction_id
from placeholder_mapper.docstore import TRANSACTION_ID_HEADER, HttpDocStoreClient
from placeholder_mapper.errors import (
    DocStoreError,
    InvalidURIError,
    InvalidUUIDError,
    MapperError,
    MappingNotFoundError,
    NotFoundError,
    UnexpectedStatusError,
)
from placeholder_mapper.resolver import IdentifierResolver
from placeholder_mapper.routes import identifiers, meta

logger = logging.getLogger("placeholder_mapper")
audit_logger = logging.getLogger("placeholder_mapper.audit")

_STATUS_BY_ERROR: list[tuple[type[MapperError], int]] = [
    (MappingNotFoundError, 400),
    (NotFoundError, 404),
    (InvalidURIError, 502),
    (InvalidUUIDError, 502),
    (UnexpectedStatusError, 502),
    (DocStoreError, 503),
    (MapperError, 500),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: open the document store client. Shutdown: close it."""
    config: MapperConfig = app.state.config
    client = app.state.docstore_client
    owned = client is None
    if owned:
        logger.info("Using document store at %s", config.docstore_address)
        client = HttpDocStoreClient(
            config.docstore_address,
            httpx.Client(timeout=config.docstore_timeout),
        )
    app.state.resolver = IdentifierResolver(client, config.authority_mapping)
    logger.info(
        "Placeholder mapper ready (%d authorities)", len(config.authority_mapping)
    )
    yield
    if owned:
        client.close()
    logger.info("Placeholder mapper shut down")


def install_exception_handlers(app: FastAPI) -> None:
    """Map resolver errors to HTTP statuses with a ``detail`` body."""

    def _handler(status_code: int):
        async def handle(request: Request, exc: MapperError):
            return JSONResponse(status_code=status_code, content={"detail": str(exc)})

        return handle

    for error_type, status_code in _STATUS_BY_ERROR:
        app.add_exception_handler(error_type, _handler(status_code))


def create_app(config: MapperConfig | None = None, docstore_client=None) -> FastAPI:
    """Application factory.

    ``docstore_client`` replaces the HTTP document store client; the app
    does not close an injected client.
    """
    if config is None:
        config = load_config()

    app = FastAPI(
        title="Placeholder Mapper",
        description="Resolves legacy content URLs to canonical content UUIDs",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.docstore_client = docstore_client

    check_key = make_api_key_checker(config.api_key)

    install_exception_handlers(app)

    # ── Audit middleware ──────────────────────────────────────

    @app.middleware("http")
    async def audit_log(request: Request, call_next):
        start = time.monotonic()
        transaction_id = get_transaction_id(request)
        response = await call_next(request)
        elapsed = time.monotonic() - start
        response.headers[TRANSACTION_ID_HEADER] = transaction_id
        audit_logger.info(
            "%s %s %d %.3fs transaction_id=%s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed,
            transaction_id,
        )
        return response

    # ── Routers ───────────────────────────────────────────────

    app.include_router(meta.router, dependencies=[Depends(check_key)])
    app.include_router(identifiers.router, dependencies=[Depends(check_key)])

    return app
