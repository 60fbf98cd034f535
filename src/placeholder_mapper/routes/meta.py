"""Meta endpoints — health, version, authority table."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from placeholder_mapper import __version__
from placeholder_mapper.deps import get_resolver
from placeholder_mapper.resolver import IdentifierResolver

router = APIRouter(prefix="/api/v1", tags=["meta"])


@router.get("/health")
def health():
    return {"status": "ok", "service": "placeholder-mapper"}


@router.get("/version")
def version():
    return {"service": __version__}


@router.get("/authorities")
def authorities(resolver: IdentifierResolver = Depends(get_resolver)):
    return dict(resolver.authorities)
