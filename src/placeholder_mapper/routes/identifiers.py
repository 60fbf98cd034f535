"""Identifier endpoints — resolve legacy URLs, check UUID existence.

Failures surface as the resolver's exceptions; the app's exception
handlers turn them into HTTP statuses.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from placeholder_mapper.deps import get_resolver, get_transaction_id
from placeholder_mapper.models import Existence, Resolution
from placeholder_mapper.resolver import IdentifierResolver

router = APIRouter(prefix="/api/v1", tags=["identifiers"])


@router.get("/identifiers/resolve", response_model=Resolution)
def resolve(
    url: str = Query(...),
    post_id: str = Query(...),
    resolver: IdentifierResolver = Depends(get_resolver),
    transaction_id: str = Depends(get_transaction_id),
):
    uuid = resolver.resolve_identifier(url, post_id, transaction_id)
    return Resolution(uuid=uuid, url=url, post_id=post_id)


@router.get("/content/{uuid}/exists", response_model=Existence)
def content_exists(
    uuid: str,
    resolver: IdentifierResolver = Depends(get_resolver),
    transaction_id: str = Depends(get_transaction_id),
):
    return Existence(uuid=uuid, exists=resolver.content_exists(uuid, transaction_id))
