"""REST endpoints for match normalization."""

from typing import Any, Optional

from fastapi import APIRouter, Body, HTTPException, Query, Request
from pydantic import BaseModel

from dota_scout.errors import MalformedInputError
from dota_scout.services.match_service import MatchService

router = APIRouter(prefix="/api/matches", tags=["matches"])


class FailureInfo(BaseModel):
    """A batch record that could not be normalized."""

    index: int
    match_id: int | None
    error: str


class BatchResponse(BaseModel):
    """Response for batch normalization."""

    matches: list[dict[str, Any]]
    failures: list[FailureInfo]


def _get_service(request: Request) -> MatchService:
    return request.app.state.match_service


@router.post("/normalize")
def normalize_match(
    request: Request,
    payload: dict[str, Any] = Body(...),
    force: bool = Query(False, description="Rebuild even if the match is cached"),
):
    """Normalize one raw provider match."""
    service = _get_service(request)
    try:
        match = service.normalize(payload, force=force)
    except MalformedInputError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return match.to_dict()


@router.post("/normalize/batch", response_model=BatchResponse)
def normalize_batch(
    request: Request,
    payloads: list[Any] = Body(...),
    force: bool = Query(False),
):
    """Normalize several raw matches; failures are reported per record."""
    result = _get_service(request).normalize_batch(payloads, force=force)
    return BatchResponse(
        matches=[match.to_dict() for match in result.matches],
        failures=[
            FailureInfo(index=f.index, match_id=f.match_id, error=f.error)
            for f in result.failures
        ],
    )


@router.delete("/cache")
def invalidate_cache(
    request: Request,
    match_id: Optional[int] = Query(None, description="Match to drop; all when omitted"),
):
    """Invalidate cached matches."""
    removed = _get_service(request).invalidate(match_id)
    return {"success": True, "removed": removed}


@router.get("/{match_id}")
def get_match(request: Request, match_id: int):
    """Get a previously normalized match."""
    match = _get_service(request).get_match(match_id)
    if match is None:
        raise HTTPException(404, f"Match not found: {match_id}")
    return match.to_dict()
