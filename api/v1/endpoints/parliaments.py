"""
Parliament API endpoints.

Provides REST endpoints for OpenAntrag parliament lookups and the
rendered proposal fragment.

Responsibility: Parliament endpoints for API v1
"""

from typing import Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from openantrag.adapters.base_client import RequestError
from openantrag.adapters.openantrag_client import OpenAntragClient
from openantrag.config import settings
from openantrag.services.display_service import ProposalDisplayService
from api.dependencies import get_client, get_display_service
from api.v1.schemas.parliaments import (
    DisplayNameResponse,
    ProcessStepsResponse,
    ProposalListResponse
)

router = APIRouter()

logger = logging.getLogger(__name__)


def _upstream_error(parliament: str, error: RequestError) -> HTTPException:
    logger.error(f"OpenAntrag request failed for {parliament}: {error.message}")
    return HTTPException(
        status_code=502,
        detail=f"OpenAntrag request failed: {error.message}"
    )


@router.get("/parliaments/{parliament}/name", response_model=DisplayNameResponse)
def get_display_name(
    parliament: str,
    client: OpenAntragClient = Depends(get_client)
):
    """
    Get the display name of a parliament.

    Falls back to the key itself when OpenAntrag cannot be reached.
    """
    return {
        "parliament": parliament,
        "display_name": client.get_display_name(parliament)
    }


@router.get("/parliaments/{parliament}/process-steps", response_model=ProcessStepsResponse)
def get_process_steps(
    parliament: str,
    client: OpenAntragClient = Depends(get_client)
):
    """
    Get the process steps of a parliament.

    Returns an empty list when OpenAntrag cannot be reached.
    """
    return {
        "parliament": parliament,
        "steps": client.get_process_steps(parliament)
    }


@router.get("/parliaments/{parliament}/proposals", response_model=ProposalListResponse)
def list_proposals(
    parliament: str,
    count: Optional[int] = Query(None, ge=1, le=100, description="Number of proposals"),
    client: OpenAntragClient = Depends(get_client)
):
    """
    Get the latest proposals of a parliament.

    Raises:
        HTTPException: 502 if OpenAntrag cannot be reached
    """
    if count is None:
        count = settings.openantrag.default_count
    try:
        proposals = client.get_top_proposals(parliament, count)
    except RequestError as e:
        raise _upstream_error(parliament, e) from e

    return {
        "parliament": parliament,
        "count": count,
        "proposals": [p.to_payload() for p in proposals]
    }


@router.get("/parliaments/{parliament}/display", response_class=HTMLResponse)
def display_proposals(
    parliament: str,
    count: Optional[int] = Query(None, ge=1, le=100, description="Number of proposals"),
    color: Optional[str] = Query(None, max_length=64, description="CSS background color"),
    service: ProposalDisplayService = Depends(get_display_service)
):
    """
    Render the latest proposals of a parliament as an HTML fragment.

    Raises:
        HTTPException: 502 if OpenAntrag cannot be reached
    """
    try:
        html = service.render(parliament, count=count, color=color)
    except RequestError as e:
        raise _upstream_error(parliament, e) from e

    return HTMLResponse(content=html)
