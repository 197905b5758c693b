"""
FastAPI dependencies for the OpenAntrag client.

The client and display service are created once by the application
lifespan and stored on app.state.

Responsibility: Request-scoped access to process-wide services
"""

from fastapi import Request

from openantrag.adapters.openantrag_client import OpenAntragClient
from openantrag.services.display_service import ProposalDisplayService


def get_client(request: Request) -> OpenAntragClient:
    """Return the application's OpenAntrag client."""
    return request.app.state.openantrag_client


def get_display_service(request: Request) -> ProposalDisplayService:
    """Return the application's proposal display service."""
    return request.app.state.display_service
