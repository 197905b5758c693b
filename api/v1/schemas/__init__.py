"""API v1 response schemas."""

from api.v1.schemas.parliaments import (
    DisplayNameResponse,
    ProcessStepsResponse,
    ProposalListResponse
)

__all__ = [
    "DisplayNameResponse",
    "ProcessStepsResponse",
    "ProposalListResponse",
]
