"""
Pydantic schemas for parliament API responses.

Defines response models for parliament lookup endpoints.

Responsibility: Parliament response schemas
"""

from typing import Any, Dict, List
from pydantic import BaseModel


class DisplayNameResponse(BaseModel):
    """Display name of a parliament."""

    parliament: str
    display_name: str


class ProcessStepsResponse(BaseModel):
    """Process steps of a parliament, passed through unmodified."""

    parliament: str
    steps: List[Any]


class ProposalListResponse(BaseModel):
    """Latest proposals of a parliament in the remote API's field naming."""

    parliament: str
    count: int
    proposals: List[Dict[str, Any]]
