"""
Models package for OpenAntrag Display.

This package contains the Pydantic models for:
- OpenAntrag API response shapes (parliaments, proposals)
- Per-lookup error policies
"""

from .openantrag import (
    ErrorPolicy,
    ParliamentDescriptor,
    Proposal,
    ProcessStep,
)

__all__ = [
    "ErrorPolicy",
    "ParliamentDescriptor",
    "Proposal",
    "ProcessStep",
]
