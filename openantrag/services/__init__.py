"""
Services package for OpenAntrag Display.

Provides the composition of API lookups and rendering used by the hosts.
"""

from .display_service import ProposalDisplayService

__all__ = ["ProposalDisplayService"]
