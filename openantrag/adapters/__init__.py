"""
Adapters package for OpenAntrag Display.

This package contains the HTTP clients for remote data sources.
"""

from .base_client import BaseClient, RequestError
from .openantrag_client import OpenAntragClient

__all__ = [
    "BaseClient",
    "RequestError",
    "OpenAntragClient",
]
