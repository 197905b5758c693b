"""
Display service for proposal fragments.

Composes the display name lookup, the proposal lookup and the HTML
renderer into the fragment shown for one parliament.

Responsibility: Build the proposal list fragment for a parliament
"""

from typing import Optional
import logging

from ..adapters.openantrag_client import OpenAntragClient
from ..config import settings
from ..models.openantrag import ErrorPolicy
from ..rendering.html import render_proposals_html

logger = logging.getLogger(__name__)


class ProposalDisplayService:
    """
    Service rendering the latest proposals of a parliament.

    The display name lookup falls back to the parliament key, while a
    failed proposal lookup propagates RequestError so the host can decide
    what to show instead of an empty list.

    Example:
        with ProposalDisplayService() as service:
            html = service.render("bund", count=3, color="#eef")
    """

    def __init__(self, client: Optional[OpenAntragClient] = None):
        """
        Initialize display service.

        Args:
            client: Optional OpenAntragClient (if None, one is created and owned)
        """
        self._owns_client = client is None
        self.client = client or OpenAntragClient()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def render(
        self,
        parliament: str,
        count: Optional[int] = None,
        color: Optional[str] = None
    ) -> str:
        """
        Render the proposal list fragment for a parliament.

        Args:
            parliament: Key of the parliament
            count: Number of proposals (defaults to settings.openantrag.default_count)
            color: Optional CSS background color for each proposal

        Returns:
            HTML fragment

        Raises:
            RequestError: If the proposals cannot be fetched
        """
        if count is None:
            count = settings.openantrag.default_count

        display_name = self.client.get_display_name(parliament, on_error=ErrorPolicy.FALLBACK)
        proposals = self.client.get_top_proposals(parliament, count, on_error=ErrorPolicy.RAISE)

        logger.debug(f"Rendering {len(proposals)} proposals for {display_name}")
        return render_proposals_html(display_name, proposals, color=color)

    def close(self) -> None:
        """Close the client if this service created it"""
        if self._owns_client:
            self.client.close()
