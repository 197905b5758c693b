"""
OpenAntrag API client for parliaments and proposals.

Wraps the three OpenAntrag lookups the display needs. Every lookup takes
an explicit ErrorPolicy; the defaults are:

- get_display_name: FALLBACK, returns the parliament key itself
- get_process_steps: FALLBACK, returns an empty list
- get_top_proposals: RAISE, the caller decides what to show

Responsibility: Fetch and type OpenAntrag parliament and proposal data
"""

from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from .base_client import BaseClient, RequestError
from ..config import settings
from ..models.openantrag import ErrorPolicy, ParliamentDescriptor, Proposal, ProcessStep


class OpenAntragClient(BaseClient):
    """
    Client for the OpenAntrag JSON API.

    Example:
        client = OpenAntragClient()
        name = client.get_display_name("bund")
        proposals = client.get_top_proposals("bund", 3)
        client.close()
    """

    DISPLAY_NAME_PATH = "representation/GetByKey/{}"
    PROCESS_STEPS_PATH = "representation/GetProcessSteps/{}"
    TOP_PROPOSALS_PATH = "proposal/{}/GetTop/{}"

    def __init__(
        self,
        api_host: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize OpenAntrag client.

        Args:
            api_host: API base URL (defaults to settings.openantrag.api_host)
            transport: Optional httpx transport for stubbing the remote API
        """
        super().__init__(
            source_name="openantrag",
            api_host=api_host or settings.openantrag.api_host,
            transport=transport
        )

    def get_display_name(self, parliament: str, on_error: ErrorPolicy = ErrorPolicy.FALLBACK) -> str:
        """
        Get the display name of a parliament.

        Args:
            parliament: Key of the parliament
            on_error: FALLBACK returns the key unchanged, RAISE propagates

        Returns:
            The parliament's Name2, or the key when the lookup fails
        """
        url = self.build_url(self.DISPLAY_NAME_PATH, parliament)
        try:
            payload = self.get_json(url)
            descriptor = self._parse_descriptor(payload, url)
        except RequestError as e:
            if on_error is ErrorPolicy.RAISE:
                self.logger.error(f"Display name lookup failed for {parliament}: {e}")
                raise
            self.logger.warning(f"Display name lookup failed for {parliament}, using key: {e}")
            return parliament

        # A parliament without a name is shown under its key
        return descriptor.name2 or parliament

    def get_process_steps(
        self,
        parliament: str,
        on_error: ErrorPolicy = ErrorPolicy.FALLBACK
    ) -> List[ProcessStep]:
        """
        Get the possible process steps for a parliament.

        Args:
            parliament: Key of the parliament
            on_error: FALLBACK returns an empty list, RAISE propagates

        Returns:
            The decoded step objects, unmodified
        """
        url = self.build_url(self.PROCESS_STEPS_PATH, parliament)
        try:
            payload = self.get_json(url)
            if not isinstance(payload, list):
                raise RequestError("Process steps payload is not a list", url=url)
        except RequestError as e:
            if on_error is ErrorPolicy.RAISE:
                self.logger.error(f"Process steps lookup failed for {parliament}: {e}")
                raise
            self.logger.warning(f"Process steps lookup failed for {parliament}, returning none: {e}")
            return []

        return payload

    def get_top_proposals(
        self,
        parliament: str,
        count: int,
        on_error: ErrorPolicy = ErrorPolicy.RAISE
    ) -> List[Proposal]:
        """
        Get the latest proposals for a parliament.

        Args:
            parliament: Key of the parliament
            count: Maximum number of proposals to be returned
            on_error: RAISE propagates (default), FALLBACK returns an empty list

        Returns:
            Proposals in the order the API returned them

        Raises:
            RequestError: If the lookup fails and on_error is RAISE
        """
        url = self.build_url(self.TOP_PROPOSALS_PATH, parliament, int(count))
        try:
            payload = self.get_json(url)
            proposals = self._parse_proposals(payload, url)
        except RequestError as e:
            if on_error is ErrorPolicy.RAISE:
                self.logger.error(f"Proposal lookup failed for {parliament}: {e}")
                raise
            self.logger.warning(f"Proposal lookup failed for {parliament}, returning none: {e}")
            return []

        self.logger.info(f"Fetched {len(proposals)} proposals for {parliament}")
        return proposals

    def _parse_descriptor(self, payload: Any, url: str) -> ParliamentDescriptor:
        """
        Validate a GetByKey payload.

        Raises:
            RequestError: If the payload is not a parliament object
        """
        if not isinstance(payload, dict):
            raise RequestError("Parliament payload is not an object", url=url)
        try:
            return ParliamentDescriptor.model_validate(payload)
        except ValidationError as e:
            raise RequestError(f"Malformed parliament payload: {e}", url=url) from e

    def _parse_proposals(self, payload: Any, url: str) -> List[Proposal]:
        """
        Validate a GetTop payload into Proposal models.

        Raises:
            RequestError: If the payload is not a list of objects
        """
        if not isinstance(payload, list):
            raise RequestError("Proposal payload is not a list", url=url)
        try:
            return [Proposal.model_validate(raw) for raw in payload]
        except ValidationError as e:
            raise RequestError(f"Malformed proposal payload: {e}", url=url) from e
