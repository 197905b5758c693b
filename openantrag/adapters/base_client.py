"""
Base client for the OpenAntrag JSON API.

Owns the HTTP connection and the single request primitive every lookup
is built on: GET a URL, insist on HTTP 200 with a non-empty body, decode
the JSON. Anything else is reported as a RequestError.

Responsibility: HTTP transport and response validation for API lookups
"""

from typing import Any, Optional
from urllib.parse import quote
import logging

import httpx

from ..config import settings


class RequestError(Exception):
    """
    Raised when an API request does not produce a usable JSON body.

    Covers transport failures, non-200 responses, empty bodies and
    bodies that are not valid JSON.
    """

    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code


class BaseClient:
    """
    Synchronous HTTP client wrapper for a JSON API.

    One instance is created by the owning process and closed once when
    that process shuts down. Each request is a single GET with no retries;
    timeouts are whatever httpx applies by default.

    Example:
        with BaseClient("openantrag", "http://openantrag.de/api") as client:
            data = client.request("representation/GetByKey/{}", "bund")
    """

    def __init__(
        self,
        source_name: str,
        api_host: str,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize base client.

        Args:
            source_name: Identifier for this client (used in the logger name)
            api_host: Base URL all request paths are appended to
            user_agent: User-Agent header (defaults to configured value)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.source_name = source_name
        self.api_host = api_host.rstrip("/")

        self.client = httpx.Client(
            transport=transport,
            headers={
                "User-Agent": user_agent or settings.openantrag.user_agent,
                "Accept": "application/json"
            },
            follow_redirects=True
        )

        self.logger = logging.getLogger(f"adapter.{source_name}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def build_url(self, path: str, *params: Any) -> str:
        """
        Build a full URL from a path template and its parameters.

        Each parameter fills one ``{}`` placeholder and is escaped as a
        single path segment.

        Example: ("proposal/{}/GetTop/{}", "bund", 3) -> ".../proposal/bund/GetTop/3"
        """
        segments = [quote(str(param), safe="") for param in params]
        return f"{self.api_host}/{path.format(*segments)}"

    def request(self, path: str, *params: Any) -> Any:
        """
        Perform a GET request and return the decoded JSON body.

        Args:
            path: Path template relative to the API host
            *params: Values for the template's placeholders

        Returns:
            The decoded JSON value, unchanged

        Raises:
            RequestError: On transport failure, non-200 status, empty or invalid body
        """
        return self.get_json(self.build_url(path, *params))

    def get_json(self, url: str) -> Any:
        """
        GET an already built URL and return the decoded JSON body.

        Raises:
            RequestError: On transport failure, non-200 status, empty or invalid body
        """
        self.logger.debug(f"GET {url}")

        try:
            response = self.client.get(url)
        except httpx.HTTPError as e:
            raise RequestError(str(e) or type(e).__name__, url=url) from e

        if response.status_code != 200:
            raise RequestError(
                response.reason_phrase or f"HTTP {response.status_code}",
                url=url,
                status_code=response.status_code
            )

        if not response.content:
            raise RequestError("Empty response body", url=url, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise RequestError(f"Invalid JSON in response: {e}", url=url, status_code=response.status_code) from e

    def close(self) -> None:
        """Close HTTP client connection"""
        self.client.close()
