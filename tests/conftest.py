"""Shared test fixtures."""

from typing import Callable

import httpx
import pytest

from openantrag.adapters.openantrag_client import OpenAntragClient

API_HOST = "http://openantrag.test/api"

SAMPLE_PROPOSALS = [
    {"Title": "A", "FullUrl": "http://openantrag.test/bund/a", "status": "Eingereicht"},
    {"Title": "B", "FullUrl": "http://openantrag.test/bund/b", "status": "In Beratung"},
    {"Title": "C", "FullUrl": "http://openantrag.test/bund/c", "status": "Abgelehnt"},
]


def route_handler(routes: dict[str, httpx.Response]) -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport handler answering by URL path; unknown paths get 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        return routes.get(request.url.path, httpx.Response(404))

    return handler


@pytest.fixture
def make_client():
    """Factory for OpenAntragClient instances backed by a MockTransport."""
    clients: list[OpenAntragClient] = []

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> OpenAntragClient:
        client = OpenAntragClient(api_host=API_HOST, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture
def stub_client(make_client) -> OpenAntragClient:
    """Client whose remote API knows parliament XX."""
    return make_client(route_handler({
        "/api/representation/GetByKey/XX": httpx.Response(200, json={"Key": "XX", "Name2": "Landtag XX"}),
        "/api/representation/GetProcessSteps/XX": httpx.Response(200, json=[{"Id": 1}, {"Id": 2}]),
        "/api/proposal/XX/GetTop/3": httpx.Response(200, json=SAMPLE_PROPOSALS),
    }))


@pytest.fixture
def offline_client(make_client) -> OpenAntragClient:
    """Client whose transport always fails to connect."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return make_client(handler)
