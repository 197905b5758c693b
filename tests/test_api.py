import httpx
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_client, get_display_service
from api.main import app
from openantrag.services.display_service import ProposalDisplayService

from conftest import SAMPLE_PROPOSALS


@pytest.fixture
def api_client(request):
    """TestClient with the OpenAntrag client replaced by the named fixture."""
    openantrag_client = request.getfixturevalue(request.param)
    app.dependency_overrides[get_client] = lambda: openantrag_client
    app.dependency_overrides[get_display_service] = lambda: ProposalDisplayService(openantrag_client)

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


def test_health() -> None:
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.parametrize("api_client", ["stub_client"], indirect=True)
def test_display_name(api_client) -> None:
    response = api_client.get("/api/v1/parliaments/XX/name")

    assert response.status_code == 200
    assert response.json() == {"parliament": "XX", "display_name": "Landtag XX"}


@pytest.mark.parametrize("api_client", ["offline_client"], indirect=True)
def test_display_name_falls_back_when_offline(api_client) -> None:
    response = api_client.get("/api/v1/parliaments/XX/name")

    assert response.status_code == 200
    assert response.json()["display_name"] == "XX"


@pytest.mark.parametrize("api_client", ["offline_client"], indirect=True)
def test_process_steps_empty_when_offline(api_client) -> None:
    response = api_client.get("/api/v1/parliaments/XX/process-steps")

    assert response.status_code == 200
    assert response.json() == {"parliament": "XX", "steps": []}


@pytest.mark.parametrize("api_client", ["stub_client"], indirect=True)
def test_proposals(api_client) -> None:
    response = api_client.get("/api/v1/parliaments/XX/proposals", params={"count": 3})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 3
    assert body["proposals"] == SAMPLE_PROPOSALS


@pytest.mark.parametrize("api_client", ["offline_client"], indirect=True)
def test_proposals_upstream_failure_is_502(api_client) -> None:
    response = api_client.get("/api/v1/parliaments/XX/proposals", params={"count": 3})

    assert response.status_code == 502
    assert response.json()["detail"].startswith("OpenAntrag request failed")


@pytest.mark.parametrize("api_client", ["stub_client"], indirect=True)
def test_proposals_rejects_zero_count(api_client) -> None:
    response = api_client.get("/api/v1/parliaments/XX/proposals", params={"count": 0})

    assert response.status_code == 422


@pytest.mark.parametrize("api_client", ["stub_client"], indirect=True)
def test_display_returns_html_fragment(api_client) -> None:
    response = api_client.get("/api/v1/parliaments/XX/display", params={"count": 3, "color": "#eef"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<h2>Anträge Landtag XX</h2>" in response.text
    assert 'style="background-color:#eef"' in response.text


@pytest.mark.parametrize("api_client", ["offline_client"], indirect=True)
def test_display_upstream_failure_is_502(api_client) -> None:
    response = api_client.get("/api/v1/parliaments/XX/display")

    assert response.status_code == 502


@pytest.mark.parametrize("api_client", ["stub_client"], indirect=True)
def test_proposals_json_does_not_add_missing_fields(api_client, make_client) -> None:
    partial = make_client(lambda request: httpx.Response(200, json=[{"Title": "A"}]))
    app.dependency_overrides[get_client] = lambda: partial

    response = api_client.get("/api/v1/parliaments/XX/proposals", params={"count": 1})

    assert response.status_code == 200
    assert response.json()["proposals"] == [{"Title": "A"}]
