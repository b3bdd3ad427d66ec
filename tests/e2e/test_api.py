"""
End-to-end tests for API endpoints.

These tests verify the full API behavior using FastAPI's TestClient
with overridden dependencies where a process would be spawned.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from roamingzed import __version__
from roamingzed.presentation.main import create_app
from roamingzed.presentation.api.dependencies import get_context_server_client
from roamingzed.application.interfaces.i_context_server_client import (
    ContextServerTool,
)
from roamingzed.domain.exceptions.domain_exceptions import (
    ContextServerUnavailableError,
)


@pytest.fixture
def client():
    """Create test client."""
    app = create_app()
    return TestClient(app)


class TestHealthEndpoints:
    """Tests for health and root endpoints."""

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root_endpoint(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "RoamingZed"
        assert data["version"] == __version__
        assert "docs" in data
        assert "health" in data


class TestCommandEndpoints:
    """Tests for slash command endpoints."""

    def test_list_commands(self, client):
        response = client.get("/commands")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert [c["name"] for c in data["commands"]] == ["backlinks", "graph", "related"]
        assert data["commands"][2]["requires_argument"] is True

    def test_run_backlinks(self, client):
        response = client.post(
            "/commands/backlinks/run",
            json={"arguments": [], "workspace_root": "/home/user/notes"},
        )

        assert response.status_code == 200
        data = response.json()
        assert "/home/user/notes" in data["text"]
        assert data["sections"] == [
            {
                "start": 0,
                "end": len(data["text"].encode("utf-8")),
                "label": "Backlinks",
            }
        ]

    def test_run_graph_without_workspace(self, client):
        response = client.post("/commands/graph/run", json={})

        assert response.status_code == 200
        data = response.json()
        assert "current workspace" in data["text"]
        assert data["sections"][0]["label"] == "Link Graph"

    def test_run_related(self, client):
        response = client.post(
            "/commands/related/run",
            json={"arguments": ["zettelkasten", "method"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["text"].count("zettelkasten method") >= 4
        assert data["sections"][0]["label"] == "Related: zettelkasten method"

    def test_run_related_multibyte_range(self, client):
        response = client.post(
            "/commands/related/run",
            json={"arguments": ["café"]},
        )

        data = response.json()
        section = data["sections"][0]
        body = data["text"].encode("utf-8")
        assert section["end"] == len(body)
        assert body[section["start"] : section["end"]].decode("utf-8") == data["text"]

    def test_run_related_empty_query(self, client):
        response = client.post("/commands/related/run", json={"arguments": []})

        assert response.status_code == 400
        assert response.json()["detail"] == "Usage: /related <query>"

    def test_run_unknown_command(self, client):
        response = client.post("/commands/tags/run", json={})

        assert response.status_code == 404
        assert response.json()["detail"] == "Unknown command: tags"

    def test_run_invalid_body(self, client):
        response = client.post("/commands/related/run", json={"arguments": "x"})

        assert response.status_code == 422

    def test_completions_empty(self, client):
        response = client.post(
            "/commands/related/completions",
            json={"arguments": ["zett"]},
        )

        assert response.status_code == 200
        assert response.json() == {"completions": [], "total": 0}


class TestContextServerEndpoints:
    """Tests for context server endpoints."""

    @pytest.fixture
    def mock_server_client(self):
        mock = AsyncMock()
        mock.list_tools.return_value = [
            ContextServerTool(
                name="search_notes",
                description="Search notes by title",
                parameters={"type": "object"},
            )
        ]
        return mock

    @pytest.fixture
    def tools_client(self, mock_server_client):
        app = create_app()
        app.dependency_overrides[get_context_server_client] = lambda: mock_server_client
        return TestClient(app)

    def test_server_command(self, client):
        response = client.get("/context-server/command")

        assert response.status_code == 200
        assert response.json() == {
            "command": "npx",
            "args": ["roamingzed-mcp"],
            "env": [],
        }

    def test_list_tools(self, tools_client, mock_server_client):
        response = tools_client.get("/context-server/tools")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["tools"][0]["name"] == "search_notes"
        mock_server_client.list_tools.assert_awaited_once()

    def test_list_tools_unavailable(self, tools_client, mock_server_client):
        mock_server_client.list_tools.side_effect = ContextServerUnavailableError(
            "Could not list tools from 'npx roamingzed-mcp': not found"
        )

        response = tools_client.get("/context-server/tools")

        assert response.status_code == 502
        assert "npx roamingzed-mcp" in response.json()["detail"]
