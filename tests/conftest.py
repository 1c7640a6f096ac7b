"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from google.genai import types


class MockResponse:
    """Mimics ``requests.Response`` for testing fetch_blob."""

    def __init__(
        self,
        content: bytes = b"",
        status_code: int = 200,
        reason: str = "OK",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.content = content
        self.ok = 200 <= status_code < 300
        self.headers: dict[str, str] = headers or {}

    def __enter__(self) -> MockResponse:
        return self

    def __exit__(self, *args: object) -> None:
        pass


def text_response(text: str) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(role="model", parts=[types.Part(text=text)]))
        ]
    )


@pytest.fixture
def mock_get(monkeypatch: pytest.MonkeyPatch) -> MagicMock:
    """Monkeypatch ``requests.get`` and return the mock."""
    mock = MagicMock()
    monkeypatch.setattr("requests.get", mock)
    return mock


@pytest.fixture
def genai_client() -> MagicMock:
    """A stand-in for ``google.genai.Client`` that answers with a fixed text."""
    client = MagicMock()
    client.models.generate_content.return_value = text_response("  A frog and some scones.  ")
    client.models.count_tokens.return_value = types.CountTokensResponse(total_tokens=7)
    return client


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "frog.jpg"
    path.write_bytes(b"0123456789")
    return path
