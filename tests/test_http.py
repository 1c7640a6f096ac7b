"""Tests for _http.py helpers."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from multimodal._exceptions import DownloadError
from multimodal._http import fetch_blob
from tests.conftest import MockResponse


def test_fetch_blob_success(mock_get: MagicMock) -> None:
    mock_get.return_value = MockResponse(content=b"\x89PNG", headers={"Content-Type": "image/png"})
    blob = fetch_blob("https://example.com/frog.png", timeout=5)
    assert blob.mime_type == "image/png"
    assert blob.data == b"\x89PNG"
    mock_get.assert_called_once_with("https://example.com/frog.png", timeout=5)


def test_fetch_blob_bad_status(mock_get: MagicMock) -> None:
    mock_get.return_value = MockResponse(
        status_code=404, reason="Not Found", headers={"Content-Type": "text/html"}
    )
    with pytest.raises(DownloadError) as exc_info:
        fetch_blob("https://example.com/missing.png")
    assert exc_info.value.status_code == 404
    assert exc_info.value.url == "https://example.com/missing.png"
    assert "404" in str(exc_info.value)


def test_fetch_blob_missing_content_type(mock_get: MagicMock) -> None:
    mock_get.return_value = MockResponse(content=b"data")
    with pytest.raises(DownloadError, match="Content-Type"):
        fetch_blob("https://example.com/blob")


def test_fetch_blob_transport_error(mock_get: MagicMock) -> None:
    mock_get.side_effect = requests.ConnectionError("connection refused")
    with pytest.raises(DownloadError) as exc_info:
        fetch_blob("https://example.com/frog.png")
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_fetch_blob_timeout(mock_get: MagicMock) -> None:
    mock_get.side_effect = requests.Timeout("read timed out")
    with pytest.raises(DownloadError, match="failed to download"):
        fetch_blob("https://example.com/slow.png", timeout=0.1)
