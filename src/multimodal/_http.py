"""Thin HTTP helpers around ``requests``."""

from __future__ import annotations

import requests

from multimodal._exceptions import DownloadError
from multimodal._types import Blob


def _raise_for_status(url: str, r: requests.Response) -> None:
    if not r.ok:
        raise DownloadError(url, f"bad status: {r.status_code} {r.reason}", r.status_code)


def fetch_blob(url: str, timeout: float = 60) -> Blob:
    """GET ``url`` and return its body as a Blob, raising on any failure."""
    try:
        with requests.get(url, timeout=timeout) as r:
            _raise_for_status(url, r)
            data = r.content
            mime_type = r.headers.get("Content-Type", "")
    except requests.RequestException as exc:
        raise DownloadError(url, f"failed to download the file from URL: {exc}") from exc
    if not mime_type:
        raise DownloadError(url, f"no Content-Type header for the given URL: {url}", r.status_code)
    return Blob(mime_type=mime_type, data=data)
