"""Glue between prompt parts and the Vertex AI ``google-genai`` client."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager

from google import genai
from google.auth.exceptions import GoogleAuthError
from google.genai import types

from multimodal._exceptions import ClientConnectionError, EmptyResponseError
from multimodal._types import Blob, ImageBytes, PromptPart, RemoteReference, Text

logger = logging.getLogger(__name__)


def to_sdk_part(part: PromptPart) -> types.Part:
    """Convert a prompt part to a ``google.genai`` Part."""
    match part:
        case ImageBytes():
            return types.Part(inline_data=types.Blob(mime_type=part.mime_type, data=part.data))
        case RemoteReference(uri=uri, mime_type=mime_type):
            return types.Part(file_data=types.FileData(file_uri=uri, mime_type=mime_type))
        case Blob(mime_type=mime_type, data=data):
            return types.Part(inline_data=types.Blob(mime_type=mime_type, data=data))
        case Text(text=text):
            return types.Part(text=text)
    raise TypeError(f"Unsupported prompt part: {type(part).__name__}")


def to_sdk_parts(parts: Sequence[PromptPart]) -> list[types.Part]:
    return [to_sdk_part(p) for p in parts]


@contextmanager
def open_client(project_id: str, location: str, timeout: float) -> Iterator[genai.Client]:
    """Yield a transient Vertex AI client, closing it on every exit path.

    ``timeout`` is in seconds and bounds every request made with the client.
    """
    try:
        client = genai.Client(
            vertexai=True,
            project=project_id,
            location=location,
            http_options=types.HttpOptions(timeout=int(timeout * 1000)),
        )
    except (ValueError, GoogleAuthError) as exc:
        raise ClientConnectionError(f"unable to create client: {exc}") from exc
    logger.debug("Opened Vertex AI client (project=%s, location=%s)", project_id, location)
    try:
        yield client
    finally:
        client.close()
        logger.debug("Closed Vertex AI client")


def first_response_part(response: types.GenerateContentResponse | None) -> types.Part:
    """Return the first content part of the first candidate.

    Any missing level of the response raises EmptyResponseError.
    """
    if response is None or not response.candidates:
        raise EmptyResponseError("empty response from model: no candidates")
    candidate = response.candidates[0]
    if candidate is None or candidate.content is None or not candidate.content.parts:
        raise EmptyResponseError("empty response from model: no content parts")
    return candidate.content.parts[0]


def render_part(part: types.Part) -> str:
    if part.text is not None:
        return part.text
    return part.model_dump_json(exclude_none=True)
