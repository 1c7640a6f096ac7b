"""Prompt part types accumulated by the builder."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ImageBytes:
    """Raw image content with a format hint such as ``"png"`` or ``"jpeg"``."""

    encoding_hint: str
    data: bytes

    @property
    def mime_type(self) -> str:
        return f"image/{self.encoding_hint}"


@dataclass(frozen=True, slots=True)
class RemoteReference:
    """Content the model service fetches itself, e.g. a ``gs://`` object."""

    uri: str
    mime_type: str | None = None


@dataclass(frozen=True, slots=True)
class Blob:
    """Content already held by the caller, with its declared MIME type."""

    mime_type: str
    data: bytes


@dataclass(frozen=True, slots=True)
class Text:
    """A literal text fragment."""

    text: str


type PromptPart = ImageBytes | RemoteReference | Blob | Text
