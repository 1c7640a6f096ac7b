"""Multimodal prompt builder for Vertex AI generative models."""

from multimodal._builder import MultiModal
from multimodal._config import DEFAULT_LOCATION, DEFAULT_TEMPERATURE, DEFAULT_TIMEOUT
from multimodal._exceptions import (
    ClientConnectionError,
    DeadlineExceededError,
    DownloadError,
    EmptyResponseError,
    FileReadError,
    GenerationError,
    InternalFaultError,
    MultiModalError,
    TokenCountError,
)
from multimodal._types import Blob, ImageBytes, PromptPart, RemoteReference, Text

__all__ = [
    "DEFAULT_LOCATION",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TIMEOUT",
    "Blob",
    "ClientConnectionError",
    "DeadlineExceededError",
    "DownloadError",
    "EmptyResponseError",
    "FileReadError",
    "GenerationError",
    "ImageBytes",
    "InternalFaultError",
    "MultiModal",
    "MultiModalError",
    "PromptPart",
    "RemoteReference",
    "Text",
    "TokenCountError",
]
