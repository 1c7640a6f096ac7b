"""Exceptions raised while building and submitting prompts."""

from __future__ import annotations


class MultiModalError(Exception):
    """Base class for every error raised by this package."""


class FileReadError(MultiModalError, OSError):
    """Raised when an image file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"unable to read {path}: {reason}")


class DownloadError(MultiModalError):
    """Raised when a URL cannot be fetched into a blob.

    ``status_code`` is ``None`` for transport failures.
    """

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class ClientConnectionError(MultiModalError):
    """Raised when a client for the model service cannot be created."""


class GenerationError(MultiModalError):
    """Raised when a request to the model service fails."""


class TokenCountError(GenerationError):
    """Raised when counting the tokens of one prompt part fails."""

    def __init__(self, index: int, reason: object) -> None:
        self.index = index
        super().__init__(f"unable to count tokens for part {index}: {reason}")


class EmptyResponseError(MultiModalError):
    """Raised when the model returns no candidates or no content parts."""


class InternalFaultError(MultiModalError):
    """Raised when an unexpected exception occurs while reading a response."""


class DeadlineExceededError(GenerationError):
    """Raised when a call runs past its timeout between requests."""
