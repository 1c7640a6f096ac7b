"""MultiModal — the prompt builder and main user-facing entry point."""

from __future__ import annotations

import logging
import mimetypes
import posixpath
import time
from pathlib import Path
from urllib.parse import urlsplit

import httpx
from google import genai
from google.auth.exceptions import GoogleAuthError
from google.genai import errors, types

from multimodal._config import (
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    resolve_location,
    resolve_project,
)
from multimodal._exceptions import (
    ClientConnectionError,
    DeadlineExceededError,
    FileReadError,
    GenerationError,
    InternalFaultError,
    MultiModalError,
    TokenCountError,
)
from multimodal._http import fetch_blob
from multimodal._types import Blob, ImageBytes, PromptPart, RemoteReference, Text
from multimodal._vertex import (
    first_response_part,
    open_client,
    render_part,
    to_sdk_part,
    to_sdk_parts,
)

logger = logging.getLogger(__name__)


def encoding_hint(path: str | Path) -> str:
    """Return the image format hint for ``path``: its extension, ``jpg`` as ``jpeg``.

    Everything after the last dot of the file name counts, so ``.jpg`` gives ``jpeg``.
    """
    name = Path(path).name
    _, dot, ext = name.rpartition(".")
    if not dot:
        ext = ""
    return "jpeg" if ext == "jpg" else ext


def guess_mime_type(uri: str) -> str | None:
    """Guess a MIME type from the extension of the URI's path, or return None."""
    try:
        path = urlsplit(uri).path
    except ValueError:
        # unparseable, e.g. an unmatched "[" in the host
        path = uri.split("?", 1)[0]
    ext = posixpath.splitext(path)[1]
    if not ext:
        return None
    return mimetypes.guess_type(f"file{ext}")[0]


def _remaining_options(deadline: float | None) -> types.HttpOptions | None:
    """Return request options bounded by what is left before ``deadline``."""
    if deadline is None:
        return None
    remaining = deadline - time.monotonic()
    if remaining <= 0:
        raise DeadlineExceededError("timeout exceeded before the request could be sent")
    return types.HttpOptions(timeout=max(1, int(remaining * 1000)))


class MultiModal:
    """Accumulates multimodal prompt parts and submits them to a Vertex AI model.

    Usage::

        from multimodal import MultiModal

        mm = MultiModal("gemini-1.0-pro-vision", temperature=0.4)
        mm.add_image("frog.png")
        mm.add_uri("gs://generativeai-downloads/images/scones.jpg")
        mm.add_text("Describe what is common for these two images.")
        print(mm.submit("my-project", "us-central1"))

    Parts are only ever appended; submitting does not consume them, so the same
    builder can be submitted more than once.
    """

    def __init__(self, model: str, temperature: float = DEFAULT_TEMPERATURE) -> None:
        self.model = model
        self.temperature = temperature
        self.trim = True
        self.verbose = False
        self.timeout = DEFAULT_TIMEOUT
        self._parts: list[PromptPart] = []

    def __len__(self) -> int:
        return len(self._parts)

    def __repr__(self) -> str:
        return (
            f"MultiModal(model={self.model!r}, temperature={self.temperature}, "
            f"parts={len(self)})"
        )

    @property
    def parts(self) -> tuple[PromptPart, ...]:
        return tuple(self._parts)

    def set_timeout(self, timeout: float) -> None:
        """Set the timeout, in seconds, used for downloads and model requests."""
        self.timeout = timeout

    def set_verbose(self, verbose: bool) -> None:
        """Log progress messages at INFO instead of DEBUG."""
        self.verbose = verbose

    def set_trim(self, trim: bool) -> None:
        """Control whether surrounding whitespace is stripped from responses."""
        self.trim = trim

    def _log(self, msg: str, *args: object) -> None:
        logger.log(logging.INFO if self.verbose else logging.DEBUG, msg, *args)

    # --- Adding parts ---

    def add_image(self, path: str | Path) -> None:
        """Read an image file and append it as an ImageBytes part."""
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise FileReadError(str(path), exc.strerror or str(exc)) from exc
        self._log("Read %d bytes from %s", len(data), path)
        hint = encoding_hint(path)
        self._log("Using encoding hint: %s", hint)
        self._parts.append(ImageBytes(encoding_hint=hint, data=data))

    def must_add_image(self, path: str | Path) -> None:
        """Like :meth:`add_image`, but exit the process if the file cannot be read."""
        try:
            self.add_image(path)
        except FileReadError as exc:
            logger.critical("%s", exc)
            raise SystemExit(1) from exc

    def add_uri(self, uri: str, mime_type: str | None = None) -> None:
        """Append a reference to content the model service fetches itself.

        Example URI: ``"gs://generativeai-downloads/images/scones.jpg"``
        """
        if mime_type is None:
            mime_type = guess_mime_type(uri)
        self._parts.append(RemoteReference(uri=uri, mime_type=mime_type))

    def add_url(self, url: str) -> None:
        """Download ``url`` and append its body as a Blob with the served MIME type."""
        blob = fetch_blob(url, timeout=self.timeout)
        self._log(
            "Downloaded %d bytes with MIME type %s from %s", len(blob.data), blob.mime_type, url
        )
        self._parts.append(blob)

    def add_data(self, mime_type: str, data: bytes) -> None:
        """Append arbitrary data with the given MIME type."""
        self._parts.append(Blob(mime_type=mime_type, data=data))

    def add_text(self, text: str) -> None:
        self._parts.append(Text(text=text))

    # --- Token counting ---

    def count_tokens_with_client(
        self, client: genai.Client, *, deadline: float | None = None
    ) -> int:
        """Count the tokens of every accumulated part using ``client``.

        ``deadline`` is a ``time.monotonic()`` value bounding all of the requests
        together; each request gets only the time that is left.
        """
        total = 0
        for index, part in enumerate(self._parts):
            config = types.CountTokensConfig(http_options=_remaining_options(deadline))
            try:
                resp = client.models.count_tokens(
                    model=self.model, contents=to_sdk_part(part), config=config
                )
            except GoogleAuthError as exc:
                raise ClientConnectionError(f"unable to authenticate: {exc}") from exc
            except (errors.APIError, httpx.HTTPError) as exc:
                raise TokenCountError(index, exc) from exc
            total += resp.total_tokens or 0
        return total

    def count_text_tokens_with_client(
        self, client: genai.Client, text: str, *, deadline: float | None = None
    ) -> int:
        """Count the tokens of ``text`` using ``client``."""
        config = types.CountTokensConfig(http_options=_remaining_options(deadline))
        try:
            resp = client.models.count_tokens(model=self.model, contents=text, config=config)
        except GoogleAuthError as exc:
            raise ClientConnectionError(f"unable to authenticate: {exc}") from exc
        except (errors.APIError, httpx.HTTPError) as exc:
            raise GenerationError(f"unable to count tokens: {exc}") from exc
        return resp.total_tokens or 0

    def count_tokens(self, project_id: str | None = None, location: str | None = None) -> int:
        """Open a transient client and count the tokens of the accumulated parts.

        The whole count, over every part, is bounded by ``timeout``.
        """
        deadline = time.monotonic() + self.timeout
        with open_client(
            resolve_project(project_id), resolve_location(location), self.timeout
        ) as client:
            return self.count_tokens_with_client(client, deadline=deadline)

    def count_text_tokens(self, project_id: str | None, location: str | None, text: str) -> int:
        """Open a transient client and count the tokens of ``text``.

        ``project_id`` and ``location`` fall back to the environment when None.
        """
        deadline = time.monotonic() + self.timeout
        with open_client(
            resolve_project(project_id), resolve_location(location), self.timeout
        ) as client:
            return self.count_text_tokens_with_client(client, text, deadline=deadline)

    # --- Submission ---

    def _generate(self, client: genai.Client, deadline: float | None) -> str:
        config = types.GenerateContentConfig(
            temperature=self.temperature, http_options=_remaining_options(deadline)
        )
        self._log(
            "Submitting %d parts to %s (temperature=%s)",
            len(self._parts),
            self.model,
            self.temperature,
        )
        try:
            response = client.models.generate_content(
                model=self.model, contents=to_sdk_parts(self._parts), config=config
            )
        except GoogleAuthError as exc:
            raise ClientConnectionError(f"unable to authenticate: {exc}") from exc
        except (errors.APIError, httpx.HTTPError) as exc:
            raise GenerationError(f"unable to generate contents: {exc}") from exc
        result = render_part(first_response_part(response)) + "\n"
        if self.trim:
            return result.strip()
        return result

    def submit_to_client(self, client: genai.Client, *, deadline: float | None = None) -> str:
        """Send all parts to the model using ``client`` and return the response text.

        Unexpected exceptions are re-raised as InternalFaultError, so callers only
        need to handle MultiModalError.
        """
        try:
            return self._generate(client, deadline)
        except MultiModalError:
            raise
        except Exception as exc:
            raise InternalFaultError(f"unexpected fault while generating: {exc!r}") from exc

    def submit(self, project_id: str | None = None, location: str | None = None) -> str:
        """Open a transient client bounded by ``timeout`` and submit all parts.

        Raises ClientConnectionError when no project is configured or the client
        cannot authenticate.
        """
        deadline = time.monotonic() + self.timeout
        with open_client(
            resolve_project(project_id), resolve_location(location), self.timeout
        ) as client:
            return self.submit_to_client(client, deadline=deadline)
