"""Defaults and environment lookups for model service connections."""

from __future__ import annotations

import os

from multimodal._exceptions import ClientConnectionError

DEFAULT_TEMPERATURE = 0.4
DEFAULT_TIMEOUT = 120.0
DEFAULT_LOCATION = "us-central1"

_PROJECT_ENV_VARS = ("GCP_PROJECT", "GCLOUD_PROJECT")
_LOCATION_ENV_VAR = "GCP_LOCATION"


def resolve_project(project_id: str | None) -> str:
    """Return ``project_id`` or the first project ID set in the environment."""
    if project_id:
        return project_id
    for env_var in _PROJECT_ENV_VARS:
        value = os.environ.get(env_var, "")
        if value:
            return value
    raise ClientConnectionError(
        "No project ID provided. Pass project_id= or set the "
        f"{' or '.join(_PROJECT_ENV_VARS)} environment variable."
    )


def resolve_location(location: str | None) -> str:
    return location or os.environ.get(_LOCATION_ENV_VAR, "") or DEFAULT_LOCATION
