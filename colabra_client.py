import logging
import os

import requests

from colabra_types import (
    CommentActionError,
    CommentResult,
    Failure,
    FailureKind,
    ResourceReference,
)

# ---------------------------------------------------------------------------
# Colabra API configuration
# Set via environment variables.  The base URL defaults to the 2024-01 API
# version; override it to point at a staging deployment.
# ---------------------------------------------------------------------------

COLABRA_API_BASE = os.getenv("COLABRA_API_BASE", "https://api.colabra.ai/2024-01")
DEFAULT_HTTP_TIMEOUT = 30.0
USER_AGENT = "colabra-comment-action"

SUCCESS_STATUSES = (200, 201)

logger = logging.getLogger("colabra-comment-action")


def http_timeout() -> float:
    """Request timeout in seconds from COLABRA_HTTP_TIMEOUT, falling back to 30."""
    raw = os.getenv("COLABRA_HTTP_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_HTTP_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning(
            "Ignoring invalid COLABRA_HTTP_TIMEOUT %r, using %s seconds",
            raw,
            DEFAULT_HTTP_TIMEOUT,
        )
        return DEFAULT_HTTP_TIMEOUT


def comments_url() -> str:
    return f"{COLABRA_API_BASE.rstrip('/')}/comments"


def _colabra_headers(api_key: str) -> dict:
    return {
        "Authorization": f"X-Colabra-Api-Key {api_key}",
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }


def build_comment_payload(reference: ResourceReference, body_text: str) -> dict:
    """Request body for ``POST /comments``; ``body_text`` is sent as given."""
    return {
        reference.kind.field_name: reference.identifier,
        "body_text": body_text,
    }


def _api_failure(response: requests.Response) -> Failure:
    """Read the ``{"error": {"message", "code"}}`` envelope of a failed call.

    Bodies that are not JSON or not shaped like the envelope leave only the
    status code to report.
    """
    try:
        data = response.json()
    except ValueError:
        data = None

    error = data.get("error") if isinstance(data, dict) else None
    if not isinstance(error, dict):
        error = {}

    message = error.get("message")
    code = error.get("code")
    return Failure(
        FailureKind.API,
        str(message) if message else "",
        status_code=response.status_code,
        error_code=str(code) if code else None,
    )


def post_comment(api_key: str, reference: ResourceReference, body_text: str) -> CommentResult:
    """Create a comment on a Colabra task or project.

    Raises ``CommentActionError`` when the API answers with anything other
    than 200/201. Transport errors from ``requests`` propagate unchanged.
    """
    url = comments_url()
    response = requests.post(
        url,
        json=build_comment_payload(reference, body_text),
        headers=_colabra_headers(api_key),
        timeout=http_timeout(),
    )

    if response.status_code not in SUCCESS_STATUSES:
        logger.debug("POST %s returned %s: %s", url, response.status_code, response.text)
        raise CommentActionError(_api_failure(response))

    return CommentResult.from_dict(response.json())
