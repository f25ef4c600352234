"""
Colabra Comment Action
======================
Posts a comment to a Colabra task or project from a CI pipeline step.

Action inputs (read from ``INPUT_<NAME>`` environment variables):
  api_key         - Colabra API key
  workspace_slug  - Colabra workspace slug
  resource_id     - Task or project to comment on (TSK-123 / PRO-123)
  body_text       - Comment text, posted verbatim

Action outputs:
  comment_id      - ID of the created comment

Environment variables:
  COLABRA_API_BASE      - API base URL (default: https://api.colabra.ai/2024-01)
  COLABRA_HTTP_TIMEOUT  - Request timeout in seconds (default: 30)
  RUNNER_DEBUG          - Set to 1 for debug logging
"""

import logging
import sys
from typing import Optional

import actions_core
import colabra_client
from colabra_types import CommentActionError, Failure, FailureKind
from resource_id import parse_resource_id

UNEXPECTED_ERROR = "An unexpected error occurred"


def _unexpected_failure(exc: Exception) -> Failure:
    return Failure(FailureKind.UNEXPECTED, str(exc) or UNEXPECTED_ERROR)


def run_action() -> Optional[str]:
    """
    Post one comment and report the outcome to the Actions host.

    Returns the new comment id, or ``None`` once the failure has been
    reported through ``actions_core.set_failed``. Never raises.
    """
    try:
        api_key = actions_core.get_input("api_key", required=True)
        workspace_slug = actions_core.get_input("workspace_slug", required=True)
        resource_id = actions_core.get_input("resource_id", required=True)
        body_text = actions_core.get_input(
            "body_text", required=True, trim_whitespace=False
        )

        reference = parse_resource_id(resource_id)

        actions_core.debug(f"Workspace: {workspace_slug}")
        actions_core.debug(
            f"Creating comment on {reference.kind.value} {reference.identifier}"
        )
        comment = colabra_client.post_comment(api_key, reference, body_text)

        actions_core.debug("Comment created successfully")
        actions_core.set_output("comment_id", comment.id)
        actions_core.info(
            f"Successfully posted comment {comment.id} to "
            f"{reference.kind.value} {reference.identifier}"
        )
        return comment.id
    except CommentActionError as exc:
        failure = exc.failure
    except Exception as exc:
        failure = _unexpected_failure(exc)

    if failure.kind is FailureKind.VALIDATION:
        actions_core.debug("Rejected resource_id before contacting the API")
    elif failure.kind is FailureKind.API:
        actions_core.debug(f"Colabra API responded with {failure.status_code}")

    actions_core.set_failed(failure.describe())
    return None


def main() -> int:
    logging.basicConfig(
        level=logging.DEBUG if actions_core.is_debug() else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return 0 if run_action() is not None else 1


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
