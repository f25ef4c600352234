import re

from colabra_types import (
    CommentActionError,
    Failure,
    FailureKind,
    ResourceKind,
    ResourceReference,
)

RESOURCE_ID_PATTERN = re.compile(r"(TSK|PRO)-\d+", re.ASCII)
RESOURCE_ID_ERROR = "resource_id must be in the format TSK-123 or PRO-123"

# Mapping of identifier prefixes to the resource they address
PREFIX_KINDS: dict = {
    "TSK": ResourceKind.TASK,
    "PRO": ResourceKind.PROJECT,
}


def parse_resource_id(resource_id: str) -> ResourceReference:
    """Classify a ``TSK-<n>`` / ``PRO-<n>`` identifier.

    Raises ``CommentActionError`` with a validation failure for any other
    shape, including lowercase prefixes and surrounding whitespace.
    """
    match = (
        RESOURCE_ID_PATTERN.fullmatch(resource_id)
        if isinstance(resource_id, str)
        else None
    )
    if match is None:
        raise CommentActionError(
            Failure(FailureKind.VALIDATION, RESOURCE_ID_ERROR)
        )

    return ResourceReference(PREFIX_KINDS[match.group(1)], resource_id)
