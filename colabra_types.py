"""Data types shared by the Colabra comment action."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Union


class ResourceKind(str, Enum):
    TASK = "task"
    PROJECT = "project"

    @property
    def field_name(self) -> str:
        """Name of the request body field that carries the resource id."""
        return f"{self.value}_id"


@dataclass(frozen=True)
class ResourceReference:
    kind: ResourceKind
    identifier: str


def _parse_timestamp(value) -> Union[datetime, str, None]:
    if not isinstance(value, str):
        return value
    try:
        # fromisoformat() only learned the trailing "Z" in 3.11
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return value


@dataclass(frozen=True)
class CommentResult:
    """A comment as returned by ``POST /comments``."""

    id: str
    body_text: str
    created_at: Union[datetime, str, None] = None
    updated_at: Union[datetime, str, None] = None
    task_id: Optional[str] = None
    project_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CommentResult":
        if not isinstance(data, dict) or data.get("id") in (None, ""):
            raise ValueError("Malformed comment response: missing 'id'")

        return cls(
            id=str(data["id"]),
            body_text=data.get("body_text", ""),
            created_at=_parse_timestamp(data.get("created_at")),
            updated_at=_parse_timestamp(data.get("updated_at")),
            task_id=data.get("task_id"),
            project_id=data.get("project_id"),
        )


class FailureKind(Enum):
    VALIDATION = "validation"
    API = "api"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Failure:
    """Why a comment could not be posted.

    ``status_code`` and ``error_code`` are only set for ``FailureKind.API``.
    """

    kind: FailureKind
    message: str
    status_code: Optional[int] = None
    error_code: Optional[str] = None

    def describe(self) -> str:
        """Single human-readable line suitable for ``set_failed``."""
        if self.kind is not FailureKind.API:
            return self.message

        text = f"API Error ({self.status_code})"
        if self.message:
            text += f": {self.message}"
        if self.error_code:
            text += f" ({self.error_code})"
        return text


class CommentActionError(Exception):
    """Carries a :class:`Failure` from where it happens to the orchestrator."""

    def __init__(self, failure: Failure):
        super().__init__(failure.describe())
        self.failure = failure
