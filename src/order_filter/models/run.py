"""Dispatch and run outcome models."""

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel


class RunStatus(str, Enum):
    """Outcome of a single order filter invocation."""

    COMPLETED = "completed"
    COMPLETED_WITH_ERRORS = "completed_with_errors"
    ABORTED = "aborted"


@dataclass
class DispatchReport:
    """Counts and failures collected while draining dispatch tasks."""

    submitted: int = 0
    completed: int = 0
    failed: int = 0
    failed_pages: list[int] = field(default_factory=list)
    last_error: str | None = None

    @property
    def succeeded(self) -> int:
        return self.completed - self.failed


class RunSummary(BaseModel):
    """Result of one invocation, returned to the scheduler trigger as JSON."""

    status: RunStatus
    pages: int = 0
    dispatched: int = 0
    failed: int = 0
    failed_pages: list[int] = []
    error: str | None = None
