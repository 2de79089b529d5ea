"""Print session models."""

from enum import StrEnum

from pydantic import BaseModel


class AttemptState(StrEnum):
    """State of a print pass."""

    ATTEMPTING = "attempting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SessionOutcome(BaseModel):
    """Final result of a print session."""

    state: AttemptState = AttemptState.ATTEMPTING
    passes: int = 0
    copies_printed: int = 0
    last_error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.state == AttemptState.SUCCEEDED
