"""Fallback loop state model."""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from src.config.constants import AttemptOutcome

T = TypeVar("T")


@dataclass
class AttemptRecord:
    """One candidate model attempt."""

    model: str
    outcome: AttemptOutcome
    reason: Optional[str] = None
    status_code: Optional[int] = None
    duration_ms: Optional[float] = None


@dataclass
class FallbackState:
    """State owned by a single pipeline invocation.

    Only the most recent failure reason is kept in ``last_error``; earlier
    reasons survive only in ``attempts`` for logging.
    """

    pipeline: str
    last_error: Optional[str] = None
    winner: Optional[str] = None
    attempts: List[AttemptRecord] = field(default_factory=list)

    def record_failure(self, record: AttemptRecord) -> None:
        self.attempts.append(record)
        self.last_error = record.reason

    def record_success(self, record: AttemptRecord) -> None:
        self.attempts.append(record)
        self.winner = record.model

    @property
    def tried_models(self) -> List[str]:
        return [a.model for a in self.attempts]

    def summary(self) -> dict[str, Any]:
        return {
            "pipeline": self.pipeline,
            "winner": self.winner,
            "last_error": self.last_error,
            "attempts": [
                {"model": a.model, "outcome": a.outcome.value, "status_code": a.status_code}
                for a in self.attempts
            ],
        }


@dataclass
class FallbackOutcome(Generic[T]):
    """Result of a successful pipeline run."""

    result: T
    model: str
    attempts: List[AttemptRecord]
