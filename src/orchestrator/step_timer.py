"""Async context manager for timing and logging candidate model attempts."""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.config.constants import AttemptOutcome
from src.infrastructure.logging.logger import StructuredLogger
from src.orchestrator.state import AttemptRecord


class AttemptContext:
    """Mutable context for a timed attempt."""

    def __init__(self, model: str) -> None:
        self.model = model
        self.outcome: AttemptOutcome | None = None
        self.reason: str | None = None
        self.status_code: int | None = None
        self.duration_ms: float | None = None

    def set_outcome(
        self,
        outcome: AttemptOutcome,
        *,
        reason: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.outcome = outcome
        self.reason = reason
        if status_code is not None:
            self.status_code = status_code

    def to_record(self) -> AttemptRecord:
        return AttemptRecord(
            model=self.model,
            outcome=self.outcome or AttemptOutcome.RETRYABLE,
            reason=self.reason,
            status_code=self.status_code,
            duration_ms=self.duration_ms,
        )


@asynccontextmanager
async def timed_attempt(
    step: str,
    model: str,
    logger: StructuredLogger,
) -> AsyncGenerator[AttemptContext, None]:
    """Time one model attempt and log how it ended."""
    ctx = AttemptContext(model)
    start = time.perf_counter()
    try:
        yield ctx
    finally:
        ctx.duration_ms = (time.perf_counter() - start) * 1000
        logger.log_step(
            step,
            {
                "model": model,
                "outcome": ctx.outcome.value if ctx.outcome else None,
                "status_code": ctx.status_code,
                "reason": ctx.reason,
            },
            duration_ms=ctx.duration_ms,
        )
