"""Multi-model fallback pipeline.

A pipeline tries an ordered list of candidate models one at a time and
returns the first usable result:

* 429 / 5xx, timeouts, transport errors and unusable content are retryable:
  the reason overwrites ``last_error`` and the next model is tried.
* Any other failure status is fatal and aborts the whole run.
* When every candidate fails retryably the run ends with
  ``PipelineExhaustedError`` carrying the last recorded reason.

Subclasses only supply the candidate list, the timeout and ``parse``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from src.config.constants import MSG_API_ERROR, MSG_UNKNOWN_ERROR, AttemptOutcome
from src.config.settings import Settings
from src.infrastructure.llm.client import OpenRouterClient, extract_content, extract_error_message
from src.infrastructure.logging.logger import StructuredLogger
from src.orchestrator.errors import (
    FatalBackendError,
    NotConfiguredError,
    PipelineExhaustedError,
    RetryableBackendError,
    UpstreamStatusError,
)
from src.orchestrator.state import FallbackOutcome, FallbackState
from src.orchestrator.step_timer import timed_attempt
from src.utils.retry import is_retryable_status, is_success_status

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FallbackPipeline(ABC, Generic[T]):
    """Sequential first-success-wins loop over candidate models."""

    name: str = "pipeline"
    exhausted_message: str = MSG_UNKNOWN_ERROR

    def __init__(self, settings: Settings, client: OpenRouterClient):
        """Initialize pipeline with settings and the upstream client."""
        self.settings = settings
        self.client = client
        self.events = StructuredLogger(f"{__name__}.{self.name}")

    @abstractmethod
    def models(self) -> list[str]:
        """Candidate models in precedence order."""

    @abstractmethod
    def timeout(self) -> float:
        """Per-attempt timeout in seconds."""

    @abstractmethod
    def parse(self, content: str | None) -> T:
        """Turn message content into a result or raise MalformedContentError."""

    def ensure_configured(self) -> None:
        if not self.settings.openrouter_api_key:
            logger.error("[%s] Error: OPENROUTER_API_KEY no encontrada", self.name)
            raise NotConfiguredError()

    async def _attempt(self, model: str, messages: list[dict[str, Any]]) -> T:
        """Single candidate attempt. Raises retryable or fatal errors."""
        response = await self.client.complete(
            model,
            messages,
            timeout=self.timeout(),
            api_key=self.settings.openrouter_api_key,
        )

        if not is_success_status(response.status_code):
            message = extract_error_message(response.payload, MSG_API_ERROR)
            logger.error(
                "[%s] Error de API en modelo %s (status %s): %s",
                self.name,
                model,
                response.status_code,
                message,
            )
            if is_retryable_status(response.status_code):
                raise UpstreamStatusError(message, response.status_code)
            raise FatalBackendError(message, model=model, upstream_status=response.status_code)

        logger.info("[%s] Respuesta recibida de %s", self.name, model)
        return self.parse(extract_content(response.payload))

    async def run(self, messages: list[dict[str, Any]]) -> FallbackOutcome[T]:
        """
        Deliver ``messages`` through the candidate models.

        Returns:
            FallbackOutcome with the first parsed result and the winning model

        Raises:
            NotConfiguredError: no API key, checked once before any attempt
            FatalBackendError: a candidate returned a non-retryable status
            PipelineExhaustedError: every candidate failed retryably
        """
        self.ensure_configured()
        state = FallbackState(pipeline=self.name)

        for model in self.models():
            logger.info("[%s] Intentando con modelo: %s", self.name, model)
            result = None
            async with timed_attempt(self.name, model, self.events) as attempt:
                try:
                    result = await self._attempt(model, messages)
                except RetryableBackendError as e:
                    logger.warning("[%s] Fallo en el intento con %s: %s", self.name, model, e)
                    attempt.set_outcome(
                        AttemptOutcome.RETRYABLE,
                        reason=str(e),
                        status_code=getattr(e, "status_code", None),
                    )
                except FatalBackendError as e:
                    attempt.set_outcome(
                        AttemptOutcome.FATAL,
                        reason=e.error,
                        status_code=e.upstream_status,
                    )
                    state.record_failure(attempt.to_record())
                    self.events.log_error(self.name, e, context=state.summary())
                    raise
                else:
                    attempt.set_outcome(AttemptOutcome.SUCCESS, status_code=200)

            record = attempt.to_record()
            if record.outcome is AttemptOutcome.SUCCESS:
                state.record_success(record)
                self.events.log_step(f"{self.name}.complete", state.summary())
                return FallbackOutcome(result=result, model=model, attempts=state.attempts)
            state.record_failure(record)

        error = PipelineExhaustedError(self.exhausted_message, details=state.last_error)
        self.events.log_error(self.name, error, context=state.summary())
        raise error
