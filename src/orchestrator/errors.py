"""Failure kinds raised by the fallback pipelines.

Everything deriving from ``PipelineError`` is surfaced to the HTTP caller as
``{"error": ..., "details": ...}``. ``RetryableBackendError`` never leaves the
fallback loop: it only moves the loop on to the next candidate model.
"""

from typing import Any

from src.config.constants import MSG_API_ERROR, MSG_NOT_CONFIGURED, MSG_UNKNOWN_ERROR


class PipelineError(Exception):
    """Base class for failures reported to the caller."""

    status_code: int = 500

    def __init__(self, error: str, details: str | None = None):
        super().__init__(error)
        self.error = error
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class BadRequestError(PipelineError):
    """Required input fields are missing."""

    status_code = 400


class NotConfiguredError(PipelineError):
    """The upstream credential is absent."""

    def __init__(self, error: str = MSG_NOT_CONFIGURED):
        super().__init__(error)


class FatalBackendError(PipelineError):
    """Upstream returned a non-retryable status; remaining models are skipped."""

    def __init__(self, error: str = MSG_API_ERROR, *, model: str | None = None, upstream_status: int | None = None):
        super().__init__(error)
        self.model = model
        self.upstream_status = upstream_status


class PipelineExhaustedError(PipelineError):
    """Every candidate model failed retryably."""

    def __init__(self, error: str, details: str | None = None):
        super().__init__(error, details or MSG_UNKNOWN_ERROR)


class RetryableBackendError(Exception):
    """A candidate failed in a way another model may not."""


class UpstreamStatusError(RetryableBackendError):
    """429 or 5xx from upstream."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class UpstreamTransportError(RetryableBackendError):
    """Timeout or connection failure; there is no status code."""


class MalformedContentError(RetryableBackendError):
    """Success status, but the content is unusable."""
