"""
Retry classification for upstream chat-completion responses.
"""

import logging

logger = logging.getLogger(__name__)


RATE_LIMIT_STATUS = 429


def is_retryable_status(status_code: int) -> bool:
    """Check if a non-success HTTP status is worth trying on another model.

    Rate limits (429) and server errors (5xx) are transient upstream
    conditions. Every other failure status (bad request, auth, payment,
    unknown model...) will fail the same way on the next model, so it is
    treated as permanent.
    """
    return status_code == RATE_LIMIT_STATUS or 500 <= status_code <= 599


def is_success_status(status_code: int) -> bool:
    """2xx."""
    return 200 <= status_code <= 299
