"""LLM infrastructure module."""

from src.infrastructure.llm.client import (
    OpenRouterClient,
    UpstreamResponse,
    extract_content,
    extract_error_message,
)

__all__ = [
    "OpenRouterClient",
    "UpstreamResponse",
    "extract_content",
    "extract_error_message",
]
