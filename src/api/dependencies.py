"""FastAPI dependencies."""

from functools import lru_cache

from src.config.settings import Settings, get_settings
from src.infrastructure.llm.client import OpenRouterClient

_shared_client: OpenRouterClient | None = None


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


def get_completion_client() -> OpenRouterClient:
    """
    Get or create the shared OpenRouter client.

    The underlying httpx connection pool is reused across requests.
    """
    global _shared_client
    if _shared_client is None:
        _shared_client = OpenRouterClient(get_settings_dependency())
    return _shared_client


async def close_completion_client() -> None:
    """Close the shared client. Called during application shutdown."""
    global _shared_client
    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
