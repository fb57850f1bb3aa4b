"""OpenRouter chat-completion client."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from src.config.constants import MSG_TIMEOUT
from src.config.settings import Settings
from src.orchestrator.errors import UpstreamTransportError

logger = logging.getLogger(__name__)


@dataclass
class UpstreamResponse:
    """Status and decoded JSON body of one chat-completion call."""

    status_code: int
    payload: dict[str, Any] = field(default_factory=dict)


def extract_error_message(payload: dict[str, Any], default: str) -> str:
    """Read ``error.message`` from an upstream error body."""
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    if isinstance(error, str) and error:
        return error
    return default


def extract_content(payload: dict[str, Any]) -> str | None:
    """Read ``choices[0].message.content``; None when any level is missing."""
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) else None


class OpenRouterClient:
    """Thin async wrapper over the OpenRouter ``/chat/completions`` endpoint.

    One instance is shared across requests; it holds no per-request state.
    The bearer key is passed per call by the pipeline.
    """

    def __init__(self, settings: Settings, http_client: httpx.AsyncClient | None = None):
        self.settings = settings
        self._http = http_client or httpx.AsyncClient()

    @property
    def url(self) -> str:
        return f"{self.settings.openrouter_base_url.rstrip('/')}/chat/completions"

    def _headers(self, api_key: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.settings.openrouter_referer,
            "X-Title": self.settings.app_name,
        }

    async def complete(
        self,
        model: str,
        messages: list[dict[str, Any]],
        timeout: float,
        api_key: str,
    ) -> UpstreamResponse:
        """
        POST one chat completion for ``model``.

        ``api_key`` comes from the calling pipeline's settings, so the key that
        was checked is the key that is sent.

        ``response_format`` is not sent: several free models reject it, so
        the JSON shape is requested through the prompt instead.

        Raises:
            UpstreamTransportError: timeout or any request-level failure
                (connection, protocol, body decoding, redirects)
        """
        body = {"model": model, "messages": messages}

        try:
            response = await asyncio.wait_for(
                self._http.post(self.url, json=body, headers=self._headers(api_key), timeout=timeout),
                timeout=timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise UpstreamTransportError(f"{MSG_TIMEOUT} ({timeout:.0f}s) con {model}") from e
        except httpx.RequestError as e:
            raise UpstreamTransportError(str(e) or type(e).__name__) from e

        try:
            payload = response.json()
        except ValueError:
            logger.warning("Non-JSON body from %s (status %s)", model, response.status_code)
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        return UpstreamResponse(status_code=response.status_code, payload=payload)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "OpenRouterClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
