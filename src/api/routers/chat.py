"""Maestro Kong chat and health endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from src.api.dependencies import get_completion_client, get_settings_dependency
from src.api.models import ChatRequest, ChatResponse, ErrorResponse, HealthResponse
from src.api.response import build_error_response
from src.config.settings import Settings
from src.infrastructure.llm.client import OpenRouterClient
from src.orchestrator.errors import PipelineError
from src.services.maestro.service import MaestroChatPipeline

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(
    request: ChatRequest,
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    client: OpenRouterClient = Depends(get_completion_client),  # noqa: B008
) -> Any:
    """Ask Maestro Kong a follow-up question about the diagnosis."""
    pipeline = MaestroChatPipeline(settings, client)
    context = request.diagnosis.to_context() if request.diagnosis is not None else None
    try:
        outcome = await pipeline.reply(request.message, context, request.history)
    except PipelineError:
        raise
    except Exception as e:
        logger.error("Error fatal en /api/chat: %s", e, exc_info=True)
        return build_error_response(500, str(e))

    return ChatResponse(content=outcome.result)


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> HealthResponse:
    """Health check."""
    return HealthResponse(status="healthy", version=settings.app_version)
