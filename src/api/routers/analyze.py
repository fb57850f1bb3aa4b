"""Hand-reading diagnosis endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Depends

from src.api.dependencies import get_completion_client, get_settings_dependency
from src.api.models import AnalyzeRequest, ErrorResponse
from src.api.response import build_error_response
from src.config.settings import Settings
from src.infrastructure.llm.client import OpenRouterClient
from src.orchestrator.errors import PipelineError
from src.services.diagnosis.service import DiagnosisPipeline

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/analyze",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def analyze(
    request: AnalyzeRequest,
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    client: OpenRouterClient = Depends(get_completion_client),  # noqa: B008
) -> Any:
    """
    Diagnose both hands.

    Returns the DiagnosisResult JSON of the first model that answers in the
    expected format.
    """
    pipeline = DiagnosisPipeline(settings, client)
    try:
        outcome = await pipeline.diagnose(request.leftHand, request.rightHand)
    except PipelineError:
        raise
    except Exception as e:
        logger.error("Error fatal en /api/analyze: %s", e, exc_info=True)
        return build_error_response(500, str(e))

    return outcome.result.model_dump(mode="json")
