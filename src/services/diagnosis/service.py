"""Hand-reading diagnosis pipeline."""

import logging

from pydantic import ValidationError

from src.config.constants import (
    MSG_DIAGNOSIS_EXHAUSTED,
    MSG_MALFORMED_DIAGNOSIS,
    MSG_MISSING_IMAGES,
    PipelineStep,
)
from src.config.prompts import build_diagnosis_messages
from src.orchestrator.errors import BadRequestError, MalformedContentError
from src.orchestrator.pipeline import FallbackPipeline
from src.orchestrator.state import FallbackOutcome
from src.services.diagnosis.models import DiagnosisResult
from src.utils.json_parser import JSONParser

logger = logging.getLogger(__name__)


class DiagnosisPipeline(FallbackPipeline[DiagnosisResult]):
    """Sends both hand photos to the diagnosis models and parses the JSON report."""

    name = PipelineStep.DIAGNOSIS.value
    exhausted_message = MSG_DIAGNOSIS_EXHAUSTED

    def models(self) -> list[str]:
        return self.settings.diagnosis_models

    def timeout(self) -> float:
        return self.settings.diagnosis_timeout

    def parse(self, content: str | None) -> DiagnosisResult:
        """
        Parse the model reply into a DiagnosisResult.

        Missing required keys count the same as invalid JSON: another model
        may comply with the format.
        """
        if not content:
            raise MalformedContentError(MSG_MALFORMED_DIAGNOSIS)
        try:
            data = JSONParser.extract_json(content)
            return DiagnosisResult.model_validate(data)
        except (ValueError, ValidationError) as e:
            logger.error("Error parseando JSON de la IA: %s (%s)", content[:500], e)
            raise MalformedContentError(MSG_MALFORMED_DIAGNOSIS) from e

    async def diagnose(
        self,
        left_hand: str | None,
        right_hand: str | None,
    ) -> FallbackOutcome[DiagnosisResult]:
        """
        Run a full hand reading.

        Raises:
            BadRequestError: either image is missing or empty
            NotConfiguredError, FatalBackendError, PipelineExhaustedError
        """
        logger.info("--- Iniciando Análisis Tao ---")
        if not left_hand or not right_hand:
            raise BadRequestError(MSG_MISSING_IMAGES)

        messages = build_diagnosis_messages(
            left_hand,
            right_hand,
            send_images=self.settings.diagnosis_send_images,
        )
        return await self.run(messages)
