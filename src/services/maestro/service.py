"""Maestro Kong conversational pipeline."""

import logging
from collections.abc import Sequence

from src.config.constants import (
    MSG_CHAT_EXHAUSTED,
    MSG_EMPTY_CONTENT,
    MSG_MISSING_CHAT_DATA,
    PipelineStep,
)
from src.config.prompts import build_maestro_messages, build_maestro_system_prompt
from src.orchestrator.errors import BadRequestError, MalformedContentError
from src.orchestrator.pipeline import FallbackPipeline
from src.orchestrator.state import FallbackOutcome
from src.services.maestro.models import ChatMessage, MaestroContext

logger = logging.getLogger(__name__)


class MaestroChatPipeline(FallbackPipeline[str]):
    """Follow-up chat about an existing diagnosis."""

    name = PipelineStep.MAESTRO_CHAT.value
    exhausted_message = MSG_CHAT_EXHAUSTED

    def models(self) -> list[str]:
        return self.settings.chat_models

    def timeout(self) -> float:
        return self.settings.chat_timeout

    def parse(self, content: str | None) -> str:
        if not content or not content.strip():
            logger.error("[Maestro Kong] Respuesta vacía")
            raise MalformedContentError(MSG_EMPTY_CONTENT)
        return content

    async def reply(
        self,
        message: str | None,
        context: MaestroContext | None,
        history: Sequence[ChatMessage] = (),
    ) -> FallbackOutcome[str]:
        """
        Answer ``message`` in the Maestro Kong persona.

        The history is relayed as-is; it is neither stored nor checked.

        Raises:
            BadRequestError: message or diagnosis context missing
            NotConfiguredError, FatalBackendError, PipelineExhaustedError
        """
        if not message or context is None:
            raise BadRequestError(MSG_MISSING_CHAT_DATA)

        system_prompt = build_maestro_system_prompt(context)
        messages = build_maestro_messages(system_prompt, history, message)
        return await self.run(messages)
