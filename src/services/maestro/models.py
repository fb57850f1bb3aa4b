"""Maestro Kong chat models."""

from typing import Literal

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """One prior turn of the conversation, replayed by the frontend."""

    role: Literal["user", "assistant"]
    content: str


class MaestroContext(BaseModel):
    """Diagnosis facts interpolated into the Maestro Kong system prompt."""

    organo_afectado: str | None = None
    elemento_dominante: str | None = None
