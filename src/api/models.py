"""Request/Response models for API endpoints."""

from pydantic import BaseModel, Field

from src.services.diagnosis.models import NivelesRadar
from src.services.maestro.models import ChatMessage, MaestroContext


class AnalyzeRequest(BaseModel):
    """Request model for the diagnosis endpoint.

    Both images are optional here so that a missing hand is reported as a
    400 with the frontend's message instead of a validation error.
    """

    leftHand: str | None = Field(None, description="Left hand photo as a data-URI")
    rightHand: str | None = Field(None, description="Right hand photo as a data-URI")


class ChatDiagnosis(BaseModel):
    """Diagnosis facts the frontend sends along with each chat message."""

    organo_afectado: str | None = None
    elemento_dominante: str | None = None
    niveles_radar: NivelesRadar | None = Field(
        None, description="Used to derive elemento_dominante when it is not sent"
    )

    def to_context(self) -> MaestroContext:
        elemento = self.elemento_dominante
        if not elemento and self.niveles_radar is not None:
            elemento = self.niveles_radar.elemento_dominante()
        return MaestroContext(organo_afectado=self.organo_afectado, elemento_dominante=elemento)


class ChatRequest(BaseModel):
    """Request model for the Maestro Kong chat endpoint."""

    message: str | None = Field(None, description="User's question")
    diagnosis: ChatDiagnosis | None = Field(None, description="Context from the diagnosis")
    history: list[ChatMessage] = Field(default_factory=list, description="Prior turns, oldest first")


class ChatResponse(BaseModel):
    """Response model for the chat endpoint."""

    content: str = Field(..., description="Maestro Kong's reply")


class ErrorResponse(BaseModel):
    """Body of every failed request."""

    error: str = Field(..., description="User-facing error message")
    details: str | None = Field(None, description="Last upstream failure reason")


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
