"""
Constants, enums, and static values.
"""

from enum import Enum


class ChatRole(str, Enum):
    """Roles accepted in the chat history."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class Element(str, Enum):
    """The five elements scored on the radar, in display order."""

    FUEGO = "fuego"
    TIERRA = "tierra"
    METAL = "metal"
    AGUA = "agua"
    MADERA = "madera"


class PipelineStep(str, Enum):
    """Pipeline execution steps."""
    DIAGNOSIS = "diagnosis"
    MAESTRO_CHAT = "maestro_chat"


class AttemptOutcome(str, Enum):
    """How a single candidate model attempt ended."""
    SUCCESS = "success"
    RETRYABLE = "retryable"
    FATAL = "fatal"


# User-facing messages (the frontend shows these as-is)
MSG_MISSING_IMAGES = "Faltan las imágenes de las manos"
MSG_MISSING_CHAT_DATA = "Faltan datos para el chat"
MSG_NOT_CONFIGURED = "API Key no configurada"
MSG_API_ERROR = "Error en la API"
MSG_UNKNOWN_ERROR = "Error desconocido"
MSG_DIAGNOSIS_EXHAUSTED = "No se pudo obtener una respuesta de los modelos de IA"
MSG_CHAT_EXHAUSTED = "El Maestro Kong no puede conectarse en este momento."
MSG_MALFORMED_DIAGNOSIS = "La IA no respondió en el formato místico correcto."
MSG_EMPTY_CONTENT = "Respuesta vacía del modelo"
MSG_TIMEOUT = "Tiempo de espera agotado"
MSG_INVALID_REQUEST = "Solicitud inválida"

# Prompt interpolation defaults
DEFAULT_ORGANO = "No detectado"
DEFAULT_ELEMENTO = "Equilibrado"
