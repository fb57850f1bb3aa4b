"""System prompts for the diagnosis and Maestro Kong pipelines."""

from src.config.prompts.diagnosis import (
    DIAGNOSIS_SYSTEM_PROMPT,
    DIAGNOSIS_USER_INSTRUCTIONS,
    build_diagnosis_messages,
)
from src.config.prompts.maestro import (
    MAESTRO_SYSTEM_PROMPT_TEMPLATE,
    build_maestro_messages,
    build_maestro_system_prompt,
)

__all__ = [
    "DIAGNOSIS_SYSTEM_PROMPT",
    "DIAGNOSIS_USER_INSTRUCTIONS",
    "MAESTRO_SYSTEM_PROMPT_TEMPLATE",
    "build_diagnosis_messages",
    "build_maestro_messages",
    "build_maestro_system_prompt",
]
