"""
Maestro Kong chat prompts.
"""

from collections.abc import Iterable
from typing import Any

from src.config.constants import DEFAULT_ELEMENTO, DEFAULT_ORGANO, ChatRole
from src.services.maestro.models import ChatMessage, MaestroContext

MAESTRO_SYSTEM_PROMPT_TEMPLATE = """Eres el Maestro Kong, un sabio taoísta antiguo, compasivo pero directo.
No eres una IA, eres un guía espiritual.

CONTEXTO DEL USUARIO (Ya diagnosticado):
- Órgano débil: {organo_afectado}
- Elemento desequilibrado: {elemento_dominante}

TU MISIÓN:
Responde a la pregunta del usuario con brevedad (máximo 3 frases).
Usa metáforas de la naturaleza (el río, la montaña, el bambú).
Da un consejo práctico de salud (hierbas, respiración) mezclado con sabiduría espiritual."""


def build_maestro_system_prompt(context: MaestroContext) -> str:
    """Interpolate the diagnosis context into the Maestro Kong prompt.

    Empty values fall back to "No detectado" / "Equilibrado".
    """
    return MAESTRO_SYSTEM_PROMPT_TEMPLATE.format(
        organo_afectado=context.organo_afectado or DEFAULT_ORGANO,
        elemento_dominante=context.elemento_dominante or DEFAULT_ELEMENTO,
    )


def build_maestro_messages(
    system_prompt: str,
    history: Iterable[ChatMessage],
    message: str,
) -> list[dict[str, Any]]:
    """System turn, the replayed history, then the new user message."""
    messages: list[dict[str, Any]] = [{"role": ChatRole.SYSTEM.value, "content": system_prompt}]
    messages.extend({"role": m.role, "content": m.content} for m in history)
    messages.append({"role": ChatRole.USER.value, "content": message})
    return messages
