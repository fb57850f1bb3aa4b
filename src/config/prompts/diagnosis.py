"""
Diagnosis (hand reading) system prompt.
"""

from typing import Any

from src.config.constants import ChatRole

DIAGNOSIS_SYSTEM_PROMPT = """Actúa como el Gran Maestro Wang Chenxia (Diagnóstico por la mano) y Ken Wilber (Visión Integral).
Tu tarea es hacer una DISECCIÓN VISUAL de estas manos (Izquierda=Ancestral/Yin, Derecha=Actual/Yang).

⚠️ INSTRUCCIONES VISUALES (NO ALUCINES):
1. Busca EVIDENCIA FÍSICA: Lunares, manchas, venas azules, líneas rotas, islas, color de uñas.
2. CONTRASTA: ¿Qué cambió de la izquierda a la derecha?
3. MÉTODO WANG: Si diagnosticas "Hígado", debes decir "porque veo un tono azulado en el monte de Marte".

FORMATO JSON OBLIGATORIO (Responde SOLO esto, sin texto antes ni después):
{
  "mensaje_maestro": "Frase del I Ching basada en la energía detectada.",
  "diagnostico_wang": {
    "observacion_visual": "Texto detallado describiendo las marcas físicas reales que ves en las fotos.",
    "organo_afectado": "Órgano principal (Ej: Hígado, Corazón, Riñón).",
    "significado_mtc": "Explicación técnica de Medicina Tradicional China."
  },
  "niveles_radar": {
    "fuego": 50, "tierra": 50, "metal": 50, "agua": 50, "madera": 50
  },
  "cuadrantes_integral": {
    "yo": { "titulo": "Mente (Yo)", "detalle": "Estado psicológico individual visible." },
    "ello": { "titulo": "Cuerpo (Ello)", "detalle": "Estado biológico y físico." },
    "nosotros": { "titulo": "Ancestros (Nosotros)", "detalle": "Cargas familiares o linaje (Mano Izquierda)." },
    "ellos": { "titulo": "Entorno (Ellos)", "detalle": "Impacto social/laboral actual (Mano Derecha)." }
  }
}"""

DIAGNOSIS_USER_INSTRUCTIONS = (
    "El usuario ha enviado fotos de ambas manos (izquierda y derecha). "
    "Realiza un diagnóstico completo basado en los principios de Wang Chenxia "
    "y la Psicología Integral de Ken Wilber. Genera valores realistas y variados "
    "para los niveles de radar. Responde estrictamente en formato JSON."
)


def build_diagnosis_messages(
    left_hand: str,
    right_hand: str,
    send_images: bool = True,
) -> list[dict[str, Any]]:
    """Build the chat-completion message list for a hand reading.

    Args:
        left_hand: Data-URI of the left hand photo (ancestral / Yin).
        right_hand: Data-URI of the right hand photo (current / Yang).
        send_images: Attach both photos as ``image_url`` parts. When False
            only the instructions are sent.

    Returns:
        System turn followed by one user turn.
    """
    if send_images:
        user_content: str | list[dict[str, Any]] = [
            {"type": "text", "text": DIAGNOSIS_USER_INSTRUCTIONS},
            {"type": "image_url", "image_url": {"url": left_hand}},
            {"type": "image_url", "image_url": {"url": right_hand}},
        ]
    else:
        user_content = DIAGNOSIS_USER_INSTRUCTIONS

    return [
        {"role": ChatRole.SYSTEM.value, "content": DIAGNOSIS_SYSTEM_PROMPT},
        {"role": ChatRole.USER.value, "content": user_content},
    ]
