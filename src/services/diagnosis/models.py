"""Diagnosis service models."""

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt

from src.config.constants import Element

# Strict so the echoed report keeps the exact JSON types the model sent
Level = StrictInt | StrictFloat


class _ModelOutput(BaseModel):
    """Keys the model adds beyond the required ones are passed through."""

    model_config = ConfigDict(extra="allow")


class DiagnosticoWang(_ModelOutput):
    """Visual reading of the hands (Wang Chenxia method)."""

    observacion_visual: str
    organo_afectado: str
    significado_mtc: str


class NivelesRadar(_ModelOutput):
    """Five-element levels. Meant to be 0-100, not enforced."""

    fuego: Level
    tierra: Level
    metal: Level
    agua: Level
    madera: Level

    def elemento_dominante(self) -> str:
        """Element with the highest level; on ties the later element wins."""
        dominant = Element.FUEGO.value
        for element in Element:
            if getattr(self, element.value) >= getattr(self, dominant):
                dominant = element.value
        return dominant


class Cuadrante(_ModelOutput):
    titulo: str
    detalle: str


class CuadrantesIntegral(_ModelOutput):
    """Ken Wilber's four quadrants."""

    yo: Cuadrante
    ello: Cuadrante
    nosotros: Cuadrante
    ellos: Cuadrante


class DiagnosisResult(_ModelOutput):
    """Structured report returned by the diagnosis pipeline."""

    mensaje_maestro: str = Field(..., description="I Ching phrase for the detected energy")
    diagnostico_wang: DiagnosticoWang
    niveles_radar: NivelesRadar
    cuadrantes_integral: CuadrantesIntegral
