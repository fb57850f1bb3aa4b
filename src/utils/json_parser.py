"""
JSON Parser utility for extracting JSON from LLM responses.
"""
import json
import logging
import re
from typing import Dict, Any

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```(?:json)?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"```$")


def strip_code_fences(text: str) -> str:
    """Remove a markdown code fence wrapping the whole text, if any."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _LEADING_FENCE.sub("", cleaned, count=1)
        cleaned = _TRAILING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


class JSONParser:
    """Helper class to extract clean JSON from LLM responses."""

    @staticmethod
    def extract_json(text: str) -> Dict[str, Any]:
        """
        Parse a JSON object out of a model reply.

        Optional ```json fences are removed first. Prose around the object is
        not tolerated: a model that ignores the format is the caller's signal
        to try another model.

        Raises:
            ValueError: text is not a JSON object
        """
        if not isinstance(text, str):
            raise ValueError(f"Expected text, got {type(text).__name__}")
        cleaned = strip_code_fences(text)
        try:
            data = json.loads(cleaned)
        except json.JSONDecodeError as e:
            logger.warning("JSONParser: could not parse model reply: %s", text[:500])
            raise ValueError(f"Invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        return data
