import logging
from typing import Any

from src.brand_watch.config import GenerationOptions
from .base import BaseLLMClient

logger = logging.getLogger(__name__)


def extract_text(response: Any) -> str:
    """
    Récupère le texte d'une réponse generate_content.

    - d'abord l'accesseur `response.text` (le SDK lève ValueError si aucune Part valide)
    - sinon concatène candidates[0].content.parts[*].text
    - si toujours vide et que le prompt a été bloqué, on log le prompt_feedback
    """
    if isinstance(response, str):
        return response

    text = ""
    try:
        accessor = getattr(response, "text", None)
        text = (accessor() if callable(accessor) else accessor) or ""
        if not isinstance(text, str):
            text = str(text)
    except Exception as e:
        logger.debug("response.text indisponible: %s", e)

    if not text:
        candidates = getattr(response, "candidates", None) or []
        if candidates:
            content = getattr(candidates[0], "content", None)
            parts = getattr(content, "parts", None) or []
            text = "".join(getattr(p, "text", "") or "" for p in parts)

    if not text.strip():
        feedback = getattr(response, "prompt_feedback", None)
        if feedback:
            logger.info("Réponse vide, prompt_feedback=%s", feedback)

    return text


class GeminiClient(BaseLLMClient):
    name = "gemini"

    def __init__(self, api_key: str):
        if not api_key or not api_key.strip():
            raise ValueError("api_key cannot be empty")

        try:
            import google.generativeai as genai
        except ImportError:
            raise ImportError("pip install google-generativeai required for Gemini support")

        genai.configure(api_key=api_key)
        self._genai = genai

    def generate(self, model_id: str, prompt: str, options: GenerationOptions) -> Any:
        model = self._genai.GenerativeModel(
            model_id,
            generation_config=options.as_generation_config(),
        )
        return model.generate_content(prompt)

    def extract_text(self, response: Any) -> str:
        return extract_text(response)
