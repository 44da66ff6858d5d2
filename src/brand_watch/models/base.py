from abc import ABC, abstractmethod
from typing import Any

from src.brand_watch.config import GenerationOptions


class BaseLLMClient(ABC):
    name: str

    @abstractmethod
    def generate(self, model_id: str, prompt: str, options: GenerationOptions) -> Any:
        """Appelle le modèle et retourne la réponse brute (objet SDK ou str)."""

    @abstractmethod
    def extract_text(self, response: Any) -> str:
        """Extrait le texte d'une réponse brute; chaîne vide si rien d'exploitable."""
