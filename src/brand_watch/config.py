# src/brand_watch/config.py
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from dotenv import load_dotenv

from .exceptions import ConfigError

# Charger le .env depuis la racine du projet
load_dotenv()

PLACEHOLDER_API_KEY = "your_actual_api_key_here"

# Ordre de préférence: le moins cher / le plus rapide d'abord
DEFAULT_MODELS = "gemini-2.5-flash,gemini-2.5-pro,gemini-2.0-flash-exp"


def _split_csv(raw: Optional[str]) -> Tuple[str, ...]:
    return tuple(x.strip() for x in (raw or "").split(",") if x.strip())


@dataclass(frozen=True)
class GenerationOptions:
    temperature: float = 0.7
    max_output_tokens: int = 2048
    top_p: float = 0.95
    top_k: int = 40

    def as_generation_config(self) -> dict:
        """Format attendu par google.generativeai (generation_config=...)."""
        return {
            "temperature": self.temperature,
            "max_output_tokens": self.max_output_tokens,
            "top_p": self.top_p,
            "top_k": self.top_k,
        }


@dataclass(frozen=True)
class Settings:
    # Gemini
    GEMINI_API_KEY: Optional[str] = field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
    )
    MODEL_OPTIONS: Tuple[str, ...] = field(
        default_factory=lambda: _split_csv(os.getenv("GEMINI_MODELS", DEFAULT_MODELS))
    )

    # Paramètres de génération
    TEMPERATURE: float = field(default_factory=lambda: float(os.getenv("TEMPERATURE", "0.7")))
    MAX_OUTPUT_TOKENS: int = field(default_factory=lambda: int(os.getenv("MAX_OUTPUT_TOKENS", "2048")))
    TOP_P: float = field(default_factory=lambda: float(os.getenv("TOP_P", "0.95")))
    TOP_K: int = field(default_factory=lambda: int(os.getenv("TOP_K", "40")))

    # Serveur
    HOST: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    PORT: int = field(default_factory=lambda: int(os.getenv("PORT", "3001")))
    CORS_ORIGINS: Tuple[str, ...] = field(
        default_factory=lambda: _split_csv(os.getenv("CORS_ORIGINS", "*"))
    )
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    def __post_init__(self):
        # GEMINI_MODELS="" ne doit pas laisser /health sans modèle
        if not self.MODEL_OPTIONS:
            object.__setattr__(self, "MODEL_OPTIONS", _split_csv(DEFAULT_MODELS))

    @classmethod
    def from_env(cls) -> "Settings":
        """Relit l'environnement (utile après un load_dotenv ou un monkeypatch)."""
        return cls()

    @property
    def primary_model(self) -> Optional[str]:
        return self.MODEL_OPTIONS[0] if self.MODEL_OPTIONS else None

    @property
    def model_candidates(self) -> List[str]:
        return list(self.MODEL_OPTIONS)

    def generation_options(self) -> GenerationOptions:
        return GenerationOptions(
            temperature=self.TEMPERATURE,
            max_output_tokens=self.MAX_OUTPUT_TOKENS,
            top_p=self.TOP_P,
            top_k=self.TOP_K,
        )

    def require_api_key(self) -> str:
        """
        Retourne la clé Gemini ou lève ConfigError.
        Appelé au démarrage: le serveur ne doit pas servir sans clé valide.
        """
        key = (self.GEMINI_API_KEY or "").strip()
        if not key:
            raise ConfigError(
                "GEMINI_API_KEY is not set. Add GEMINI_API_KEY=... to your .env file "
                "(get a key from https://makersuite.google.com/app/apikey)."
            )
        if key == PLACEHOLDER_API_KEY:
            raise ConfigError("GEMINI_API_KEY still has the placeholder value. Update your .env file.")
        return key


settings = Settings()
