# src/brand_watch/models/__init__.py
from __future__ import annotations
from typing import Optional

from .base import BaseLLMClient
from .gemini_client import GeminiClient
from src.brand_watch.config import Settings, settings as default_settings


def get_llm_client(cfg: Optional[Settings] = None) -> BaseLLMClient:
    """
    Construit le client Gemini à partir de la configuration.
    Lève ConfigError si la clé est absente ou encore au placeholder.
    """
    cfg = cfg or default_settings
    return GeminiClient(api_key=cfg.require_api_key())


__all__ = ["BaseLLMClient", "GeminiClient", "get_llm_client"]
