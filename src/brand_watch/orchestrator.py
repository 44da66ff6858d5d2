# src/brand_watch/orchestrator.py
"""
Acquisition de la réponse: essaie les modèles candidats dans l'ordre, un seul
appel chacun, et retombe sur la réponse de secours si aucun ne produit de texte.

    PENDING -> TRYING(i) -> SUCCESS
                         -> TRYING(i+1)
                         -> EXHAUSTED   (plus de candidat: texte de secours)
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence

from src.brand_watch.config import GenerationOptions
from src.brand_watch.exceptions import GenerationError
from src.brand_watch.fallback import canned_text
from src.brand_watch.models.base import BaseLLMClient

logger = logging.getLogger(__name__)


class OrchestrationState(str, Enum):
    PENDING = "pending"
    TRYING = "trying"
    SUCCESS = "success"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class GenerationAttempt:
    model_id: str
    text: Optional[str]
    failed: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class GenerationOutcome:
    text: str
    model_used: Optional[str]
    used_fallback: bool

    def __post_init__(self):
        if (self.model_used is None) != self.used_fallback:
            raise ValueError("model_used must be None exactly when used_fallback is true")


class GenerationOrchestrator:
    def __init__(self, client: BaseLLMClient, fallback: Callable[[], str] = canned_text):
        self.client = client
        self.fallback = fallback

    def _attempt(self, model_id: str, prompt: str, options: GenerationOptions) -> GenerationAttempt:
        try:
            response = self.client.generate(model_id, prompt, options)
            text = self.client.extract_text(response)
            if not text or not text.strip():
                raise GenerationError(model_id, "empty response")
        except Exception as e:
            # quota, modèle indisponible, blocage sécurité, réponse mal formée...
            return GenerationAttempt(model_id=model_id, text=None, failed=True, error=str(e))
        return GenerationAttempt(model_id=model_id, text=text, failed=False)

    def generate(
        self,
        prompt: str,
        candidates: Sequence[str],
        options: GenerationOptions,
    ) -> GenerationOutcome:
        state = OrchestrationState.PENDING
        attempts: List[GenerationAttempt] = []
        index = 0
        success: Optional[GenerationAttempt] = None

        while state not in (OrchestrationState.SUCCESS, OrchestrationState.EXHAUSTED):
            if index >= len(candidates):
                state = OrchestrationState.EXHAUSTED
                continue

            state = OrchestrationState.TRYING
            attempt = self._attempt(candidates[index], prompt, options)
            attempts.append(attempt)

            if attempt.failed:
                logger.warning("Model %s failed, trying next option: %s", attempt.model_id, attempt.error)
                index += 1
            else:
                success = attempt
                state = OrchestrationState.SUCCESS

        if success is not None:
            logger.info("Successfully used model %s (%d characters)", success.model_id, len(success.text))
            return GenerationOutcome(text=success.text, model_used=success.model_id, used_fallback=False)

        logger.error(
            "All %d model options failed (%s), using canned response",
            len(attempts),
            ", ".join(a.model_id for a in attempts) or "no candidates",
        )
        return GenerationOutcome(text=self.fallback(), model_used=None, used_fallback=True)
