# backend/services/check_service.py
"""
Pipeline d'une requête: validation -> génération (avec repli) -> détection.

Après validation, le service répond toujours: une erreur inattendue donne
un résultat basé sur la réponse de secours avec errorOccurred=True.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Optional, Tuple

from src.brand_watch.brand.brand_models import DetectionResult
from src.brand_watch.brand.detector import detect
from src.brand_watch.config import Settings
from src.brand_watch.exceptions import ValidationError
from src.brand_watch.fallback import canned_text
from src.brand_watch.orchestrator import GenerationOrchestrator

from backend.schema import CheckResult, HealthOut

logger = logging.getLogger(__name__)


def validate_check_request(prompt: Any, brand_name: Any) -> Tuple[str, str]:
    if not prompt or not brand_name:
        raise ValidationError("Both prompt and brandName are required")
    if not isinstance(prompt, str) or not isinstance(brand_name, str):
        raise ValidationError("Prompt and brand name must be strings")
    if not prompt.strip() or not brand_name.strip():
        raise ValidationError("Prompt and brand name cannot be empty")
    return prompt, brand_name


def _to_result(
    prompt: str,
    brand_name: str,
    text: str,
    detection: DetectionResult,
    used_fallback: bool,
    error_occurred: bool = False,
) -> CheckResult:
    return CheckResult(
        prompt=prompt,
        brand_name=brand_name,
        mentioned="Yes" if detection.mentioned else "No",
        position=detection.position if detection.mentioned else None,
        generated_text=text,
        used_fallback=used_fallback,
        error_occurred=error_occurred,
    )


class BrandCheckService:
    def __init__(
        self,
        orchestrator: GenerationOrchestrator,
        settings: Settings,
        fallback: Callable[[], str] = canned_text,
    ):
        self.orchestrator = orchestrator
        self.settings = settings
        self.fallback = fallback

    def check(self, prompt: Any, brand_name: Any) -> CheckResult:
        prompt, brand_name = validate_check_request(prompt, brand_name)

        try:
            outcome = self.orchestrator.generate(
                prompt,
                self.settings.model_candidates,
                self.settings.generation_options(),
            )
            detection = detect(outcome.text, brand_name)
        except Exception:
            logger.exception("Unexpected error while checking brand %r", brand_name)
            return self._fallback_result(prompt, brand_name)

        return _to_result(prompt, brand_name, outcome.text, detection, used_fallback=outcome.used_fallback)

    def _fallback_result(self, prompt: str, brand_name: str) -> CheckResult:
        text = self.fallback()
        return _to_result(
            prompt,
            brand_name,
            text,
            detect(text, brand_name),
            used_fallback=True,
            error_occurred=True,
        )


def health_info(settings: Settings) -> HealthOut:
    return HealthOut(
        status="ok",
        model=settings.primary_model,
        model_options=settings.model_candidates,
        temperature=settings.TEMPERATURE,
    )


def build_check_service(settings: Settings, client: Optional[Any] = None) -> BrandCheckService:
    """Assemble client Gemini + orchestrateur (client injectable pour les tests)."""
    if client is None:
        from src.brand_watch.models import get_llm_client
        client = get_llm_client(settings)
    return BrandCheckService(GenerationOrchestrator(client), settings)
