# src/brand_watch/fallback.py
"""Réponse de secours quand aucun modèle Gemini ne répond."""

CANNED_RESPONSE = """Here are some popular options in the market:
1. Leading industry solutions
2. Well-established platforms
3. Innovative tools and services
4. Cost-effective alternatives
5. Enterprise-grade solutions

These represent various options available for your needs."""


def canned_text() -> str:
    return CANNED_RESPONSE
