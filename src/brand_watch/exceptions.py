# src/brand_watch/exceptions.py
"""
Hiérarchie d'exceptions du service.

Seules ConfigError (fatale au démarrage) et ValidationError (HTTP 400) sortent
du pipeline; GenerationError est absorbée par l'orchestrateur.
"""


class BrandWatchError(Exception):
    """Classe de base de toutes les erreurs du projet."""


class ConfigError(BrandWatchError):
    """Configuration invalide (clé API absente ou placeholder)."""


class ValidationError(BrandWatchError):
    """Requête entrante invalide (prompt ou marque manquant / vide)."""


class GenerationError(BrandWatchError):
    """Un modèle candidat n'a pas produit de texte exploitable."""

    def __init__(self, model_id: str, message: str):
        super().__init__(f"{model_id}: {message}")
        self.model_id = model_id
