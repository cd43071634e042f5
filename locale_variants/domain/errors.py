"""Erreurs métier du domaine des variantes de locales.

Les services lèvent ces erreurs; la couche API les traduit en enveloppes HTTP standardisées
(voir `locale_variants.apigw.errors`).
"""

from __future__ import annotations

from typing import Any


class VariantError(Exception):
    """Erreur de base du domaine (message + détails optionnels)."""

    code = "VARIANT_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(VariantError):
    """Groupe ou configuration mal formé (locales vides, codes dupliqués...)."""

    code = "VALIDATION_ERROR"


class NotFound(VariantError):
    """Référence inconnue: groupe, locale absente du groupe ou configuration."""

    code = "NOT_FOUND"


class Conflict(VariantError):
    """Une configuration existe déjà pour le triplet (entrée, type de contenu, locale)."""

    code = "CONFLICT"


class TranslationError(VariantError):
    """Échec générique d'un fournisseur de traduction."""

    code = "TRANSLATION_FAILED"
