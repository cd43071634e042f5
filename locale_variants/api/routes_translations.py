"""
Routes de traduction: traduction unitaire et par lot, détection de langue et catalogues.

Ce module regroupe les endpoints `/translations`. Un échec fournisseur est renvoyé en 502
(`TRANSLATION_FAILED`) pour une traduction unitaire, et par élément pour un lot.
"""

from typing import Any

from fastapi import APIRouter

from locale_variants.api.deps import translator_dep
from locale_variants.api.schemas import (
    BatchTranslateIn,
    DetectLanguageIn,
    DetectLanguageOut,
    TranslateIn,
)
from locale_variants.domain.entities import BatchTranslationItem, TranslationResponse
from locale_variants.domain.languages import SUPPORTED_LANGUAGES
from locale_variants.services.translation_gateway import TranslationGateway

router = APIRouter(prefix="/translations", tags=["translations"])


@router.post("/translate", response_model=TranslationResponse)
def translate(payload: TranslateIn, translator: TranslationGateway = translator_dep):
    """
    Traduit un contenu.

    - `useAI` faux: chaque texte est encadré par `[TRANSLATE: ...]` (méthode "manual").
    - `useAI` vrai: appel du fournisseur `aiProvider` (défaut configuré), méthode "ai".
    """
    return translator.translate(payload)


@router.post("/batch", response_model=list[BatchTranslationItem])
def translate_batch(payload: BatchTranslateIn, translator: TranslationGateway = translator_dep):
    """Traduit jusqu'à 10 demandes; chaque élément rapporte son succès ou son erreur."""
    provider = payload.ai_config.provider if payload.ai_config else None
    return translator.translate_batch(list(payload.requests), provider)


@router.post("/detect-language", response_model=DetectLanguageOut)
def detect_language(payload: DetectLanguageIn, translator: TranslationGateway = translator_dep):
    return DetectLanguageOut(language=translator.detect_language(payload.text))


@router.get("/providers")
def list_providers(translator: TranslationGateway = translator_dep) -> list[dict[str, Any]]:
    """Fournisseurs configurés (clé API présente)."""
    return translator.available_providers()


@router.get("/supported-languages")
def supported_languages() -> list[dict[str, str]]:
    return SUPPORTED_LANGUAGES
