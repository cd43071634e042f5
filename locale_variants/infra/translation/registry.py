"""Construction de l'ensemble des fournisseurs de traduction à partir de la configuration."""

from __future__ import annotations

from locale_variants.core.settings import Settings
from locale_variants.infra.translation.base import TranslationProvider
from locale_variants.infra.translation.http_providers import (
    DeepLProvider,
    GoogleTranslateProvider,
)
from locale_variants.infra.translation.openai_provider import OpenAIChatProvider


def build_providers(settings: Settings) -> dict[str, TranslationProvider]:
    """Instancie openai, groq, google et deepl (factices si leur clé est absente)."""
    openai = OpenAIChatProvider(
        api_key=settings.OPENAI_API_KEY,
        model=settings.OPENAI_MODEL,
        temperature=settings.TRANSLATION_TEMPERATURE,
        max_tokens=settings.TRANSLATION_MAX_TOKENS,
    )
    groq = OpenAIChatProvider(
        name="groq",
        display_name="Groq (Llama)",
        mock_label="Groq",
        api_key=settings.GROQ_API_KEY,
        model=settings.GROQ_MODEL,
        base_url=settings.GROQ_BASE_URL,
        temperature=settings.TRANSLATION_TEMPERATURE,
        max_tokens=settings.TRANSLATION_MAX_TOKENS,
        models=("llama3-8b-8192", "llama3-70b-8192"),
        features=("fast", "cost-effective", "open-source"),
    )
    google = GoogleTranslateProvider(
        settings.GOOGLE_TRANSLATE_API_KEY, timeout_seconds=settings.HTTP_TIMEOUT_SECONDS
    )
    deepl = DeepLProvider(
        settings.DEEPL_API_KEY,
        timeout_seconds=settings.HTTP_TIMEOUT_SECONDS,
        url=settings.DEEPL_API_URL,
    )
    return {p.name: p for p in (openai, groq, google, deepl)}
