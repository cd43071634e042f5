"""Fournisseurs de traduction appelés en REST via httpx (Google Translate v2, DeepL).

Variables de configuration utilisées:
  - `GOOGLE_TRANSLATE_API_KEY`: clé de l'API Google Translate v2
  - `DEEPL_API_KEY` / `DEEPL_API_URL`: clé et endpoint DeepL (offre gratuite par défaut)
"""

from __future__ import annotations

import httpx

from locale_variants.core.http_constants import (
    DEFAULT_CONNECT_TIMEOUT,
    MAX_CONNECTIONS,
    MAX_KEEPALIVE_CONNECTIONS,
)
from locale_variants.infra.translation.base import TranslationProvider

GOOGLE_TRANSLATE_URL = "https://translation.googleapis.com/language/translate/v2"


def build_http_client(timeout_seconds: float, headers: dict[str, str] | None = None) -> httpx.Client:
    """Client HTTP réutilisable (timeouts/pool)."""
    timeout = httpx.Timeout(timeout_seconds, connect=DEFAULT_CONNECT_TIMEOUT)
    limits = httpx.Limits(
        max_keepalive_connections=MAX_KEEPALIVE_CONNECTIONS, max_connections=MAX_CONNECTIONS
    )
    return httpx.Client(headers=headers or {}, timeout=timeout, limits=limits)


class GoogleTranslateProvider(TranslationProvider):
    """Google Translate v2 (`POST /language/translate/v2?key=...`)."""

    name = "google"
    display_name = "Google Translate"
    mock_label = "Google"
    models = ("google-translate",)
    features = ("100+ languages", "reliable", "fast")

    def __init__(
        self,
        api_key: str | None = None,
        *,
        client: httpx.Client | None = None,
        timeout_seconds: float = 10.0,
        url: str = GOOGLE_TRANSLATE_URL,
    ) -> None:
        self.api_key = api_key or ""
        self.url = url
        self._client = client or build_http_client(timeout_seconds)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def translate(self, text: str, source_locale: str, target_locale: str) -> str:
        if not self.api_key:
            return self.mock_translation(text, source_locale, target_locale)
        resp = self._client.post(
            self.url,
            params={"key": self.api_key},
            json={"q": text, "source": source_locale, "target": target_locale, "format": "text"},
        )
        resp.raise_for_status()
        return resp.json()["data"]["translations"][0]["translatedText"]


class DeepLProvider(TranslationProvider):
    """DeepL (`POST /v2/translate`, authentification `DeepL-Auth-Key`)."""

    name = "deepl"
    display_name = "DeepL"
    mock_label = "DeepL"
    models = ("deepl-translate",)
    features = ("high-quality", "european-languages", "context-aware")

    def __init__(
        self,
        api_key: str | None = None,
        *,
        client: httpx.Client | None = None,
        timeout_seconds: float = 10.0,
        url: str = "https://api-free.deepl.com/v2/translate",
    ) -> None:
        self.api_key = api_key or ""
        self.url = url
        self._client = client or build_http_client(timeout_seconds)

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def translate(self, text: str, source_locale: str, target_locale: str) -> str:
        if not self.api_key:
            return self.mock_translation(text, source_locale, target_locale)
        resp = self._client.post(
            self.url,
            headers={"Authorization": f"DeepL-Auth-Key {self.api_key}"},
            data={
                "text": text,
                "source_lang": source_locale.upper(),
                "target_lang": target_locale.upper(),
            },
        )
        resp.raise_for_status()
        return resp.json()["translations"][0]["text"]
