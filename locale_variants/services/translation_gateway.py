"""Passerelle de traduction: manuel (placeholder) ou IA via un fournisseur.

Objectif du module
------------------
- Traduire un arbre de contenu: mise à plat des feuilles texte, appel fournisseur, réinjection.
- Traiter des lots en parallèle avec un résultat explicite par élément.
- Détecter la langue d'un texte (IA si disponible, sinon heuristique).
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any

from locale_variants.app.metrics import (
    TRANSLATION_ERRORS,
    TRANSLATION_LATENCY,
    TRANSLATION_REQUESTS,
)
from locale_variants.core.logging import get_logger
from locale_variants.domain.content_text import (
    extract_segments,
    join_segments,
    manual_placeholder,
    reinject_segments,
    split_segments,
)
from locale_variants.domain.entities import (
    BatchTranslationItem,
    TranslationRequest,
    TranslationResponse,
)
from locale_variants.domain.errors import TranslationError
from locale_variants.domain.languages import DEFAULT_LANGUAGE, detect_language_heuristic
from locale_variants.infra.translation.base import TranslationProvider

MANUAL_CONFIDENCE = 1.0
AI_CONFIDENCE = 0.9


class TranslationGateway:
    """Aiguille les demandes de traduction vers le fournisseur choisi."""

    def __init__(
        self,
        providers: dict[str, TranslationProvider],
        *,
        default_provider: str = "openai",
        detector: Any | None = None,
        max_workers: int = 4,
    ) -> None:
        """Initialise la passerelle.

        Paramètres:
        - providers: fournisseurs indexés par identifiant (openai, groq, google, deepl).
        - default_provider: fournisseur utilisé quand la demande n'en précise pas.
        - detector: objet exposant `detect_language(text)` (None -> heuristique seule).
        - max_workers: parallélisme des traductions par lot.
        """
        self.providers = providers
        self.default_provider = default_provider
        self.detector = detector
        self.max_workers = max(1, max_workers)
        self._log = get_logger(__name__, "translation_gateway")

    def translate(
        self, request: TranslationRequest, provider: str | None = None
    ) -> TranslationResponse:
        """Traduit `request.content`.

        `use_ai` faux: placeholder `[TRANSLATE: ...]` sur chaque feuille (méthode "manual").
        `use_ai` vrai: appel du fournisseur `provider` > `request.provider` > défaut
        (méthode "ai"). Toute erreur est remontée en `TranslationError`.
        """
        if not request.use_ai:
            TRANSLATION_REQUESTS.labels("manual", "none").inc()
            return TranslationResponse(
                translated_content=manual_placeholder(request.content),
                confidence=MANUAL_CONFIDENCE,
                method="manual",
            )

        name = provider or request.provider or self.default_provider
        start = time.perf_counter()
        try:
            translated = self._translate_with_ai(request, name)
        except Exception as exc:
            TRANSLATION_ERRORS.labels(name).inc()
            self._log.error(
                "translation_failed",
                provider=name,
                source=request.source_locale,
                target=request.target_locale,
                error=str(exc),
            )
            raise TranslationError(
                f"Translation failed: {exc}", details={"provider": name}
            ) from exc
        TRANSLATION_REQUESTS.labels("ai", name).inc()
        TRANSLATION_LATENCY.labels("ai", name).observe(time.perf_counter() - start)
        return TranslationResponse(
            translated_content=translated,
            confidence=AI_CONFIDENCE,
            method="ai",
            provider=name,
        )

    def _translate_with_ai(self, request: TranslationRequest, name: str) -> dict[str, Any]:
        backend = self.providers.get(name)
        if backend is None:
            raise ValueError(f"Unsupported AI provider: {name}")
        segments = extract_segments(request.content)
        if not segments:
            return reinject_segments(request.content, [])
        translated_text = backend.translate(
            join_segments(segments), request.source_locale, request.target_locale
        )
        return reinject_segments(request.content, split_segments(translated_text))

    def translate_batch(
        self, requests: list[TranslationRequest], provider: str | None = None
    ) -> list[BatchTranslationItem]:
        """Traduit chaque demande indépendamment; un échec n'affecte pas les autres.

        Le résultat conserve l'ordre des demandes, avec `ok`/`error` par élément.
        """
        items: dict[int, BatchTranslationItem] = {}
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_index = {
                executor.submit(self.translate, req, provider): index
                for index, req in enumerate(requests)
            }
            for future in as_completed(future_to_index):
                index = future_to_index[future]
                try:
                    items[index] = BatchTranslationItem(index=index, ok=True, result=future.result())
                except TranslationError as exc:
                    items[index] = BatchTranslationItem(index=index, ok=False, error=exc.message)
        failed = sum(1 for item in items.values() if not item.ok)
        self._log.info("translation_batch_done", total=len(requests), failed=failed)
        return [items[index] for index in range(len(requests))]

    def detect_language(self, text: str) -> str:
        """Code ISO 639-1 de `text`; heuristique si aucun détecteur IA ou en cas d'échec."""
        if self.detector is None:
            return detect_language_heuristic(text)
        try:
            return self.detector.detect_language(text) or DEFAULT_LANGUAGE
        except Exception as exc:
            self._log.warning("language_detection_failed", error=str(exc))
            return detect_language_heuristic(text)

    def available_providers(self) -> list[dict[str, Any]]:
        """Fournisseurs configurés (clé API présente)."""
        return [p.describe() for p in self.providers.values() if p.configured]
