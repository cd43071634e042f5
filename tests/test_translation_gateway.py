"""
Tests pour la passerelle de traduction.

Ce module teste les chemins manuel et IA, la remontée des erreurs fournisseur, les lots avec
résultat par élément, la détection de langue et le catalogue des fournisseurs.
"""

from __future__ import annotations

import pytest

from locale_variants.domain.entities import TranslationRequest
from locale_variants.domain.errors import TranslationError
from locale_variants.services.translation_gateway import TranslationGateway
from tests.fakes import FailingProvider, FakeDetector, FakeProvider

# Constantes pour éviter les erreurs PLR2004 (Magic values)
AI_CONFIDENCE = 0.9
EXPECTED_COUNT_3 = 3

CONTENT = {"title": "Hello", "views": 10, "seo": {"tags": ["news", "sport"]}}


def _request(use_ai: bool = True, **extra) -> TranslationRequest:
    return TranslationRequest.model_validate(
        {
            "sourceLocale": "en",
            "targetLocale": "fr",
            "content": CONTENT,
            "contentTypeUid": "article",
            "useAI": use_ai,
            **extra,
        }
    )


def _gateway(**providers) -> TranslationGateway:
    providers = providers or {"openai": FakeProvider("openai")}
    return TranslationGateway(providers, default_provider="openai", max_workers=2)


def test_manual_translation_wraps_text_leaves() -> None:
    """Teste le chemin manuel: placeholder, méthode "manual", sans fournisseur."""
    provider = FakeProvider("openai")
    gateway = _gateway(openai=provider)

    response = gateway.translate(_request(use_ai=False))

    assert response.method == "manual"
    assert response.confidence == 1.0
    assert response.provider is None
    assert response.translated_content == {
        "title": "[TRANSLATE: Hello]",
        "views": 10,
        "seo": {"tags": ["[TRANSLATE: news]", "[TRANSLATE: sport]"]},
    }
    assert provider.calls == []


def test_ai_translation_reinjects_segments() -> None:
    """Teste le chemin IA: un seul appel fournisseur, forme du contenu conservée."""
    provider = FakeProvider("openai")
    gateway = _gateway(openai=provider)

    response = gateway.translate(_request())

    assert response.method == "ai"
    assert response.confidence == AI_CONFIDENCE
    assert response.provider == "openai"
    assert response.translated_content == {
        "title": "HELLO",
        "views": 10,
        "seo": {"tags": ["NEWS", "SPORT"]},
    }
    assert provider.calls == [("Hello\n---\nnews\n---\nsport", "en", "fr")]


def test_ai_translation_uses_requested_provider() -> None:
    """Teste la sélection du fournisseur demandé (alias `aiProvider`)."""
    deepl = FakeProvider("deepl", transform=lambda s: f"dl:{s}")
    gateway = _gateway(openai=FakeProvider("openai"), deepl=deepl)

    response = gateway.translate(_request(aiProvider="deepl"))

    assert response.provider == "deepl"
    assert response.translated_content["title"] == "dl:Hello"


def test_ai_translation_with_fewer_segments_keeps_originals() -> None:
    """Teste qu'une réponse tronquée laisse les textes non traduits en place."""
    gateway = _gateway(openai=FakeProvider("openai", transform=lambda s: s))
    gateway.providers["openai"].translate = lambda text, src, tgt: "Bonjour"

    response = gateway.translate(_request())

    assert response.translated_content == {
        "title": "Bonjour",
        "views": 10,
        "seo": {"tags": ["news", "sport"]},
    }


def test_ai_translation_ignores_extra_segments() -> None:
    """Teste qu'une réponse avec plus de segments que de textes ignore le surplus."""
    gateway = _gateway(openai=FakeProvider("openai"))
    gateway.providers["openai"].translate = lambda text, src, tgt: "\n---\n".join(
        ["Bonjour", "actu", "sport", "surplus", "encore"]
    )

    response = gateway.translate(_request())

    assert response.translated_content == {
        "title": "Bonjour",
        "views": 10,
        "seo": {"tags": ["actu", "sport"]},
    }


def test_ai_translation_without_text_skips_provider() -> None:
    """Teste qu'un contenu sans texte n'appelle pas le fournisseur."""
    provider = FakeProvider("openai")
    gateway = _gateway(openai=provider)

    response = gateway.translate(_request(content={"views": 1}))

    assert response.translated_content == {"views": 1}
    assert provider.calls == []


def test_provider_failure_raises_translation_error() -> None:
    """Teste la conversion d'une erreur fournisseur en `TranslationError`."""
    gateway = _gateway(openai=FailingProvider("openai"))

    with pytest.raises(TranslationError) as exc_info:
        gateway.translate(_request())

    assert "provider unreachable" in exc_info.value.message
    assert exc_info.value.details == {"provider": "openai"}


def test_unknown_provider_raises_translation_error() -> None:
    """Teste un fournisseur non enregistré."""
    gateway = _gateway(openai=FakeProvider("openai"))
    with pytest.raises(TranslationError):
        gateway.translate(_request(provider="google"))


def test_batch_reports_per_item_results_in_order() -> None:
    """Teste que chaque élément du lot rapporte son succès ou son échec, dans l'ordre."""
    gateway = _gateway(openai=FakeProvider("openai"), google=FailingProvider("google"))
    requests = [_request(), _request(provider="google"), _request(use_ai=False)]

    items = gateway.translate_batch(requests)

    assert [item.index for item in items] == [0, 1, 2]
    assert [item.ok for item in items] == [True, False, True]
    assert items[0].result.method == "ai"
    assert items[1].result is None
    assert "provider unreachable" in items[1].error
    assert items[2].result.method == "manual"


def test_batch_provider_override_applies_to_all_items() -> None:
    """Teste le fournisseur imposé à tout le lot."""
    groq = FakeProvider("groq")
    gateway = _gateway(openai=FakeProvider("openai"), groq=groq)

    items = gateway.translate_batch([_request() for _ in range(EXPECTED_COUNT_3)], "groq")

    assert all(item.ok and item.result.provider == "groq" for item in items)
    assert len(groq.calls) == EXPECTED_COUNT_3


def test_detect_language_uses_detector() -> None:
    """Teste la détection via le détecteur IA."""
    detector = FakeDetector(answer="fr")
    gateway = TranslationGateway({}, detector=detector)
    assert gateway.detect_language("Bonjour") == "fr"
    assert detector.calls == ["Bonjour"]


def test_detect_language_falls_back_to_heuristic_on_error() -> None:
    """Teste le repli heuristique si le détecteur échoue."""
    gateway = TranslationGateway({}, detector=FakeDetector(error=RuntimeError("quota")))
    assert gateway.detect_language("Привет") == "ru"


def test_detect_language_empty_answer_defaults_to_english() -> None:
    """Teste la valeur par défaut sur réponse vide du détecteur."""
    gateway = TranslationGateway({}, detector=FakeDetector(answer=""))
    assert gateway.detect_language("Hola") == "en"


def test_detect_language_without_detector_is_heuristic() -> None:
    """Teste la détection heuristique seule."""
    assert TranslationGateway({}).detect_language("こんにちは") == "ja"


def test_available_providers_lists_configured_only() -> None:
    """Teste que seuls les fournisseurs configurés sont listés."""
    gateway = _gateway(
        openai=FakeProvider("openai", configured=False),
        deepl=FakeProvider("deepl"),
    )

    providers = gateway.available_providers()

    assert [p["id"] for p in providers] == ["deepl"]
    assert providers[0] == {
        "id": "deepl",
        "name": "Fake Translator",
        "models": ["fake-1"],
        "features": ["deterministic"],
    }
