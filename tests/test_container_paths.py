"""Tests pour les chemins de configuration du container.

Ce module teste le choix du backend de stockage (mémoire, Redis, repli mémoire) selon les
paramètres Redis, et le câblage de la passerelle de traduction.
"""

from __future__ import annotations

import pytest
import redis

from locale_variants.core.container import Container, get_container
from locale_variants.core.settings import Settings
from locale_variants.infra.repositories import (
    InMemoryVariantGroupRepo,
    RedisVariantConfigRepo,
    RedisVariantGroupRepo,
)
from tests.fakes import FakeRedis

REDIS_URL = "redis://localhost:6379/0"
TEST_BATCH_WORKERS = 3


class UnreachableRedis(FakeRedis):
    def ping(self) -> bool:
        raise redis.ConnectionError("connection refused")


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def _patch_redis(monkeypatch, client) -> None:
    monkeypatch.setattr(redis.Redis, "from_url", classmethod(lambda cls, *a, **kw: client))


def test_container_memory_path() -> None:
    """Teste que le container utilise le backend mémoire par défaut."""
    c = Container(_settings())
    assert c.storage_backend == "memory"
    assert isinstance(c.group_repo, InMemoryVariantGroupRepo)


def test_container_redis_path(monkeypatch) -> None:
    """Teste l'usage de Redis quand il est joignable."""
    _patch_redis(monkeypatch, FakeRedis())
    c = Container(_settings(REDIS_URL=REDIS_URL))
    assert c.storage_backend == "redis"
    assert isinstance(c.group_repo, RedisVariantGroupRepo)
    assert isinstance(c.config_repo, RedisVariantConfigRepo)


def test_container_redis_unreachable_falls_back_to_memory(monkeypatch) -> None:
    """Teste le repli mémoire si Redis est injoignable et non exigé."""
    _patch_redis(monkeypatch, UnreachableRedis())
    c = Container(_settings(REDIS_URL=REDIS_URL))
    assert c.storage_backend == "memory-fallback"
    assert isinstance(c.group_repo, InMemoryVariantGroupRepo)


def test_container_require_redis_unreachable_raises(monkeypatch) -> None:
    """Teste l'erreur si Redis est exigé mais injoignable."""
    _patch_redis(monkeypatch, UnreachableRedis())
    with pytest.raises(RuntimeError):
        Container(_settings(REDIS_URL=REDIS_URL, REQUIRE_REDIS=True))


def test_container_require_redis_without_url_raises() -> None:
    """Teste l'erreur si Redis est exigé sans URL."""
    with pytest.raises(RuntimeError):
        Container(_settings(REQUIRE_REDIS=True))


def test_container_wires_translation_gateway() -> None:
    """Teste le câblage des fournisseurs et du détecteur de langue."""
    c = Container(
        _settings(TRANSLATION_DEFAULT_PROVIDER="deepl", TRANSLATION_BATCH_WORKERS=3)
    )
    assert set(c.providers) == {"openai", "groq", "google", "deepl"}
    assert c.translator.default_provider == "deepl"
    assert c.translator.max_workers == TEST_BATCH_WORKERS
    assert c.translator.detector is None

    with_key = Container(_settings(OPENAI_API_KEY="sk-test"))
    assert with_key.translator.detector is with_key.providers["openai"]


def test_get_container_is_shared() -> None:
    """Teste que le conteneur du processus est construit une seule fois."""
    assert get_container() is get_container()
