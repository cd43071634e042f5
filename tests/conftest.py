"""Configuration de test pour pytest avec gestion des chemins.

Ce module ajoute la racine du projet au sys.path, isole les tests des variables d'environnement
du poste (clés API, Redis) et fournit les fixtures communes: services sur dépôts mémoire,
conteneur dédié et client HTTP de test.
"""

import os
import sys

import pytest

# Ensure project root is on sys.path so that
# imports like `from locale_variants...` resolve.
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from fastapi.testclient import TestClient  # noqa: E402

from locale_variants.app.main import create_app  # noqa: E402
from locale_variants.core.container import Container  # noqa: E402
from locale_variants.core.settings import Settings  # noqa: E402
from locale_variants.infra.repositories import (  # noqa: E402
    InMemoryVariantConfigRepo,
    InMemoryVariantGroupRepo,
)
from locale_variants.services.fallback_resolver import FallbackResolver  # noqa: E402
from locale_variants.services.variant_configs import VariantConfigService  # noqa: E402
from locale_variants.services.variant_groups import VariantGroupService  # noqa: E402
from tests.fakes import FakeClock  # noqa: E402

ISOLATED_ENV_KEYS = (
    "REDIS_URL",
    "REQUIRE_REDIS",
    "OPENAI_API_KEY",
    "GROQ_API_KEY",
    "GOOGLE_TRANSLATE_API_KEY",
    "DEEPL_API_KEY",
    "TRANSLATION_DEFAULT_PROVIDER",
    "ENV_FILE",
)


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Retire les clés API et la configuration Redis de l'environnement du poste."""
    for key in ISOLATED_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def groups(clock):
    return VariantGroupService(InMemoryVariantGroupRepo(), clock=clock)


@pytest.fixture
def configs(groups, clock):
    return VariantConfigService(InMemoryVariantConfigRepo(), groups, clock=clock)


@pytest.fixture
def resolver(groups, configs):
    return FallbackResolver(groups, configs)


@pytest.fixture
def indic_group_payload():
    """Groupe mr -> hi -> en, hi -> en, en (racine)."""
    return {
        "name": "Indic",
        "description": "Marathi falls back to Hindi then English",
        "locales": [
            {"code": "en", "name": "English", "fallback": [], "isDefault": True},
            {"code": "hi", "name": "Hindi", "fallback": ["en"]},
            {"code": "mr", "name": "Marathi", "fallback": ["hi", "en"]},
        ],
    }


@pytest.fixture
def test_settings():
    """Settings sans clé API ni Redis, sans lecture de fichier .env."""
    return Settings(_env_file=None, APP_DEBUG=False, REDIS_URL=None, REQUIRE_REDIS=False)


@pytest.fixture
def container(test_settings):
    return Container(test_settings)


@pytest.fixture
def client(container):
    return TestClient(create_app(container))
